"""
Tests for the RouteFinder algorithm adapters.

Tests cover:
- Common RouteResult shape across all four algorithms
- Agreement on total distance (cross-algorithm property)
- Inactive connections, unknown and unreachable airports
- Registry name and alias resolution
"""

import logging

import pytest

from src.pathfinding.exceptions import NegativeCycleError
from src.pathfinding.graph import Graph, ParallelEdgePolicy
from src.route_engine.adapters.algorithms import (
    AStarRouteFinder,
    BellmanFordRouteFinder,
    DijkstraRouteFinder,
    FloydWarshallRouteFinder,
    available_algorithms,
    get_route_finder,
    resolve_algorithm_name,
)
from src.route_engine.exceptions import UnknownAlgorithmError
from src.route_engine.ports.route_finder import RouteFinder
from src.route_engine.schemas.route import RouteResult
from tests.helpers import make_airport, make_connections, random_network

ALL_FINDERS = [
    DijkstraRouteFinder(),
    AStarRouteFinder(),
    BellmanFordRouteFinder(),
    FloydWarshallRouteFinder(),
]


@pytest.fixture(params=ALL_FINDERS, ids=lambda f: f.name)
def finder(request) -> RouteFinder:
    return request.param


def assert_well_formed(result: RouteResult, start: str, end: str) -> None:
    assert result.path[0] == start
    assert result.path[-1] == end
    assert len(result.path) == len(result.segments) + 1
    assert result.total_distance == pytest.approx(sum(s.distance_km for s in result.segments))
    for segment, (source, target) in zip(result.segments, zip(result.path, result.path[1:])):
        assert (segment.source, segment.target) == (source, target)


# =============================================================================
# SHAPE AND EDGE CASES (every algorithm)
# =============================================================================


class TestEveryFinder:
    """Behaviour shared by all four algorithms."""

    def test_shortest_route(self, finder, diamond_graph):
        result = finder.find_route(diamond_graph, "AAA", "DDD")

        assert result.path == ("AAA", "BBB", "DDD")
        assert result.total_distance == 2.0
        assert result.algorithm == finder.name
        assert_well_formed(result, "AAA", "DDD")

    def test_reverse_direction(self, finder, diamond_graph):
        result = finder.find_route(diamond_graph, "DDD", "AAA")

        assert result.path == ("DDD", "BBB", "AAA")
        assert result.total_distance == 2.0

    def test_start_equals_end(self, finder, diamond_graph):
        result = finder.find_route(diamond_graph, "CCC", "CCC")

        assert result.path == ("CCC",)
        assert result.segments == ()
        assert result.total_distance == 0.0

    @pytest.mark.parametrize("start,end", [("XYZ", "AAA"), ("AAA", "XYZ"), ("XYZ", "XYZ")])
    def test_unknown_airport_is_no_route(self, finder, diamond_graph, start, end):
        assert finder.find_route(diamond_graph, start, end) is None

    def test_unreachable_is_no_route(self, finder):
        graph = Graph(
            [make_airport("AAA"), make_airport("BBB"), make_airport("CCC")],
            make_connections([("AAA", "BBB", 5.0)]),
        )
        assert finder.find_route(graph, "AAA", "CCC") is None

    def test_all_connections_inactive(self, finder):
        graph = Graph(
            [make_airport("AAA"), make_airport("BBB")],
            make_connections([("AAA", "BBB", 5.0, False)]),
        )
        assert finder.find_route(graph, "AAA", "BBB") is None

    def test_inactive_connection_never_used(self, finder):
        """The short inactive hop is ignored; the route detours via CCC."""
        graph = Graph(
            [make_airport(c) for c in ("AAA", "BBB", "CCC")],
            make_connections(
                [
                    ("AAA", "BBB", 1.0, False),
                    ("AAA", "CCC", 5.0),
                    ("CCC", "BBB", 5.0),
                ]
            ),
        )
        result = finder.find_route(graph, "AAA", "BBB")

        assert result.path == ("AAA", "CCC", "BBB")
        assert result.total_distance == 10.0

    def test_self_loop_ignored(self, finder):
        graph = Graph(
            [make_airport("AAA"), make_airport("BBB")],
            make_connections([("AAA", "AAA", 3.0), ("AAA", "BBB", 4.0)]),
        )
        result = finder.find_route(graph, "AAA", "BBB")

        assert result.path == ("AAA", "BBB")
        assert result.total_distance == 4.0

    def test_explicit_reverse_connection_not_double_counted(self, finder):
        graph = Graph(
            [make_airport("AAA"), make_airport("BBB")],
            make_connections([("AAA", "BBB", 7.0), ("BBB", "AAA", 7.0)]),
        )
        result = finder.find_route(graph, "BBB", "AAA")

        assert result.num_segments == 1
        assert result.total_distance == 7.0

    def test_parallel_edges_minimum_policy(self, finder):
        """With MINIMUM, the reported hop matches the distance searched on."""
        graph = Graph(
            [make_airport("AAA"), make_airport("BBB")],
            make_connections([("AAA", "BBB", 10.0), ("AAA", "BBB", 4.0)]),
            parallel_edge_policy=ParallelEdgePolicy.MINIMUM,
        )
        result = finder.find_route(graph, "AAA", "BBB")

        assert result.total_distance == 4.0

    def test_parallel_edges_first_policy(self, finder):
        """With FIRST, the hop is reported with the first-inserted edge."""
        graph = Graph(
            [make_airport("AAA"), make_airport("BBB")],
            make_connections([("AAA", "BBB", 10.0), ("AAA", "BBB", 4.0)]),
        )
        result = finder.find_route(graph, "AAA", "BBB")

        assert result.segments[0].distance_km == 10.0
        assert result.total_distance == 10.0


# =============================================================================
# CROSS-ALGORITHM AGREEMENT
# =============================================================================


class TestAlgorithmsAgree:
    """All four algorithms agree on distance for non-negative, unambiguous graphs."""

    @pytest.mark.parametrize("seed", range(8))
    def test_random_networks(self, seed):
        airports, connections = random_network(seed)
        graph = Graph(airports, connections)
        codes = [a.code for a in airports]

        for start in codes[:4]:
            for end in codes:
                results = [f.find_route(graph, start, end) for f in ALL_FINDERS]

                if results[0] is None:
                    assert all(r is None for r in results)
                    continue

                expected = results[0].total_distance
                for result in results:
                    assert_well_formed(result, start, end)
                    assert result.total_distance == pytest.approx(expected)

    def test_heuristic_search_matches_dijkstra_on_real_coordinates(self):
        airports = [
            make_airport("DEL", 28.556, 77.100),
            make_airport("BOM", 19.089, 72.865),
            make_airport("BLR", 13.198, 77.706),
            make_airport("MAA", 12.99, 80.17),
            make_airport("CCU", 22.65, 88.44),
        ]
        connections = make_connections(
            [
                ("DEL", "BOM", 1138.0),
                ("DEL", "BLR", 1720.0),
                ("DEL", "CCU", 1330.0),
                ("BOM", "BLR", 843.0),
                ("BLR", "MAA", 290.0),
                ("CCU", "MAA", 1400.0),
            ]
        )
        graph = Graph(airports, connections)

        dijkstra_result = DijkstraRouteFinder().find_route(graph, "DEL", "MAA")
        astar_result = AStarRouteFinder().find_route(graph, "DEL", "MAA")

        assert astar_result.total_distance == pytest.approx(dijkstra_result.total_distance)
        assert astar_result.path == ("DEL", "BLR", "MAA")


# =============================================================================
# ALGORITHM-SPECIFIC OPTIONS
# =============================================================================


class TestAStarHeuristicFactory:
    def test_custom_heuristic_factory(self, diamond_graph):
        calls = []

        def factory(graph, end):
            calls.append(end)
            return lambda code: 0.0

        result = AStarRouteFinder(heuristic_factory=factory).find_route(
            diamond_graph, "AAA", "DDD"
        )

        assert calls == ["DDD"]
        assert result.total_distance == 2.0


class TestBellmanFordCycles:
    @pytest.fixture
    def negative_graph(self):
        return Graph(
            [make_airport("AAA"), make_airport("BBB")],
            make_connections([("AAA", "BBB", -1.0)]),
        )

    def test_detection_off_by_default(self, negative_graph):
        result = BellmanFordRouteFinder().find_route(negative_graph, "AAA", "BBB")

        assert result.path == ("AAA", "BBB")
        assert result.total_distance == -1.0

    def test_detection_enabled_raises(self, negative_graph):
        finder = BellmanFordRouteFinder(detect_negative_cycles=True)

        with pytest.raises(NegativeCycleError):
            finder.find_route(negative_graph, "AAA", "BBB")

    def test_looping_predecessors_are_no_route(self, caplog):
        """A negative hop past the first airport leaves C and B pointing at each other."""
        graph = Graph(
            [make_airport("AAA"), make_airport("BBB"), make_airport("CCC")],
            make_connections([("AAA", "BBB", 1.0), ("BBB", "CCC", -1.0)]),
        )

        with caplog.at_level(logging.WARNING):
            result = BellmanFordRouteFinder().find_route(graph, "AAA", "CCC")

        assert result is None
        assert "predecessor chain contains a cycle" in caplog.text

    def test_looping_predecessors_with_detection_raise(self):
        graph = Graph(
            [make_airport("AAA"), make_airport("BBB"), make_airport("CCC")],
            make_connections([("AAA", "BBB", 1.0), ("BBB", "CCC", -1.0)]),
        )

        with pytest.raises(NegativeCycleError):
            BellmanFordRouteFinder(detect_negative_cycles=True).find_route(graph, "AAA", "CCC")


# =============================================================================
# REGISTRY
# =============================================================================


class TestRegistry:
    def test_available_algorithms(self):
        assert available_algorithms() == ["dijkstra", "astar", "bellmanford", "floydwarshall"]

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("dijkstra", DijkstraRouteFinder),
            ("uninformed", DijkstraRouteFinder),
            ("ASTAR", AStarRouteFinder),
            ("heuristic", AStarRouteFinder),
            ("a*", AStarRouteFinder),
            ("bellmanford", BellmanFordRouteFinder),
            ("relaxation", BellmanFordRouteFinder),
            ("bellman-ford", BellmanFordRouteFinder),
            ("floydwarshall", FloydWarshallRouteFinder),
            ("all-pairs", FloydWarshallRouteFinder),
            (" floyd-warshall ", FloydWarshallRouteFinder),
        ],
    )
    def test_get_route_finder(self, name, expected):
        assert isinstance(get_route_finder(name), expected)

    def test_resolve_alias(self):
        assert resolve_algorithm_name("relaxation") == "bellmanford"

    def test_unknown_algorithm(self):
        with pytest.raises(UnknownAlgorithmError) as exc_info:
            get_route_finder("bfs")

        assert exc_info.value.name == "bfs"
        assert "dijkstra" in str(exc_info.value)
        assert isinstance(exc_info.value, ValueError)

    def test_finders_fresh_per_call(self):
        assert get_route_finder("dijkstra") is not get_route_finder("dijkstra")
