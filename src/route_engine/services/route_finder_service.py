"""
Route Finder Service - Domain orchestrator for route computation.

Coordinates the interaction between:
- Graph (built fresh from the caller's airports and connections)
- RouteFinder (algorithm adapter)
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Iterable, Optional

from src.pathfinding.graph import Graph, ParallelEdgePolicy

if TYPE_CHECKING:
    from src.route_engine.ports.route_finder import RouteFinder
    from src.route_engine.schemas.network import Airport, Connection
    from src.route_engine.schemas.route import RouteResult

logger = logging.getLogger(__name__)


class RouteFinderService:
    """
    Domain service for computing the shortest route between two airports.

    Orchestrates one search:
    1. Builds a Graph from the supplied airports and connections
    2. Delegates the search to the algorithm adapter
    3. Logs timing

    Holds no per-request state, so one instance can serve concurrent
    callers.

    Attributes:
        _route_finder: Algorithm adapter.
        _parallel_edge_policy: Tie-break for parallel edges when reporting hops.
    """

    def __init__(
        self,
        route_finder: RouteFinder,
        parallel_edge_policy: ParallelEdgePolicy = ParallelEdgePolicy.FIRST,
    ) -> None:
        """
        Initialize the route finder service.

        Args:
            route_finder: Algorithm adapter (e.g., DijkstraRouteFinder).
            parallel_edge_policy: Passed to every Graph this service builds.
        """
        self._route_finder = route_finder
        self._parallel_edge_policy = parallel_edge_policy

    def build_graph(
        self,
        airports: Iterable[Airport],
        connections: Iterable[Connection],
    ) -> Graph:
        return Graph(airports, connections, parallel_edge_policy=self._parallel_edge_policy)

    def find_route(
        self,
        airports: Iterable[Airport],
        connections: Iterable[Connection],
        start: str,
        end: str,
    ) -> Optional[RouteResult]:
        """
        Build a graph and search it.

        Args:
            airports: Airport nodes.
            connections: Stored connections; inactive ones are ignored.
            start: Origin airport code.
            end: Destination airport code.

        Returns:
            RouteResult, or None when no route exists.
        """
        start_time = time.perf_counter()

        graph = self.build_graph(airports, connections)
        graph_time = time.perf_counter() - start_time

        result = self.find_route_in_graph(graph, start, end)

        total_time = time.perf_counter() - start_time
        logger.info(
            "Route search %s -> %s (%s): %s in %.3fms (graph: %.3fms)",
            start,
            end,
            self._route_finder.name,
            f"{result.total_distance:.1f} km" if result else "no route",
            total_time * 1000,
            graph_time * 1000,
        )
        return result

    def find_route_in_graph(self, graph: Graph, start: str, end: str) -> Optional[RouteResult]:
        """Search an already built graph."""
        return self._route_finder.find_route(graph, start, end)

    @property
    def algorithm_name(self) -> str:
        """Get name of the underlying algorithm."""
        return self._route_finder.name
