"""
Bellman-Ford Algorithm Adapter - edge relaxation behind the RouteFinder port.
"""

from typing import Optional

from src.pathfinding.bellman_ford import bellman_ford
from src.pathfinding.graph import Graph
from src.route_engine.adapters.algorithms.route_builder import (
    endpoints_known,
    route_from_predecessors,
)
from src.route_engine.ports.route_finder import RouteFinder
from src.route_engine.schemas.route import RouteResult


class BellmanFordRouteFinder(RouteFinder):
    """
    Relaxation-based search that accepts negative distances.

    Connections are bidirectional, so any negative connection forms a
    negative cycle. Without detection, a destination whose predecessor
    chain loops through such a cycle is reported as no route.

    Attributes:
        _detect_negative_cycles: If True, raise NegativeCycleError when a
            negative cycle is reachable instead of returning whatever the
            |V| - 1 passes produced. Off by default.
    """

    def __init__(self, detect_negative_cycles: bool = False) -> None:
        self._detect_negative_cycles = detect_negative_cycles

    @property
    def name(self) -> str:
        """Algorithm identifier."""
        return "bellmanford"

    def find_route(self, graph: Graph, start: str, end: str) -> Optional[RouteResult]:
        """
        Raises:
            NegativeCycleError: Only with detect_negative_cycles enabled.
        """
        if not endpoints_known(graph, start, end):
            return None

        distances, previous = bellman_ford(
            graph,
            start,
            detect_negative_cycles=self._detect_negative_cycles,
        )
        return route_from_predecessors(graph, start, end, distances, previous, self.name)
