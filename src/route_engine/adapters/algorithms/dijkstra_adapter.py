"""
Dijkstra Algorithm Adapter - label-setting search behind the RouteFinder port.
"""

from typing import Optional

from src.pathfinding.dijkstra import dijkstra
from src.pathfinding.graph import Graph
from src.route_engine.adapters.algorithms.route_builder import (
    endpoints_known,
    route_from_predecessors,
)
from src.route_engine.ports.route_finder import RouteFinder
from src.route_engine.schemas.route import RouteResult


class DijkstraRouteFinder(RouteFinder):
    """
    Uninformed label-setting search.

    Stops as soon as the destination is settled. Assumes non-negative
    distances.
    """

    @property
    def name(self) -> str:
        """Algorithm identifier."""
        return "dijkstra"

    def find_route(self, graph: Graph, start: str, end: str) -> Optional[RouteResult]:
        if not endpoints_known(graph, start, end):
            return None

        distances, previous = dijkstra(graph, start, end)
        return route_from_predecessors(graph, start, end, distances, previous, self.name)
