"""
A* Algorithm Adapter - heuristic-guided search behind the RouteFinder port.
"""

from typing import Callable, Optional

from src.pathfinding.astar import Heuristic, astar, great_circle_heuristic
from src.pathfinding.graph import Graph
from src.route_engine.adapters.algorithms.route_builder import (
    endpoints_known,
    route_from_predecessors,
)
from src.route_engine.ports.route_finder import RouteFinder
from src.route_engine.schemas.route import RouteResult

HeuristicFactory = Callable[[Graph, str], Heuristic]


class AStarRouteFinder(RouteFinder):
    """
    A* search ordered by distance so far plus estimated distance left.

    Attributes:
        _heuristic_factory: Builds h(code) for a graph and destination.
            Defaults to great-circle distance, which is admissible for
            real flight distances.
    """

    def __init__(self, heuristic_factory: Optional[HeuristicFactory] = None) -> None:
        self._heuristic_factory = heuristic_factory or great_circle_heuristic

    @property
    def name(self) -> str:
        """Algorithm identifier."""
        return "astar"

    def find_route(self, graph: Graph, start: str, end: str) -> Optional[RouteResult]:
        if not endpoints_known(graph, start, end):
            return None

        heuristic = self._heuristic_factory(graph, end)
        g_score, previous = astar(graph, start, end, heuristic=heuristic)
        return route_from_predecessors(graph, start, end, g_score, previous, self.name)
