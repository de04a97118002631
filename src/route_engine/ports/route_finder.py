"""
Route Finder port interface.

Defines the abstract contract for shortest-path algorithms.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from src.pathfinding.graph import Graph
    from src.route_engine.schemas.route import RouteResult


class RouteFinder(ABC):
    """
    Abstract interface for route finding algorithms.

    Every implementation takes the same Graph and returns the same
    RouteResult shape; only the traversal strategy differs. Per-search
    state (distance tables, open/closed sets) lives inside one call.

    Implementations:
    - DijkstraRouteFinder: label-setting search
    - AStarRouteFinder: great-circle guided search
    - BellmanFordRouteFinder: edge relaxation, tolerates negative weights
    - FloydWarshallRouteFinder: all-pairs matrices
    """

    @abstractmethod
    def find_route(
        self,
        graph: Graph,
        start: str,
        end: str,
    ) -> Optional[RouteResult]:
        """
        Find the shortest route from start to end.

        Args:
            graph: Airport graph built for this request.
            start: Origin airport IATA code.
            end: Destination airport IATA code.

        Returns:
            RouteResult, or None if either airport is unknown or end is
            unreachable. start == end yields a single-airport route.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Algorithm identifier.

        Returns:
            Registry name of the algorithm (e.g. 'dijkstra').
        """
        ...
