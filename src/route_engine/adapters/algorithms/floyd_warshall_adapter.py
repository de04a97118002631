"""
Floyd-Warshall Algorithm Adapter - all-pairs search behind the RouteFinder port.
"""

import logging
from typing import Optional

from src.pathfinding.floyd_warshall import floyd_warshall
from src.pathfinding.graph import Graph
from src.route_engine.adapters.algorithms.route_builder import (
    endpoints_known,
    route_from_next_hops,
)
from src.route_engine.ports.route_finder import RouteFinder
from src.route_engine.schemas.route import RouteResult

logger = logging.getLogger(__name__)


class FloydWarshallRouteFinder(RouteFinder):
    """
    All-pairs search; computes every distance to answer one query.

    Kept for comparison with the single-source algorithms, not for speed.
    """

    @property
    def name(self) -> str:
        """Algorithm identifier."""
        return "floydwarshall"

    def find_route(self, graph: Graph, start: str, end: str) -> Optional[RouteResult]:
        if not endpoints_known(graph, start, end):
            return None

        codes, dist, next_hop = floyd_warshall(graph)
        logger.debug(
            "Floyd-Warshall answered %s -> %s from a %d-airport matrix",
            start,
            end,
            len(codes),
        )
        return route_from_next_hops(graph, start, end, codes, dist, next_hop, self.name)
