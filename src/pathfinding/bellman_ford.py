"""
Relaxation-based shortest path search (Bellman-Ford).

Tolerates negative edge weights. Negative-cycle detection is off by
default: connection distances are never negative in practice, and the
extra pass is only run when explicitly requested.
"""

from __future__ import annotations

import logging
import math
from typing import List, Tuple

from .dijkstra import DistanceTable, PredecessorTable
from .exceptions import NegativeCycleError
from .graph import Edge, Graph

logger = logging.getLogger(__name__)


def bellman_ford(
    graph: Graph,
    start: str,
    detect_negative_cycles: bool = False,
) -> Tuple[DistanceTable, PredecessorTable]:
    """
    Relax every edge |V| - 1 times starting from start.

    All passes always run; there is no early exit on reaching a
    destination, since later passes may still shorten it.

    Args:
        graph: Airport graph.
        start: Origin airport code.
        detect_negative_cycles: Run one extra pass and raise if any
            distance still improves.

    Returns:
        (distances, previous) for every airport.

    Raises:
        NegativeCycleError: Only when detect_negative_cycles is True.
    """
    distances: DistanceTable = {code: math.inf for code in graph.codes}
    previous: PredecessorTable = {code: None for code in graph.codes}

    if not graph.has_node(start):
        return distances, previous

    distances[start] = 0.0
    all_edges: List[Edge] = list(graph.edges())
    passes = max(graph.node_count - 1, 0)

    for _ in range(passes):
        for edge in all_edges:
            candidate = distances[edge.source] + edge.distance_km
            if candidate < distances[edge.target]:
                distances[edge.target] = candidate
                previous[edge.target] = edge.source

    if detect_negative_cycles:
        for edge in all_edges:
            if distances[edge.source] + edge.distance_km < distances[edge.target]:
                raise NegativeCycleError(edge.target)

    logger.debug(
        "Bellman-Ford from %s: %d passes over %d edges",
        start,
        passes,
        len(all_edges),
    )
    return distances, previous
