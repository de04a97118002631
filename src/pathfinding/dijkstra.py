"""
Label-setting shortest path search (Dijkstra).

Requires non-negative edge weights; use bellman_ford for anything else.
"""

from __future__ import annotations

import heapq
import itertools
import logging
import math
from typing import Dict, List, Optional, Set, Tuple

from .graph import Graph

logger = logging.getLogger(__name__)

DistanceTable = Dict[str, float]
PredecessorTable = Dict[str, Optional[str]]


def dijkstra(
    graph: Graph,
    start: str,
    end: str,
) -> Tuple[DistanceTable, PredecessorTable]:
    """
    Run Dijkstra from start until end is settled or the frontier is empty.

    Args:
        graph: Airport graph.
        start: Origin airport code.
        end: Destination airport code.

    Returns:
        (distances, previous). Unreached airports keep distance inf and
        predecessor None. If start is not in the graph nothing is reached.
    """
    distances: DistanceTable = {code: math.inf for code in graph.codes}
    previous: PredecessorTable = {code: None for code in graph.codes}

    if not graph.has_node(start):
        return distances, previous

    distances[start] = 0.0
    visited: Set[str] = set()

    # (distance, insertion order, code); the counter keeps ties deterministic
    counter = itertools.count()
    frontier: List[Tuple[float, int, str]] = [(0.0, next(counter), start)]

    while frontier:
        dist, _, current = heapq.heappop(frontier)
        if current in visited:
            continue  # stale entry
        if current == end:
            break

        visited.add(current)

        for edge in graph.neighbors(current):
            if edge.target in visited:
                continue
            alt = dist + edge.distance_km
            if alt < distances[edge.target]:
                distances[edge.target] = alt
                previous[edge.target] = current
                heapq.heappush(frontier, (alt, next(counter), edge.target))

    logger.debug(
        "Dijkstra %s -> %s settled %d airports, distance=%.3f",
        start,
        end,
        len(visited),
        distances.get(end, math.inf),
    )
    return distances, previous
