"""
Heuristic-guided shortest path search (A*).

The default heuristic is the great-circle distance to the destination.
It never overestimates a flown route, so results match Dijkstra as long
as no connection is shorter than the straight line between its airports.
"""

from __future__ import annotations

import heapq
import itertools
import logging
import math
from typing import Callable, List, Optional, Set, Tuple

from .dijkstra import DistanceTable, PredecessorTable
from .graph import Graph
from .haversine import airport_distance_km

logger = logging.getLogger(__name__)

Heuristic = Callable[[str], float]


def great_circle_heuristic(graph: Graph, end: str) -> Heuristic:
    """Build h(code) = great-circle km from code to end."""
    target = graph.node(end)

    def _h(code: str) -> float:
        node = graph.node(code)
        if node is None or target is None:
            return 0.0
        return airport_distance_km(node, target)

    return _h


def astar(
    graph: Graph,
    start: str,
    end: str,
    heuristic: Optional[Heuristic] = None,
) -> Tuple[DistanceTable, PredecessorTable]:
    """
    Run A* from start to end.

    Closed airports are never reopened.

    Args:
        graph: Airport graph.
        start: Origin airport code.
        end: Destination airport code.
        heuristic: Estimate of remaining km from a code to end.
            Defaults to great_circle_heuristic(graph, end).

    Returns:
        (g_score, previous), same shape as dijkstra().
    """
    g_score: DistanceTable = {code: math.inf for code in graph.codes}
    previous: PredecessorTable = {code: None for code in graph.codes}

    if not graph.has_node(start) or not graph.has_node(end):
        return g_score, previous

    h = heuristic or great_circle_heuristic(graph, end)

    g_score[start] = 0.0
    open_set: Set[str] = {start}
    closed_set: Set[str] = set()

    counter = itertools.count()
    frontier: List[Tuple[float, int, str]] = [(h(start), next(counter), start)]

    while frontier:
        _, _, current = heapq.heappop(frontier)
        if current not in open_set:
            continue  # stale entry for an already closed airport
        if current == end:
            break

        open_set.discard(current)
        closed_set.add(current)

        for edge in graph.neighbors(current):
            neighbor = edge.target
            if neighbor in closed_set:
                continue

            tentative = g_score[current] + edge.distance_km
            if neighbor in open_set and tentative >= g_score[neighbor]:
                continue

            previous[neighbor] = current
            g_score[neighbor] = tentative
            open_set.add(neighbor)
            heapq.heappush(frontier, (tentative + h(neighbor), next(counter), neighbor))

    logger.debug(
        "A* %s -> %s closed %d airports, distance=%.3f",
        start,
        end,
        len(closed_set),
        g_score[end],
    )
    return g_score, previous
