"""
RouteResult construction shared by the algorithm adapters.
"""

import logging
import math
from typing import Mapping, Optional, Sequence

import numpy as np

from src.pathfinding.exceptions import ReconstructionError
from src.pathfinding.graph import Graph
from src.pathfinding.reconstruction import (
    build_route_segments,
    path_from_next_hops,
    path_from_predecessors,
)
from src.route_engine.schemas.route import RouteResult

logger = logging.getLogger(__name__)


def endpoints_known(graph: Graph, start: str, end: str) -> bool:
    """True if both airports are in the graph; logs the miss otherwise."""
    missing = [code for code in (start, end) if not graph.has_node(code)]
    if missing:
        logger.debug("Unknown airport(s) %s; no route", ", ".join(missing))
        return False
    return True


def route_from_predecessors(
    graph: Graph,
    start: str,
    end: str,
    distances: Mapping[str, float],
    previous: Mapping[str, Optional[str]],
    algorithm: str,
) -> Optional[RouteResult]:
    """
    Build a RouteResult from single-source search tables.

    Returns:
        None if end was not reached, or if the predecessor chain loops
        (a negative cycle left the tables inconsistent).
    """
    if math.isinf(distances.get(end, math.inf)):
        return None

    try:
        path = path_from_predecessors(previous, start, end)
    except ReconstructionError as e:
        logger.warning("No usable %s route: %s", algorithm, e)
        return None

    edges, _ = build_route_segments(graph, path)
    return RouteResult.from_edges(path, edges, algorithm=algorithm)


def route_from_next_hops(
    graph: Graph,
    start: str,
    end: str,
    codes: Sequence[str],
    dist: np.ndarray,
    next_hop: np.ndarray,
    algorithm: str,
) -> Optional[RouteResult]:
    """
    Build a RouteResult from all-pairs matrices.

    Returns:
        None if end is unreachable from start, or if the next-hop chain
        cannot be followed.
    """
    index = {code: i for i, code in enumerate(codes)}
    if np.isinf(dist[index[start], index[end]]):
        return None

    try:
        path = path_from_next_hops(codes, next_hop, start, end)
    except ReconstructionError as e:
        logger.warning("No usable %s route: %s", algorithm, e)
        return None

    edges, _ = build_route_segments(graph, path)
    return RouteResult.from_edges(path, edges, algorithm=algorithm)
