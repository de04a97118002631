"""
All-pairs shortest paths (Floyd-Warshall).

Computes the full distance and next-hop matrices with numpy; each
iteration over the intermediate airport k is vectorized across all
(i, j) pairs. Costs O(|V|^3) per call, so it is the slowest choice for
a single query.
"""

from __future__ import annotations

import logging
from typing import List, Tuple

import numpy as np

from .graph import Graph

logger = logging.getLogger(__name__)

# Marker for "no next hop" in the next-hop matrix
NO_HOP = -1


def floyd_warshall(graph: Graph) -> Tuple[List[str], np.ndarray, np.ndarray]:
    """
    Compute all-pairs distances and next hops.

    The diagonal starts at 0 and a self-loop only replaces it when its
    weight is negative. Parallel edges keep the lightest weight.

    Args:
        graph: Airport graph.

    Returns:
        (codes, dist, next_hop): codes[i] is the airport for row/column i;
        dist[i, j] is the shortest distance (inf if unreachable);
        next_hop[i, j] is the index of the first airport after i on the
        way to j, or NO_HOP.
    """
    codes = graph.codes
    n = len(codes)
    index = {code: i for i, code in enumerate(codes)}

    dist = np.full((n, n), np.inf)
    np.fill_diagonal(dist, 0.0)
    next_hop = np.full((n, n), NO_HOP, dtype=np.int64)

    for edge in graph.edges():
        i, j = index[edge.source], index[edge.target]
        if edge.distance_km < dist[i, j]:
            dist[i, j] = edge.distance_km
            next_hop[i, j] = j

    for k in range(n):
        via_k = dist[:, k, np.newaxis] + dist[np.newaxis, k, :]
        improved = via_k < dist
        if not improved.any():
            continue
        dist = np.where(improved, via_k, dist)
        next_hop = np.where(improved, next_hop[:, k, np.newaxis], next_hop)

    logger.debug("Floyd-Warshall computed %dx%d matrix", n, n)
    return codes, dist, next_hop
