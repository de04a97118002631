"""
Path reconstruction shared by all four searches.

Turns predecessor tables (single-source searches) or next-hop matrices
(all-pairs search) into an ordered path, then maps each hop back to
the graph edge that carries it.
"""

from typing import List, Mapping, Optional, Sequence, Tuple

import numpy as np

from .exceptions import ReconstructionError
from .floyd_warshall import NO_HOP
from .graph import Edge, Graph


def path_from_predecessors(
    previous: Mapping[str, Optional[str]],
    start: str,
    end: str,
) -> List[str]:
    """
    Walk predecessors back from end to start.

    Returns:
        Ordered list of airport codes from start to end inclusive.

    Raises:
        ReconstructionError: If the chain loops or stops before start.
    """
    path: List[str] = [end]
    current = end
    # A valid chain never has more hops than there are airports
    limit = len(previous) + 1

    while current != start:
        current = previous.get(current)
        if current is None:
            raise ReconstructionError(start, end, "predecessor chain ends before origin")
        path.append(current)
        if len(path) > limit:
            raise ReconstructionError(start, end, "predecessor chain contains a cycle")

    path.reverse()
    return path


def path_from_next_hops(
    codes: Sequence[str],
    next_hop: np.ndarray,
    start: str,
    end: str,
) -> List[str]:
    """
    Follow next-hop pointers from start to end.

    Args:
        codes: Airport code for each matrix row/column.
        next_hop: Matrix from floyd_warshall().
        start: Origin airport code.
        end: Destination airport code.

    Returns:
        Ordered list of airport codes from start to end inclusive.

    Raises:
        ReconstructionError: If a pointer is missing or the walk loops.
    """
    index = {code: i for i, code in enumerate(codes)}
    target = index[end]
    current = index[start]
    path: List[str] = [start]

    while current != target:
        current = int(next_hop[current, target])
        if current == NO_HOP:
            raise ReconstructionError(start, end, "missing next hop")
        path.append(codes[current])
        if len(path) > len(codes):
            raise ReconstructionError(start, end, "next-hop chain contains a cycle")

    return path


def build_route_segments(graph: Graph, path: Sequence[str]) -> Tuple[List[Edge], float]:
    """
    Map consecutive path pairs to graph edges.

    Parallel edges are resolved with graph.edge_between(), i.e. the
    graph's parallel_edge_policy.

    Returns:
        (edges, total_distance_km)
    """
    edges: List[Edge] = []
    total = 0.0

    for source, target in zip(path, path[1:]):
        edge = graph.edge_between(source, target)
        if edge is None:
            raise ReconstructionError(path[0], path[-1], f"no edge {source} -> {target}")
        edges.append(edge)
        total += edge.distance_km

    return edges, total
