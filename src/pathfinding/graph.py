"""
Airport graph built per request from airports and connections.

Every active connection becomes two directed edges (one per direction)
with the same weight. Inactive connections are left out entirely.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Dict, Iterable, Iterator, List, Optional

if TYPE_CHECKING:
    from src.route_engine.schemas.network import Airport, Connection

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Edge:
    """Directed, weighted edge between two airport codes."""

    source: str
    target: str
    distance_km: float


class ParallelEdgePolicy(str, Enum):
    """
    Which edge to report when several connect the same ordered pair.

    FIRST keeps the edge inserted first during construction.
    MINIMUM keeps the lightest one (ties go to the first inserted).
    """

    FIRST = "first"
    MINIMUM = "minimum"


class Graph:
    """
    Adjacency-list graph of airports.

    Self-loops and parallel edges are accepted. A directed edge identical
    to one already present (same ordered pair, same weight) is not added
    twice, so connections stored in both directions are not doubled.
    Connections touching an airport outside the node set are skipped.

    Attributes:
        parallel_edge_policy: Tie-break used by edge_between().
    """

    def __init__(
        self,
        airports: Iterable[Airport],
        connections: Iterable[Connection],
        parallel_edge_policy: ParallelEdgePolicy = ParallelEdgePolicy.FIRST,
    ) -> None:
        self.parallel_edge_policy = ParallelEdgePolicy(parallel_edge_policy)
        self._nodes: Dict[str, Airport] = {}
        self._adjacency: Dict[str, List[Edge]] = {}

        for airport in airports:
            self._nodes[airport.code] = airport
            self._adjacency.setdefault(airport.code, [])

        skipped = 0
        for connection in connections:
            if not connection.active:
                continue
            if connection.source not in self._nodes or connection.target not in self._nodes:
                skipped += 1
                logger.debug(
                    "Skipping connection %s -> %s: unknown airport",
                    connection.source,
                    connection.target,
                )
                continue

            distance = float(connection.distance_km)
            self._add_edge(Edge(connection.source, connection.target, distance))
            self._add_edge(Edge(connection.target, connection.source, distance))

        logger.debug(
            "Graph built: %d airports, %d directed edges (%d connections skipped)",
            self.node_count,
            self.edge_count,
            skipped,
        )

    def _add_edge(self, edge: Edge) -> None:
        outgoing = self._adjacency[edge.source]
        if edge in outgoing:
            return
        outgoing.append(edge)

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def neighbors(self, code: str) -> List[Edge]:
        """Outgoing edges of an airport; empty for unknown codes."""
        return self._adjacency.get(code, [])

    def all_nodes(self) -> List[Airport]:
        """All registered airports in insertion order."""
        return list(self._nodes.values())

    def node(self, code: str) -> Optional[Airport]:
        return self._nodes.get(code)

    def has_node(self, code: str) -> bool:
        return code in self._nodes

    @property
    def codes(self) -> List[str]:
        return list(self._nodes.keys())

    def edges(self) -> Iterator[Edge]:
        """All directed edges in construction order."""
        for outgoing in self._adjacency.values():
            yield from outgoing

    def edge_between(self, source: str, target: str) -> Optional[Edge]:
        """
        Edge used to report the hop source -> target.

        Args:
            source: Departure airport code.
            target: Arrival airport code.

        Returns:
            The edge selected by parallel_edge_policy, or None if the
            two airports are not directly connected.
        """
        candidates = [e for e in self.neighbors(source) if e.target == target]
        if not candidates:
            return None
        if self.parallel_edge_policy is ParallelEdgePolicy.MINIMUM:
            # min() returns the first of equal minima
            return min(candidates, key=lambda e: e.distance_km)
        return candidates[0]

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    @property
    def edge_count(self) -> int:
        return sum(len(outgoing) for outgoing in self._adjacency.values())

    def __contains__(self, code: object) -> bool:
        return code in self._nodes

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count}, edges={self.edge_count})"
