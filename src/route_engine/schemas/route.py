"""
Route result schemas.

Defines the output contract shared by all route finding algorithms.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Sequence

import pandas as pd
import pandera as pa
from pandera.typing import Series

from src.pathfinding.graph import Edge


class RouteSegmentSchema(pa.DataFrameModel):
    """
    Schema for the hops of a route in tabular form.

    Each row represents one hop of the path.
    """

    segment_index: Series[int] = pa.Field(
        ge=0,
        description="Zero-based index of this hop in the route",
    )
    source: Series[str] = pa.Field(
        nullable=False,
        description="Departure airport IATA code",
    )
    target: Series[str] = pa.Field(
        nullable=False,
        description="Arrival airport IATA code",
    )
    distance_km: Series[float] = pa.Field(
        nullable=False,
        description="Hop distance in kilometers",
    )

    class Config:
        strict = False
        coerce = True
        name = "RouteSegmentSchema"
        ordered = True


@dataclass(frozen=True)
class RouteSegment:
    """Immutable single hop of a route."""

    source: str
    target: str
    distance_km: float

    @classmethod
    def from_edge(cls, edge: Edge) -> "RouteSegment":
        return cls(source=edge.source, target=edge.target, distance_km=edge.distance_km)

    def to_dict(self) -> Dict[str, Any]:
        return {"from": self.source, "to": self.target, "distanceKm": self.distance_km}


@dataclass(frozen=True)
class RouteResult:
    """
    Immutable representation of a computed route.

    Invariants: path runs from origin to destination inclusive,
    len(path) == len(segments) + 1, and total_distance is the sum of
    segment distances.

    Attributes:
        path: Ordered airport codes.
        segments: One RouteSegment per hop.
        total_distance: Sum of segment distances in km.
        algorithm: Name of the algorithm that produced the route.
    """

    path: tuple[str, ...]
    segments: tuple[RouteSegment, ...]
    total_distance: float
    algorithm: str = ""

    @property
    def origin(self) -> str:
        return self.path[0]

    @property
    def destination(self) -> str:
        return self.path[-1]

    @property
    def num_segments(self) -> int:
        return len(self.segments)

    @property
    def route_key(self) -> str:
        """Path joined with dashes, e.g. 'DEL-BOM'."""
        return "-".join(self.path)

    def to_dict(self) -> Dict[str, Any]:
        """Wire shape: path, segments (from/to/distanceKm), totalDistance."""
        return {
            "path": list(self.path),
            "segments": [segment.to_dict() for segment in self.segments],
            "totalDistance": self.total_distance,
        }

    def segments_frame(self) -> pd.DataFrame:
        """Segments as a DataFrame validated against RouteSegmentSchema."""
        df = pd.DataFrame(
            {
                "segment_index": pd.Series(range(len(self.segments)), dtype="int64"),
                "source": pd.Series([s.source for s in self.segments], dtype="object"),
                "target": pd.Series([s.target for s in self.segments], dtype="object"),
                "distance_km": pd.Series(
                    [s.distance_km for s in self.segments], dtype="float64"
                ),
            }
        )
        return RouteSegmentSchema.validate(df)

    @classmethod
    def from_edges(
        cls,
        path: Sequence[str],
        edges: Sequence[Edge],
        algorithm: str = "",
    ) -> "RouteResult":
        """
        Factory method to create a RouteResult from a path and its edges.

        Args:
            path: Ordered airport codes, origin to destination.
            edges: Graph edge for each consecutive pair of path.
            algorithm: Name of the producing algorithm.

        Returns:
            RouteResult whose total_distance is the sum of the edges.
        """
        if not path:
            raise ValueError("Route path cannot be empty")
        if len(edges) != len(path) - 1:
            raise ValueError(
                f"Expected {len(path) - 1} edges for a {len(path)}-airport path, "
                f"got {len(edges)}"
            )

        segments: List[RouteSegment] = [RouteSegment.from_edge(e) for e in edges]
        return cls(
            path=tuple(path),
            segments=tuple(segments),
            total_distance=sum((s.distance_km for s in segments), 0.0),
            algorithm=algorithm,
        )
