"""
Airport network schemas.

Airport and Connection are the in-memory inputs of every route search.
The Pandera models validate tabular network data at the boundary
(network providers), not per object.
"""

from dataclasses import dataclass
from typing import Tuple

import pandera as pa
from pandera.typing import Series

IATA_PATTERN = r"^[A-Z]{3}$"


@dataclass(frozen=True)
class Airport:
    """
    Immutable airport node.

    Attributes:
        code: 3-letter uppercase IATA code (graph identity).
        name: Display name.
        city: City served.
        country: Country name.
        latitude: Degrees, north positive.
        longitude: Degrees, east positive.
    """

    code: str
    name: str
    city: str
    country: str
    latitude: float
    longitude: float

    @property
    def coordinates(self) -> Tuple[float, float]:
        """(latitude, longitude) in degrees."""
        return self.latitude, self.longitude


@dataclass(frozen=True)
class Connection:
    """
    Stored connection between two airports.

    Treated as bidirectional when the graph is built. Inactive
    connections never reach the graph.
    """

    source: str
    target: str
    distance_km: float
    active: bool = True

    @property
    def key(self) -> str:
        """Route key, e.g. 'DEL-BOM'."""
        return f"{self.source}-{self.target}"


class AirportSchema(pa.DataFrameModel):
    """Schema for tabular airport data; one row per airport."""

    code: Series[str] = pa.Field(
        unique=True,
        str_matches=IATA_PATTERN,
        description="3-letter uppercase IATA code",
    )
    name: Series[str] = pa.Field(nullable=False, description="Display name")
    city: Series[str] = pa.Field(nullable=False, description="City served")
    country: Series[str] = pa.Field(nullable=False, description="Country name")
    latitude: Series[float] = pa.Field(ge=-90, le=90, description="Latitude in degrees")
    longitude: Series[float] = pa.Field(ge=-180, le=180, description="Longitude in degrees")

    class Config:
        strict = False
        coerce = True
        name = "AirportSchema"


class ConnectionSchema(pa.DataFrameModel):
    """Schema for tabular connection data; one row per stored connection."""

    source: Series[str] = pa.Field(
        str_matches=IATA_PATTERN,
        description="Departure airport IATA code",
    )
    target: Series[str] = pa.Field(
        str_matches=IATA_PATTERN,
        description="Arrival airport IATA code",
    )
    distance_km: Series[float] = pa.Field(
        ge=0,
        description="Connection distance in kilometers",
    )
    active: Series[bool] = pa.Field(
        nullable=False,
        description="Only active connections are routable",
    )

    class Config:
        strict = False
        coerce = True
        name = "ConnectionSchema"
