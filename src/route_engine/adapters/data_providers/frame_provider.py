"""
DataFrame Network Provider - tabular airports/connections to domain values.

Validates incoming DataFrames against AirportSchema and ConnectionSchema
once, at the boundary, then serves immutable Airport/Connection values.
"""

import logging
from typing import List

import numpy as np
import pandas as pd

from src.pathfinding.haversine import haversine_km_vectorized
from src.route_engine.ports.network_provider import NetworkDataProvider
from src.route_engine.schemas.network import (
    Airport,
    AirportSchema,
    Connection,
    ConnectionSchema,
)

logger = logging.getLogger(__name__)


def derive_distances(connections_df: pd.DataFrame, airports_df: pd.DataFrame) -> pd.DataFrame:
    """
    Fill distance_km from airport coordinates.

    Distances are great-circle km rounded half-up to whole km. Rows that
    reference an unknown airport get NaN and fail schema validation.

    Args:
        connections_df: Frame with 'source' and 'target' columns.
        airports_df: Frame with 'code', 'latitude', 'longitude' columns.

    Returns:
        Copy of connections_df with a distance_km column.
    """
    coords = airports_df.set_index("code")[["latitude", "longitude"]]
    origin = coords.reindex(connections_df["source"]).to_numpy(dtype=float)
    dest = coords.reindex(connections_df["target"]).to_numpy(dtype=float)

    km = haversine_km_vectorized(origin[:, 0], origin[:, 1], dest[:, 0], dest[:, 1])

    result = connections_df.copy()
    result["distance_km"] = np.floor(km + 0.5)
    return result


class FrameNetworkProvider(NetworkDataProvider):
    """
    Network provider backed by pandas DataFrames.

    Attributes:
        _airports_df: Validated airport frame.
        _connections_df: Validated connection frame.
    """

    def __init__(
        self,
        airports_df: pd.DataFrame,
        connections_df: pd.DataFrame,
    ) -> None:
        """
        Validate and store the network frames.

        Args:
            airports_df: One row per airport (AirportSchema).
            connections_df: One row per connection (ConnectionSchema).
                If distance_km is missing it is derived from coordinates;
                if active is missing every connection is active.

        Raises:
            pandera.errors.SchemaError: If either frame fails validation.
        """
        self._airports_df = AirportSchema.validate(airports_df)

        if "distance_km" not in connections_df.columns:
            connections_df = derive_distances(connections_df, self._airports_df)
        if "active" not in connections_df.columns:
            connections_df = connections_df.assign(active=True)
        self._connections_df = ConnectionSchema.validate(connections_df)

        logger.debug(
            "Loaded network: %d airports, %d connections (%d active)",
            len(self._airports_df),
            len(self._connections_df),
            int(self._connections_df["active"].sum()),
        )

    def get_airports(self) -> List[Airport]:
        return [
            Airport(
                code=row.code,
                name=row.name,
                city=row.city,
                country=row.country,
                latitude=float(row.latitude),
                longitude=float(row.longitude),
            )
            for row in self._airports_df.itertuples(index=False)
        ]

    def get_connections(self, active_only: bool = True) -> List[Connection]:
        df = self._connections_df
        if active_only:
            df = df[df["active"]]
        return [
            Connection(
                source=row.source,
                target=row.target,
                distance_km=float(row.distance_km),
                active=bool(row.active),
            )
            for row in df.itertuples(index=False)
        ]

    @property
    def airports_df(self) -> pd.DataFrame:
        return self._airports_df

    @property
    def connections_df(self) -> pd.DataFrame:
        return self._connections_df
