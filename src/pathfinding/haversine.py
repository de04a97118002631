"""
Great-circle distance helpers.

Used as the A* heuristic and to derive connection distances from
airport coordinates. NaN and out-of-range coordinates yield NaN
instead of raising; validating coordinates is the caller's job.
"""

from typing import Protocol

import numpy as np

EARTH_RADIUS_KM = 6371.0


class HasCoordinates(Protocol):
    latitude: float
    longitude: float


def haversine_km_vectorized(lat1, lon1, lat2, lon2) -> np.ndarray:
    """
    Vectorized haversine distance in kilometers.

    Accepts scalars, numpy arrays or pandas Series (broadcast together).
    """
    lat1 = np.radians(np.asarray(lat1, dtype=float))
    lon1 = np.radians(np.asarray(lon1, dtype=float))
    lat2 = np.radians(np.asarray(lat2, dtype=float))
    lon2 = np.radians(np.asarray(lon2, dtype=float))

    # Out-of-range latitudes can push s outside [0, 1]; let numpy return NaN
    with np.errstate(invalid="ignore"):
        s = (
            np.sin((lat2 - lat1) / 2) ** 2
            + np.cos(lat1) * np.cos(lat2) * np.sin((lon2 - lon1) / 2) ** 2
        )
        return 2 * EARTH_RADIUS_KM * np.arcsin(np.sqrt(s))


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance in kilometers between two (lat, lon) points in degrees."""
    return float(haversine_km_vectorized(lat1, lon1, lat2, lon2))


def airport_distance_km(a: HasCoordinates, b: HasCoordinates) -> float:
    """Great-circle distance between two airports."""
    return haversine_km(a.latitude, a.longitude, b.latitude, b.longitude)
