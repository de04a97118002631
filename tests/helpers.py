"""
Builders for airports, connections and random networks used across tests.
"""

from typing import Iterable, List, Tuple

import numpy as np

from src.pathfinding.haversine import haversine_km
from src.route_engine.schemas.network import Airport, Connection


def make_airport(code: str, latitude: float = 0.0, longitude: float = 0.0) -> Airport:
    """Airport with placeholder names; all at (0, 0) unless told otherwise."""
    return Airport(
        code=code,
        name=f"{code} Airport",
        city=code.title(),
        country="Testland",
        latitude=latitude,
        longitude=longitude,
    )


def make_connections(rows: Iterable[Tuple]) -> List[Connection]:
    """Connections from (source, target, km) or (source, target, km, active) tuples."""
    return [Connection(*row) for row in rows]


def random_network(seed: int, num_airports: int = 12, num_connections: int = 24):
    """
    Random airport network with real coordinates.

    Every connection is at least the great-circle distance between its
    airports, so the great-circle heuristic stays consistent. Airport
    pairs are unique, so there are no parallel edges.
    """
    rng = np.random.default_rng(seed)
    airports = [
        make_airport(
            f"{chr(65 + i // 26 % 26)}{chr(65 + i % 26)}X",
            latitude=float(rng.uniform(-60, 60)),
            longitude=float(rng.uniform(-150, 150)),
        )
        for i in range(num_airports)
    ]

    pairs = set()
    while len(pairs) < num_connections:
        i, j = rng.choice(num_airports, size=2, replace=False)
        pairs.add((min(i, j), max(i, j)))

    connections = []
    for i, j in sorted(pairs):
        a, b = airports[i], airports[j]
        straight = haversine_km(a.latitude, a.longitude, b.latitude, b.longitude)
        connections.append(Connection(a.code, b.code, straight * float(rng.uniform(1.0, 1.5))))

    return airports, connections


