"""
Seed Network Provider - built-in demo network.

Ten Indian airports and eleven routes. Route distances are not stored;
they are derived from airport coordinates when the provider is built.
"""

import pandas as pd

from src.route_engine.adapters.data_providers.frame_provider import (
    FrameNetworkProvider,
)

SEED_AIRPORTS = [
    ("DEL", "Indira Gandhi Intl", "Delhi", "India", 28.556, 77.100),
    ("BOM", "Chhatrapati Shivaji", "Mumbai", "India", 19.089, 72.865),
    ("BLR", "Kempegowda", "Bangalore", "India", 13.198, 77.706),
    ("HYD", "Rajiv Gandhi", "Hyderabad", "India", 17.24, 78.43),
    ("MAA", "Chennai Intl", "Chennai", "India", 12.99, 80.17),
    ("CCU", "Netaji Subhas Chandra", "Kolkata", "India", 22.65, 88.44),
    ("PNQ", "Pune", "Pune", "India", 18.58, 73.92),
    ("GOI", "Goa", "Goa", "India", 15.38, 73.83),
    ("AMD", "Ahmedabad", "Ahmedabad", "India", 23.07, 72.63),
    ("COK", "Cochin Intl", "Kochi", "India", 10.15, 76.40),
]

SEED_ROUTES = [
    ("DEL", "BOM"),
    ("DEL", "BLR"),
    ("DEL", "CCU"),
    ("BOM", "GOI"),
    ("BOM", "PNQ"),
    ("BOM", "AMD"),
    ("BLR", "MAA"),
    ("BLR", "HYD"),
    ("HYD", "MAA"),
    ("CCU", "MAA"),
    ("MAA", "COK"),
]


def seed_airports_df() -> pd.DataFrame:
    return pd.DataFrame(
        SEED_AIRPORTS,
        columns=["code", "name", "city", "country", "latitude", "longitude"],
    )


def seed_routes_df() -> pd.DataFrame:
    """Seed route pairs, all active, without distances."""
    df = pd.DataFrame(SEED_ROUTES, columns=["source", "target"])
    df["active"] = True
    return df


class SeedNetworkProvider(FrameNetworkProvider):
    """FrameNetworkProvider preloaded with the seed network."""

    def __init__(self) -> None:
        super().__init__(seed_airports_df(), seed_routes_df())
