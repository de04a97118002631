"""
Configuration module for the route engine.

Reads defaults from environment variables (a .env file is loaded if
present). Per-request values always win over these defaults.
"""

import os
from typing import FrozenSet, Tuple

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return float(raw)


def _env_routes(name: str, default: Tuple[str, ...]) -> FrozenSet[str]:
    raw = os.getenv(name)
    if not raw:
        return frozenset(default)
    return frozenset(key.strip().upper() for key in raw.split(",") if key.strip())


class Config:
    """
    Engine configuration.

    Attributes:
        DEFAULT_ALGORITHM: Algorithm used when the caller names none.
        CURRENCY: Currency code stamped on offers.
        FUEL_PRICE_PER_LITRE: Default fuel price.
        BURN_L_PER_KM: Default fuel burn in litres per km.
        TAX_RATE: Default tax rate applied after ops fees.
        FEE_RATE: Default operations fee rate.
        BASE_FARE: Default base fare.
        POPULAR_ROUTES: Route keys ("DEL-BOM") that get the demand premium.
        DEMAND_MIN, DEMAND_MAX: Clamp bounds for the demand factor.
        DEMAND_JITTER: Uniform jitter range multiplied into demand.
        POPULAR_DEMAND, BASELINE_DEMAND: Starting demand before jitter.
    """

    DEFAULT_ALGORITHM: str = os.getenv("ROUTE_ENGINE_DEFAULT_ALGORITHM", "dijkstra")
    CURRENCY: str = os.getenv("ROUTE_ENGINE_CURRENCY", "INR")

    FUEL_PRICE_PER_LITRE: float = _env_float("ROUTE_ENGINE_FUEL_PRICE_PER_LITRE", 95.5)
    BURN_L_PER_KM: float = _env_float("ROUTE_ENGINE_BURN_L_PER_KM", 1.62)
    TAX_RATE: float = _env_float("ROUTE_ENGINE_TAX_RATE", 0.18)
    FEE_RATE: float = _env_float("ROUTE_ENGINE_FEE_RATE", 0.08)
    BASE_FARE: float = _env_float("ROUTE_ENGINE_BASE_FARE", 1500.0)

    POPULAR_ROUTES: FrozenSet[str] = _env_routes(
        "ROUTE_ENGINE_POPULAR_ROUTES",
        ("DEL-BOM", "BOM-DEL", "DEL-BLR", "BLR-DEL"),
    )

    DEMAND_MIN: float = 0.9
    DEMAND_MAX: float = 1.5
    DEMAND_JITTER: Tuple[float, float] = (0.9, 1.3)
    POPULAR_DEMAND: float = 1.2
    BASELINE_DEMAND: float = 1.0
