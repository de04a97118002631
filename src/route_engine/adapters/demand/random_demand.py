"""
Demand model adapters.

RandomDemandModel simulates real-time demand: popular routes start
higher and every quote gets a random jitter, so repeated quotes for the
same route differ. Pass a seeded generator to make it reproducible.
"""

import logging
from typing import Iterable, Optional, Sequence

import numpy as np

from src.route_engine.config import Config

logger = logging.getLogger(__name__)


def clamp(value: float, lower: float, upper: float) -> float:
    return min(max(value, lower), upper)


class RandomDemandModel:
    """
    Jittered demand factor.

    factor = clamp(start * U(jitter_low, jitter_high), DEMAND_MIN, DEMAND_MAX)
    where start is POPULAR_DEMAND for popular route keys and
    BASELINE_DEMAND otherwise.

    Attributes:
        popular_routes: Route keys ('DEL-BOM') that get the premium.
        _rng: Generator owned by this model; not shared across models.
    """

    def __init__(
        self,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
        popular_routes: Optional[Iterable[str]] = None,
    ) -> None:
        """
        Args:
            rng: Generator to draw jitter from. Takes precedence over seed.
            seed: Seed for a fresh generator when rng is not given.
            popular_routes: Overrides Config.POPULAR_ROUTES.
        """
        self._rng = rng if rng is not None else np.random.default_rng(seed)
        self.popular_routes = frozenset(
            Config.POPULAR_ROUTES if popular_routes is None else popular_routes
        )

    def is_popular(self, path: Sequence[str]) -> bool:
        return "-".join(path) in self.popular_routes

    def factor(self, path: Sequence[str]) -> float:
        start = Config.POPULAR_DEMAND if self.is_popular(path) else Config.BASELINE_DEMAND
        low, high = Config.DEMAND_JITTER
        jitter = float(self._rng.uniform(low, high))
        demand = clamp(start * jitter, Config.DEMAND_MIN, Config.DEMAND_MAX)

        logger.debug(
            "Demand for %s: start=%.2f jitter=%.4f factor=%.4f",
            "-".join(path),
            start,
            jitter,
            demand,
        )
        return demand


class FixedDemandModel:
    """Constant demand factor, clamped to the configured bounds."""

    def __init__(self, value: float = 1.0) -> None:
        self.value = clamp(value, Config.DEMAND_MIN, Config.DEMAND_MAX)

    def factor(self, path: Sequence[str]) -> float:
        return self.value
