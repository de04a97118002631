"""
Pricing Service - fare breakdown and fare-class offers for a route.

Every quote computes one FareBreakdown from distance and configuration
and derives three offers (Saver, Standard, Flex) from it:

    base     = base_fare
    fuel     = distance_km * burn_l_per_km * fuel_price_per_litre
    ops      = fee_rate * (base + fuel)
    taxes    = tax_rate * (base + fuel + ops)
    core     = (base + fuel + ops + taxes) * demand
    total    = round_to_nearest_10(core * class_multiplier) * passengers
"""

from __future__ import annotations

import logging
import math
import secrets
import time
from typing import List, Optional, Sequence

from src.route_engine.adapters.demand.random_demand import RandomDemandModel
from src.route_engine.exceptions import InvalidPassengerCountError
from src.route_engine.ports.demand_model import DemandModel
from src.route_engine.schemas.pricing import (
    FareBreakdown,
    FareClass,
    Offer,
    PriceConfig,
    Quote,
)
from src.route_engine.schemas.route import RouteResult

logger = logging.getLogger(__name__)


def round_to_nearest_10(value: float) -> int:
    """Round to the nearest multiple of 10, halves rounding up."""
    return int(math.floor(value / 10 + 0.5)) * 10


def new_offer_id() -> str:
    return secrets.token_urlsafe(16)


class PricingService:
    """
    Domain service producing fare offers.

    Deterministic except for the demand factor, which comes from the
    injected DemandModel. Each service owns its demand model; give every
    concurrent worker its own service.

    Attributes:
        _demand_model: Source of the demand factor.
    """

    def __init__(self, demand_model: Optional[DemandModel] = None) -> None:
        """
        Args:
            demand_model: Defaults to an unseeded RandomDemandModel.
        """
        self._demand_model = demand_model if demand_model is not None else RandomDemandModel()

    def breakdown(
        self,
        path: Sequence[str],
        total_distance_km: float,
        config: PriceConfig,
    ) -> FareBreakdown:
        """
        Compute the fare components for a route.

        Zero distance is valid and leaves only base, ops and taxes.
        """
        base = config.base_fare
        fuel_cost = total_distance_km * config.default_burn_l_per_km * config.fuel_price_per_litre
        ops = config.fee_rate * (base + fuel_cost)
        taxes = config.tax_rate * (base + fuel_cost + ops)
        demand = self._demand_model.factor(path)

        return FareBreakdown(
            base=base,
            fuel_cost=fuel_cost,
            ops=ops,
            taxes=taxes,
            demand=demand,
        )

    def generate_quote(
        self,
        path: Sequence[str],
        total_distance_km: float,
        passenger_count: int,
        config: PriceConfig,
    ) -> List[Offer]:
        """
        Price a route in all three fare classes.

        Args:
            path: Ordered airport codes of the route.
            total_distance_km: Route distance.
            passenger_count: Number of passengers (>= 1).
            config: Pricing parameters.

        Returns:
            Offers in Saver, Standard, Flex order, all sharing one
            FareBreakdown.

        Raises:
            InvalidPassengerCountError: If passenger_count < 1.
        """
        if passenger_count < 1:
            raise InvalidPassengerCountError(passenger_count)

        start_time = time.perf_counter()

        fare_breakdown = self.breakdown(path, total_distance_km, config)
        core_price = fare_breakdown.core_price

        offers = [
            Offer(
                offer_id=new_offer_id(),
                fare_class=fare_class,
                fare_breakdown=fare_breakdown,
                total_fare=round_to_nearest_10(core_price * fare_class.multiplier)
                * passenger_count,
                currency=config.currency,
            )
            for fare_class in FareClass
        ]

        logger.info(
            "Quote %s (%.1f km, %d pax): core=%.2f demand=%.3f fares=%s in %.3fms",
            "-".join(path),
            total_distance_km,
            passenger_count,
            core_price,
            fare_breakdown.demand,
            [o.total_fare for o in offers],
            (time.perf_counter() - start_time) * 1000,
        )
        return offers

    def quote_route(
        self,
        route: RouteResult,
        passenger_count: int,
        config: PriceConfig,
    ) -> Quote:
        """Price a computed route and bundle it into a Quote."""
        offers = self.generate_quote(
            route.path,
            route.total_distance,
            passenger_count,
            config,
        )
        return Quote(
            route=route,
            offers=tuple(offers),
            config=config,
            passenger_count=passenger_count,
        )
