"""
Pricing schemas.

PriceConfig is supplied per request; FareBreakdown, Offer and Quote are
produced by the pricing service and never persisted by the engine.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Dict, Optional

from src.route_engine.config import Config
from src.route_engine.exceptions import InvalidPriceConfigError
from src.route_engine.schemas.route import RouteResult


class FareClass(Enum):
    """
    The three fare tiers, in offer order.

    Each value is (label, multiplier applied to the core price).
    """

    SAVER = ("Saver", 0.95)
    STANDARD = ("Standard", 1.00)
    FLEX = ("Flex", 1.15)

    @property
    def label(self) -> str:
        return self.value[0]

    @property
    def multiplier(self) -> float:
        return self.value[1]


@dataclass(frozen=True)
class PriceConfig:
    """
    Immutable pricing parameters.

    Every numeric field must be finite and >= 0; anything else raises
    InvalidPriceConfigError so a quote can never go negative.

    Attributes:
        fuel_price_per_litre: Fuel price in currency units per litre.
        default_burn_l_per_km: Fuel burn in litres per km.
        tax_rate: Tax applied on base + fuel + ops.
        fee_rate: Operations fee applied on base + fuel.
        base_fare: Flat fare per quote.
        currency: Currency code stamped on offers.
    """

    fuel_price_per_litre: float = 95.5
    default_burn_l_per_km: float = 1.62
    tax_rate: float = 0.18
    fee_rate: float = 0.08
    base_fare: float = 1500.0
    currency: str = "INR"

    def __post_init__(self) -> None:
        """Validate pricing parameters after initialization."""
        for f in fields(self):
            if f.name == "currency":
                continue
            value = getattr(self, f.name)
            if not math.isfinite(value) or value < 0:
                raise InvalidPriceConfigError(f.name, value)

    @classmethod
    def from_env(cls) -> "PriceConfig":
        """Build a PriceConfig from environment-driven defaults (see Config)."""
        return cls(
            fuel_price_per_litre=Config.FUEL_PRICE_PER_LITRE,
            default_burn_l_per_km=Config.BURN_L_PER_KM,
            tax_rate=Config.TAX_RATE,
            fee_rate=Config.FEE_RATE,
            base_fare=Config.BASE_FARE,
            currency=Config.CURRENCY,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "fuelPricePerLitre": self.fuel_price_per_litre,
            "defaultBurnLPerKm": self.default_burn_l_per_km,
            "taxRate": self.tax_rate,
            "feeRate": self.fee_rate,
            "baseFare": self.base_fare,
        }


@dataclass(frozen=True)
class FareBreakdown:
    """Per-quote fare components, shared by every offer of the quote."""

    base: float
    fuel_cost: float
    ops: float
    taxes: float
    demand: float

    @property
    def subtotal(self) -> float:
        """base + fuel_cost + ops + taxes, before demand."""
        return self.base + self.fuel_cost + self.ops + self.taxes

    @property
    def core_price(self) -> float:
        """Subtotal scaled by demand; fare classes multiply this."""
        return self.subtotal * self.demand

    def to_dict(self) -> Dict[str, float]:
        return {
            "base": self.base,
            "fuelCost": self.fuel_cost,
            "ops": self.ops,
            "taxes": self.taxes,
            "demand": self.demand,
        }


@dataclass(frozen=True)
class Offer:
    """A priced fare-class offer for a route."""

    offer_id: str
    fare_class: FareClass
    fare_breakdown: FareBreakdown
    total_fare: int
    currency: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "offerId": self.offer_id,
            "class": self.fare_class.label,
            "fareBreakdown": self.fare_breakdown.to_dict(),
            "totalFare": self.total_fare,
            "currency": self.currency,
        }


@dataclass(frozen=True)
class Quote:
    """Route plus its offers, as returned to a quote request."""

    route: RouteResult
    offers: tuple[Offer, ...]
    config: PriceConfig
    passenger_count: int

    def offer_for(self, fare_class: FareClass) -> Optional[Offer]:
        for offer in self.offers:
            if offer.fare_class is fare_class:
                return offer
        return None

    @property
    def cheapest(self) -> Offer:
        return min(self.offers, key=lambda o: o.total_fare)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "route": self.route.to_dict(),
            "offers": [offer.to_dict() for offer in self.offers],
            "config": self.config.to_dict(),
        }
