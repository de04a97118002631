"""
Schema definitions for the route engine.

Frozen dataclasses for in-memory values, Pandera models for tabular
data at the boundaries.
"""

from .network import (
    Airport,
    AirportSchema,
    Connection,
    ConnectionSchema,
)
from .pricing import FareBreakdown, FareClass, Offer, PriceConfig, Quote
from .route import RouteResult, RouteSegment, RouteSegmentSchema

__all__ = [
    # Network schemas
    "Airport",
    "Connection",
    "AirportSchema",
    "ConnectionSchema",
    # Route schemas
    "RouteSegment",
    "RouteResult",
    "RouteSegmentSchema",
    # Pricing schemas
    "PriceConfig",
    "FareClass",
    "FareBreakdown",
    "Offer",
    "Quote",
]
