"""
Demand model adapters.
"""

from src.route_engine.adapters.demand.random_demand import (
    FixedDemandModel,
    RandomDemandModel,
    clamp,
)

__all__ = ["FixedDemandModel", "RandomDemandModel", "clamp"]
