"""
Network data providers.
"""

from src.route_engine.adapters.data_providers.frame_provider import (
    FrameNetworkProvider,
    derive_distances,
)
from src.route_engine.adapters.data_providers.seed_provider import (
    SeedNetworkProvider,
)

__all__ = [
    "FrameNetworkProvider",
    "SeedNetworkProvider",
    "derive_distances",
]
