"""
Port interfaces for the route engine.

Ports define the abstract interfaces (ABCs and Protocols) that the
services depend on. Adapters provide the concrete implementations.
"""

from src.route_engine.ports.demand_model import DemandModel
from src.route_engine.ports.network_provider import NetworkDataProvider
from src.route_engine.ports.route_finder import RouteFinder

__all__ = [
    "DemandModel",
    "NetworkDataProvider",
    "RouteFinder",
]
