"""
Domain services for the route engine.

Services orchestrate the interaction between ports (algorithms, demand
models) and domain logic (graph construction, fare computation).
"""

from src.route_engine.services.pricing_service import PricingService
from src.route_engine.services.route_finder_service import RouteFinderService

__all__ = ["PricingService", "RouteFinderService"]
