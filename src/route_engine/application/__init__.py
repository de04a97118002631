"""
Application layer for the route engine.

This layer provides the public API: the stateless compute_route and
generate_quote calls and the RoutePlanner facade.
"""

from src.route_engine.application.entry_points import compute_route, generate_quote
from src.route_engine.application.route_planner import RoutePlanner

__all__ = ["RoutePlanner", "compute_route", "generate_quote"]
