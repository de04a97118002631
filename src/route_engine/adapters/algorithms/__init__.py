"""
Algorithm adapters for route finding.
"""

from src.route_engine.adapters.algorithms.astar_adapter import AStarRouteFinder
from src.route_engine.adapters.algorithms.bellman_ford_adapter import (
    BellmanFordRouteFinder,
)
from src.route_engine.adapters.algorithms.dijkstra_adapter import DijkstraRouteFinder
from src.route_engine.adapters.algorithms.floyd_warshall_adapter import (
    FloydWarshallRouteFinder,
)
from src.route_engine.adapters.algorithms.registry import (
    available_algorithms,
    get_route_finder,
    resolve_algorithm_name,
)

__all__ = [
    "AStarRouteFinder",
    "BellmanFordRouteFinder",
    "DijkstraRouteFinder",
    "FloydWarshallRouteFinder",
    "available_algorithms",
    "get_route_finder",
    "resolve_algorithm_name",
]
