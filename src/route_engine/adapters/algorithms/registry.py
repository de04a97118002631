"""
Algorithm registry: maps algorithm names to RouteFinder adapters.
"""

from typing import Callable, Dict, List

from src.route_engine.adapters.algorithms.astar_adapter import AStarRouteFinder
from src.route_engine.adapters.algorithms.bellman_ford_adapter import (
    BellmanFordRouteFinder,
)
from src.route_engine.adapters.algorithms.dijkstra_adapter import DijkstraRouteFinder
from src.route_engine.adapters.algorithms.floyd_warshall_adapter import (
    FloydWarshallRouteFinder,
)
from src.route_engine.exceptions import UnknownAlgorithmError
from src.route_engine.ports.route_finder import RouteFinder

ALGORITHMS: Dict[str, Callable[[], RouteFinder]] = {
    "dijkstra": DijkstraRouteFinder,
    "astar": AStarRouteFinder,
    "bellmanford": BellmanFordRouteFinder,
    "floydwarshall": FloydWarshallRouteFinder,
}

# Descriptive names for the same four strategies
ALIASES: Dict[str, str] = {
    "uninformed": "dijkstra",
    "heuristic": "astar",
    "a*": "astar",
    "relaxation": "bellmanford",
    "bellman-ford": "bellmanford",
    "all-pairs": "floydwarshall",
    "floyd-warshall": "floydwarshall",
}


def available_algorithms() -> List[str]:
    """Canonical algorithm names in registry order."""
    return list(ALGORITHMS.keys())


def resolve_algorithm_name(name: str) -> str:
    """
    Normalize an algorithm name or alias to its canonical name.

    Raises:
        UnknownAlgorithmError: If the name is not registered.
    """
    key = name.strip().lower()
    key = ALIASES.get(key, key)
    if key not in ALGORITHMS:
        raise UnknownAlgorithmError(name, available_algorithms())
    return key


def get_route_finder(name: str) -> RouteFinder:
    """
    Create the RouteFinder registered under name (or an alias).

    Raises:
        UnknownAlgorithmError: If the name is not registered.
    """
    return ALGORITHMS[resolve_algorithm_name(name)]()
