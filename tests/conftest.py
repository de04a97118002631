"""
Shared fixtures for route engine tests.
"""

from typing import List

import pytest

from src.pathfinding.graph import Graph
from src.route_engine.schemas.network import Airport, Connection
from tests.helpers import make_airport, make_connections


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def diamond_airports() -> List[Airport]:
    return [make_airport(code) for code in ("AAA", "BBB", "CCC", "DDD")]


@pytest.fixture
def diamond_connections() -> List[Connection]:
    """AAA -> DDD is shortest via BBB (2 km); direct costs 10, via CCC 6."""
    return make_connections(
        [
            ("AAA", "BBB", 1.0),
            ("BBB", "DDD", 1.0),
            ("AAA", "CCC", 1.0),
            ("CCC", "DDD", 5.0),
            ("AAA", "DDD", 10.0),
        ]
    )


@pytest.fixture
def diamond_graph(diamond_airports, diamond_connections) -> Graph:
    return Graph(diamond_airports, diamond_connections)


@pytest.fixture
def del_bom_airports() -> List[Airport]:
    return [
        Airport("DEL", "Indira Gandhi Intl", "Delhi", "India", 28.556, 77.100),
        Airport("BOM", "Chhatrapati Shivaji", "Mumbai", "India", 19.089, 72.865),
    ]


@pytest.fixture
def del_bom_connections() -> List[Connection]:
    return [Connection("DEL", "BOM", 1138.0, True)]
