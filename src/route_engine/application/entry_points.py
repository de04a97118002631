"""
Stateless entry points of the route engine.

These are the two calls the web layer makes: compute a route, then
price it. Both build everything they need per call.
"""

from typing import Iterable, List, Optional, Sequence

from src.pathfinding.graph import ParallelEdgePolicy
from src.route_engine.adapters.algorithms.registry import get_route_finder
from src.route_engine.config import Config
from src.route_engine.ports.demand_model import DemandModel
from src.route_engine.schemas.network import Airport, Connection
from src.route_engine.schemas.pricing import Offer, PriceConfig
from src.route_engine.schemas.route import RouteResult
from src.route_engine.services.pricing_service import PricingService
from src.route_engine.services.route_finder_service import RouteFinderService


def compute_route(
    airports: Iterable[Airport],
    connections: Iterable[Connection],
    start: str,
    end: str,
    algorithm: Optional[str] = None,
    parallel_edge_policy: ParallelEdgePolicy = ParallelEdgePolicy.FIRST,
) -> Optional[RouteResult]:
    """
    Compute the shortest route between two airports.

    Args:
        airports: Airport nodes.
        connections: Stored connections (treated as bidirectional;
            inactive ones ignored).
        start: Origin IATA code.
        end: Destination IATA code.
        algorithm: 'dijkstra', 'astar', 'bellmanford', 'floydwarshall'
            or an alias; defaults to Config.DEFAULT_ALGORITHM.
        parallel_edge_policy: Which parallel edge reports a hop.

    Returns:
        RouteResult, or None for unknown or unreachable airports.

    Raises:
        UnknownAlgorithmError: If the algorithm name is not registered.

    Example:
        >>> result = compute_route(airports, connections, "DEL", "BOM")
        >>> result.path
        ('DEL', 'BOM')
    """
    finder = get_route_finder(algorithm or Config.DEFAULT_ALGORITHM)
    service = RouteFinderService(finder, parallel_edge_policy=parallel_edge_policy)
    return service.find_route(airports, connections, start, end)


def generate_quote(
    path: Sequence[str],
    total_distance_km: float,
    passenger_count: int,
    config: Optional[PriceConfig] = None,
    demand_model: Optional[DemandModel] = None,
) -> List[Offer]:
    """
    Price a route in the Saver, Standard and Flex fare classes.

    Args:
        path: Ordered airport codes of the route.
        total_distance_km: Route distance.
        passenger_count: Number of passengers (>= 1).
        config: Pricing parameters; defaults to PriceConfig.from_env().
        demand_model: Demand source; defaults to a fresh
            RandomDemandModel, so repeated calls differ.

    Returns:
        Exactly three offers, in Saver, Standard, Flex order.

    Raises:
        InvalidPassengerCountError: If passenger_count < 1.
    """
    service = PricingService(demand_model=demand_model)
    return service.generate_quote(
        path,
        total_distance_km,
        passenger_count,
        config or PriceConfig.from_env(),
    )
