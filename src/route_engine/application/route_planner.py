"""
RoutePlanner - Public facade for route search and quoting.

Combines a network provider, the algorithm registry and the pricing
service behind one object, the way a request handler uses them:
look up the network, compute a route, price it.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from src.pathfinding.graph import Graph, ParallelEdgePolicy
from src.route_engine.adapters.algorithms.registry import (
    available_algorithms,
    get_route_finder,
    resolve_algorithm_name,
)
from src.route_engine.config import Config
from src.route_engine.ports.network_provider import NetworkDataProvider
from src.route_engine.schemas.pricing import PriceConfig, Quote
from src.route_engine.schemas.route import RouteResult
from src.route_engine.services.pricing_service import PricingService
from src.route_engine.services.route_finder_service import RouteFinderService

logger = logging.getLogger(__name__)


class RoutePlanner:
    """
    Public API for finding and pricing routes.

    Example usage:
        >>> planner = RoutePlanner(SeedNetworkProvider())
        >>> quote = planner.quote("DEL", "BOM", passenger_count=2)
        >>> [offer.total_fare for offer in quote.offers]

    The network is read from the provider on every call, so provider
    changes (e.g. a connection toggled inactive) apply immediately.

    Attributes:
        _provider: Source of airports and connections.
        _price_config: Pricing parameters used for quotes.
        _pricing_service: Fare computation.
        _default_algorithm: Canonical name used when none is given.
    """

    def __init__(
        self,
        provider: NetworkDataProvider,
        price_config: Optional[PriceConfig] = None,
        pricing_service: Optional[PricingService] = None,
        default_algorithm: Optional[str] = None,
        parallel_edge_policy: ParallelEdgePolicy = ParallelEdgePolicy.FIRST,
    ) -> None:
        """
        Args:
            provider: Network data provider.
            price_config: Defaults to PriceConfig.from_env().
            pricing_service: Defaults to a PricingService with random demand.
            default_algorithm: Defaults to Config.DEFAULT_ALGORITHM.
            parallel_edge_policy: Tie-break for parallel edges.

        Raises:
            UnknownAlgorithmError: If default_algorithm is not registered.
        """
        self._provider = provider
        self._price_config = price_config or PriceConfig.from_env()
        self._pricing_service = pricing_service or PricingService()
        self._default_algorithm = resolve_algorithm_name(
            default_algorithm or Config.DEFAULT_ALGORITHM
        )
        self._parallel_edge_policy = parallel_edge_policy

        logger.info(
            "RoutePlanner initialized with %s algorithm",
            self._default_algorithm,
        )

    def _service(self, algorithm: Optional[str]) -> RouteFinderService:
        finder = get_route_finder(algorithm or self._default_algorithm)
        return RouteFinderService(finder, parallel_edge_policy=self._parallel_edge_policy)

    def find_route(
        self,
        origin: str,
        destination: str,
        algorithm: Optional[str] = None,
    ) -> Optional[RouteResult]:
        """
        Compute the shortest route between two airports.

        Returns:
            RouteResult, or None if no route exists.

        Raises:
            UnknownAlgorithmError: If algorithm is not registered.
        """
        return self._service(algorithm).find_route(
            self._provider.get_airports(),
            self._provider.get_connections(),
            origin,
            destination,
        )

    def quote(
        self,
        origin: str,
        destination: str,
        passenger_count: int = 1,
        algorithm: Optional[str] = None,
    ) -> Optional[Quote]:
        """
        Compute a route and price it.

        Returns:
            Quote with three offers, or None if no route exists.

        Raises:
            UnknownAlgorithmError: If algorithm is not registered.
            InvalidPassengerCountError: If passenger_count < 1.
        """
        route = self.find_route(origin, destination, algorithm)
        if route is None:
            return None
        return self._pricing_service.quote_route(route, passenger_count, self._price_config)

    def compare_algorithms(self, origin: str, destination: str) -> dict[str, Optional[RouteResult]]:
        """Run every registered algorithm on the same graph."""
        graph = Graph(
            self._provider.get_airports(),
            self._provider.get_connections(),
            parallel_edge_policy=self._parallel_edge_policy,
        )
        return {
            name: self._service(name).find_route_in_graph(graph, origin, destination)
            for name in available_algorithms()
        }

    def available_airports(self) -> frozenset[str]:
        """All airport codes known to the provider."""
        return frozenset(a.code for a in self._provider.get_airports())

    def has_connection(self, origin: str, destination: str) -> bool:
        """True if an active connection links the two airports (either direction)."""
        return any(
            {c.source, c.target} == {origin, destination}
            for c in self._provider.get_connections()
        )

    @property
    def price_config(self) -> PriceConfig:
        return self._price_config

    @property
    def algorithm_names(self) -> List[str]:
        return available_algorithms()

    @property
    def default_algorithm(self) -> str:
        return self._default_algorithm
