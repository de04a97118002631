"""
Network Data Provider port interface.

Defines the contract for sources of airports and connections. Loading
from a database or API is the caller's business; the engine only
needs the in-memory values.
"""

from abc import ABC, abstractmethod
from typing import List

from src.route_engine.schemas.network import Airport, Connection


class NetworkDataProvider(ABC):
    """
    Abstract interface for airport network providers.

    Implementations:
    - FrameNetworkProvider: validated pandas DataFrames
    - SeedNetworkProvider: built-in ten-airport demo network
    """

    @abstractmethod
    def get_airports(self) -> List[Airport]:
        """
        Return all airports.

        Returns:
            List of Airport values.
        """
        ...

    @abstractmethod
    def get_connections(self, active_only: bool = True) -> List[Connection]:
        """
        Return stored connections.

        Args:
            active_only: Drop inactive connections when True.

        Returns:
            List of Connection values.
        """
        ...
