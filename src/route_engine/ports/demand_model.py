"""
Demand Model port interface.

The demand factor is the only non-deterministic part of a quote; it
sits behind this protocol so tests can pin it.
"""

from typing import Protocol, Sequence, runtime_checkable


@runtime_checkable
class DemandModel(Protocol):
    """
    Protocol for demand factor sources.

    Implementations must return a value within the configured clamp
    bounds (Config.DEMAND_MIN to Config.DEMAND_MAX).
    """

    def factor(self, path: Sequence[str]) -> float:
        """
        Demand multiplier for a route.

        Args:
            path: Ordered airport codes of the priced route.

        Returns:
            Dimensionless multiplier applied to the fare subtotal.
        """
        ...
