"""
Custom exceptions for the pathfinding module.

Unknown or unreachable endpoints are not errors here: the searches
report them through their distance tables and callers get ``None``.
These exceptions cover broken invariants only.
"""


class PathfindingError(Exception):
    """Base exception for all pathfinding module errors."""

    pass


class NegativeCycleError(PathfindingError):
    """Raised by Bellman-Ford when cycle detection is enabled and a negative cycle is reachable."""

    def __init__(self, airport: str) -> None:
        self.airport = airport
        message = f"Negative-weight cycle reachable through airport '{airport}'"
        super().__init__(message)


class ReconstructionError(PathfindingError):
    """Raised when predecessor or next-hop tables cannot be turned into a path."""

    def __init__(self, start: str, end: str, reason: str) -> None:
        self.start = start
        self.end = end
        self.reason = reason
        message = f"Cannot reconstruct path {start} -> {end}: {reason}"
        super().__init__(message)
