"""
Custom exceptions for the route engine.

"No route" is not an exception: finders and compute_route return None
for unknown or unreachable airports. These cover inputs the engine
refuses to guess about.
"""


class RouteEngineError(Exception):
    """Base exception for all route engine errors."""

    pass


class UnknownAlgorithmError(RouteEngineError, ValueError):
    """Raised when an algorithm name is not registered."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        self.available = available
        message = f"Unknown algorithm '{name}'. Available: {', '.join(available)}"
        super().__init__(message)


class InvalidPriceConfigError(RouteEngineError, ValueError):
    """Raised when a pricing parameter is negative or not finite."""

    def __init__(self, field_name: str, value: float) -> None:
        self.field_name = field_name
        self.value = value
        message = f"{field_name} must be a finite value >= 0, got {value}"
        super().__init__(message)


class InvalidPassengerCountError(RouteEngineError, ValueError):
    """Raised when a quote is requested for fewer than one passenger."""

    def __init__(self, passenger_count: int) -> None:
        self.passenger_count = passenger_count
        message = f"passenger_count must be >= 1, got {passenger_count}"
        super().__init__(message)
