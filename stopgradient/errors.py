"""Exceptions raised by stopgradient."""


class GradientError(ValueError):
    """Base class for gradient configuration and usage errors."""


class InvalidConfiguration(GradientError):
    """Raised when a gradient is initialized with an unusable range or stop list."""


class NotInitialized(GradientError, RuntimeError):
    """Raised when a gradient is queried before it was initialized."""

    def __init__(self, message: str = "Gradient must be initialized before it can be queried") -> None:
        super().__init__(message)
