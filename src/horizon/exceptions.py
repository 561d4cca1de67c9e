"""Custom exceptions for terrain generation."""


class HorizonError(Exception):
    """Base exception for horizon errors."""

    pass


class InvalidProfileLengthError(HorizonError, ValueError):
    """Raised when a height profile is requested with no columns."""

    pass


class ConfigError(HorizonError):
    """Raised when a configuration file is missing or invalid."""

    pass


class ValidationFailedError(HorizonError):
    """Raised when a generated world violates a generation invariant."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__(
            f"Terrain validation failed with {len(errors)} errors: " + "; ".join(errors)
        )
