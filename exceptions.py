"""Custom exception classes for the flight path engine."""

from __future__ import annotations

from typing import Optional


class FlightPathError(Exception):
    """Base exception for all flight path errors."""

    pass


class ConfigError(FlightPathError):
    """Base exception for configuration errors."""

    pass


class InvalidConfigError(ConfigError):
    """Raised when configuration file is invalid or corrupted."""

    pass


class ConfigValidationError(ConfigError):
    """Raised when configuration fails schema validation."""

    def __init__(self, message: str, validation_errors: Optional[list] = None):
        self.validation_errors = validation_errors or []
        super().__init__(message)


class SerializationError(FlightPathError):
    """Base exception for curve serialization errors."""

    pass


class UnknownSerializerError(SerializationError):
    """Raised when a serializer name is not registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown path serializer: {name!r}")


class IntegrationError(FlightPathError):
    """Base exception for backend integration errors."""

    pass


class ReportError(IntegrationError):
    """Raised when an anchor correction report cannot be delivered."""

    def __init__(self, message: str, status: Optional[int] = None):
        self.status = status
        super().__init__(message)
