"""Shared data contracts for flight path rendering."""

from .types import (
    UNKNOWN_FLIGHT_NUMBERS,
    CanvasConfig,
    FlightNumbers,
    FlightPathResult,
    Hand,
    PixelPoint,
    ReleaseAngle,
    ThrowStyle,
    ThrowType,
    TrajectorySample,
    TrajectorySet,
)

__all__ = [
    "CanvasConfig",
    "FlightNumbers",
    "FlightPathResult",
    "Hand",
    "PixelPoint",
    "ReleaseAngle",
    "ThrowStyle",
    "ThrowType",
    "TrajectorySample",
    "TrajectorySet",
    "UNKNOWN_FLIGHT_NUMBERS",
]
