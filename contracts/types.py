"""Core data contracts for flight numbers, throws, canvases and curves."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Generic, Tuple, TypeVar

Curve = TypeVar("Curve")


class Hand(str, Enum):
    RIGHT = "right"
    LEFT = "left"


class ThrowStyle(str, Enum):
    BACKHAND = "backhand"
    FOREHAND = "forehand"


class ReleaseAngle(str, Enum):
    HYZER = "hyzer"
    FLAT = "flat"
    ANHYZER = "anhyzer"


class ThrowType(str, Enum):
    RHBH = "rhbh"
    RHFH = "rhfh"
    LHBH = "lhbh"
    LHFH = "lhfh"

    @property
    def hand(self) -> Hand:
        return Hand.RIGHT if self.value.startswith("rh") else Hand.LEFT

    @property
    def style(self) -> ThrowStyle:
        return ThrowStyle.BACKHAND if self.value.endswith("bh") else ThrowStyle.FOREHAND

    @property
    def mirror_sign(self) -> int:
        """+1 for RHBH/LHFH, -1 for RHFH/LHBH."""
        hand_sign = -1 if self.hand is Hand.LEFT else 1
        style_sign = -1 if self.style is ThrowStyle.FOREHAND else 1
        return hand_sign * style_sign


@dataclass(frozen=True)
class FlightNumbers:
    speed: float
    glide: float
    turn: float
    fade: float

    @property
    def is_unknown(self) -> bool:
        return self.speed <= 0

    def to_dict(self) -> Dict[str, float]:
        return {
            "speed": self.speed,
            "glide": self.glide,
            "turn": self.turn,
            "fade": self.fade,
        }


# Disc without catalog data.
UNKNOWN_FLIGHT_NUMBERS = FlightNumbers(speed=0.0, glide=0.0, turn=0.0, fade=0.0)


@dataclass(frozen=True)
class CanvasConfig:
    width: float
    height: float
    start_x: float
    start_y: float
    max_distance: float  # feet represented by the usable height
    top_margin: float = 20.0

    def normalized(self) -> "CanvasConfig":
        """Clamp degenerate geometry to a minimum 1x1 frame."""
        return CanvasConfig(
            width=max(float(self.width), 1.0),
            height=max(float(self.height), 1.0),
            start_x=float(self.start_x),
            start_y=float(self.start_y),
            max_distance=max(float(self.max_distance), 1.0),
            top_margin=max(float(self.top_margin), 0.0),
        )

    @property
    def usable_height(self) -> float:
        return max(self.start_y - self.top_margin, 1.0)

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        return (0.0, 0.0, float(self.width), float(self.height))


@dataclass(frozen=True)
class TrajectorySample:
    distance_ft: float
    lateral_ft: float


@dataclass(frozen=True)
class PixelPoint:
    x: float
    y: float


@dataclass(frozen=True)
class TrajectorySet:
    hyzer: Tuple[TrajectorySample, ...]
    flat: Tuple[TrajectorySample, ...]
    anhyzer: Tuple[TrajectorySample, ...]
    carry_ft: float
    is_fallback: bool = False

    def get(self, angle: ReleaseAngle) -> Tuple[TrajectorySample, ...]:
        return getattr(self, ReleaseAngle(angle).value)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "carry_ft": self.carry_ft,
            "is_fallback": self.is_fallback,
            **{
                angle.value: [[s.distance_ft, s.lateral_ft] for s in self.get(angle)]
                for angle in ReleaseAngle
            },
        }


@dataclass(frozen=True)
class FlightPathResult(Generic[Curve]):
    hyzer: Curve
    flat: Curve
    anhyzer: Curve

    def get(self, angle: ReleaseAngle) -> Curve:
        return getattr(self, ReleaseAngle(angle).value)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "hyzer": self.hyzer,
            "flat": self.flat,
            "anhyzer": self.anhyzer,
        }
