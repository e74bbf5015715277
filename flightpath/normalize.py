"""Flight-number normalization."""

from __future__ import annotations

import math
from typing import Any, Mapping, Optional

from contracts import UNKNOWN_FLIGHT_NUMBERS, FlightNumbers
from log_config.logger import get_logger

logger = get_logger(__name__)

SPEED_RANGE = (1.0, 15.0)
GLIDE_RANGE = (1.0, 7.0)
TURN_RANGE = (-5.0, 1.0)
FADE_RANGE = (0.0, 5.0)

# Photo overlay fills gaps in partial catalog data with a stable fairway driver.
OVERLAY_DEFAULTS = {"speed": 9.0, "glide": 5.0, "turn": 0.0, "fade": 2.0}


def _coerce(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def _clamp(value: float, bounds: tuple) -> float:
    low, high = bounds
    return min(max(value, low), high)


def normalize_flight_numbers(speed: Any, glide: Any, turn: Any, fade: Any) -> FlightNumbers:
    """Return clamped flight numbers, or the unknown sentinel.

    Missing, non-numeric or non-finite values and a non-positive speed all
    mean "no data". Never raises.
    """
    raw = [_coerce(value) for value in (speed, glide, turn, fade)]
    if any(value is None for value in raw):
        logger.debug(f"Incomplete flight numbers {speed!r}/{glide!r}/{turn!r}/{fade!r}; treating as unknown")
        return UNKNOWN_FLIGHT_NUMBERS
    speed_v, glide_v, turn_v, fade_v = raw
    if speed_v <= 0:
        return UNKNOWN_FLIGHT_NUMBERS

    normalized = FlightNumbers(
        speed=_clamp(speed_v, SPEED_RANGE),
        glide=_clamp(glide_v, GLIDE_RANGE),
        turn=_clamp(turn_v, TURN_RANGE),
        fade=_clamp(fade_v, FADE_RANGE),
    )
    if normalized.to_dict() != {"speed": speed_v, "glide": glide_v, "turn": turn_v, "fade": fade_v}:
        logger.debug(f"Clamped flight numbers to {normalized}")
    return normalized


def normalize_mapping(data: Optional[Mapping[str, Any]]) -> FlightNumbers:
    if data is None:
        return UNKNOWN_FLIGHT_NUMBERS
    if isinstance(data, FlightNumbers):
        data = data.to_dict()
    return normalize_flight_numbers(
        data.get("speed"),
        data.get("glide"),
        data.get("turn"),
        data.get("fade"),
    )


def with_overlay_defaults(data: Optional[Mapping[str, Any]]) -> FlightNumbers:
    """Normalize partial catalog data, filling gaps with the overlay defaults.

    A disc with no flight numbers at all draws as the default 9/5/0/2 disc.
    """
    if data is None:
        data = {}
    if isinstance(data, FlightNumbers):
        data = data.to_dict()
    filled = {}
    for key, default in OVERLAY_DEFAULTS.items():
        value = data.get(key)
        filled[key] = default if _coerce(value) is None else value
    return normalize_mapping(filled)
