"""Distance scale for the chart axis and the flight carry."""

from __future__ import annotations

import math

from contracts import FlightNumbers

MIN_SCALE_FT = 100
MAX_SCALE_FT = 400
SCALE_STEP_FT = 50
DEFAULT_FALLBACK_DISTANCE_FT = 100.0


def estimated_distance_ft(speed: float, glide: float) -> float:
    base = 30 + speed * 28  # speed 2 ~ 86 ft, speed 12 ~ 366 ft
    bonus = glide * 5
    return base + bonus


def compute_max_distance_ft(speed: float, glide: float) -> int:
    """Round the estimated distance up to a clean 50 ft step within [100, 400]."""
    estimated = estimated_distance_ft(speed, glide)
    rounded = math.ceil(estimated / SCALE_STEP_FT) * SCALE_STEP_FT
    return max(MIN_SCALE_FT, min(MAX_SCALE_FT, rounded))


def carry_distance_ft(
    flight_numbers: FlightNumbers,
    max_distance: float,
    fallback_distance_ft: float = DEFAULT_FALLBACK_DISTANCE_FT,
) -> float:
    if flight_numbers.is_unknown:
        return min(fallback_distance_ft, max_distance)
    return min(estimated_distance_ft(flight_numbers.speed, flight_numbers.glide), max_distance)
