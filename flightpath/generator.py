"""Trajectory curve generator.

Lateral drift is modeled as a blend of two regimes along normalized progress
``t`` in ``[0, 1]``: turn dominates while the disc is fast (near the tee) and
fade takes over as it slows (near the end of the flight). Each release angle
rescales the two regimes and adds a constant release bias, which ramps in from
zero so that every curve starts at the tee.

Positive lateral offsets point toward canvas ``+x``. For a right-hand backhand
throw turn drifts right and fade hooks left; other throw types flip the sign
via :func:`flightpath.throw_type.mirror_sign`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

import numpy as np

from contracts import (
    UNKNOWN_FLIGHT_NUMBERS,
    FlightNumbers,
    ReleaseAngle,
    ThrowType,
    TrajectorySample,
    TrajectorySet,
)
from flightpath.scale import DEFAULT_FALLBACK_DISTANCE_FT
from flightpath.throw_type import mirror_sign
from log_config.logger import get_logger

logger = get_logger(__name__)

# t^3 * (1 - t)^2 peaks at 108/3125 when t = 0.6; the gain scales that peak to 1.
TURN_PEAK_GAIN = 3125.0 / 108.0


@dataclass(frozen=True)
class ReleaseProfile:
    turn_scale: float
    fade_scale: float
    bias_direction: float  # +1 toward turn, -1 toward fade


RELEASE_PROFILES: Dict[ReleaseAngle, ReleaseProfile] = {
    ReleaseAngle.HYZER: ReleaseProfile(turn_scale=0.5, fade_scale=1.4, bias_direction=-1.0),
    ReleaseAngle.FLAT: ReleaseProfile(turn_scale=1.0, fade_scale=1.0, bias_direction=0.0),
    ReleaseAngle.ANHYZER: ReleaseProfile(turn_scale=1.6, fade_scale=0.6, bias_direction=1.0),
}


@dataclass(frozen=True)
class GeneratorSettings:
    sample_count: int = 24
    turn_ft_per_point: float = 8.0
    fade_ft_per_point: float = 10.0
    release_bias_ft: float = 20.0
    bias_ramp: float = 0.35
    reference_carry_ft: float = 250.0
    fallback_distance_ft: float = DEFAULT_FALLBACK_DISTANCE_FT


def progress(sample_count: int) -> np.ndarray:
    return np.linspace(0.0, 1.0, max(int(sample_count), 2))


def _bias_ramp(t: np.ndarray, ramp: float) -> np.ndarray:
    if ramp <= 0:
        return np.where(t > 0, 1.0, 0.0)
    u = np.clip(t / ramp, 0.0, 1.0)
    return u * u * (3.0 - 2.0 * u)


def lateral_offset_ft(
    t: np.ndarray,
    flight_numbers: FlightNumbers,
    angle: ReleaseAngle,
    sign: int,
    total_distance: float,
    settings: GeneratorSettings,
) -> np.ndarray:
    """Lateral offset in feet at each progress value ``t``."""
    profile = RELEASE_PROFILES[ReleaseAngle(angle)]
    spread = 1.0 + flight_numbers.glide / 10.0
    drift = total_distance / settings.reference_carry_ft if settings.reference_carry_ft > 0 else 1.0

    turn_magnitude = -flight_numbers.turn * settings.turn_ft_per_point * spread * drift * profile.turn_scale
    fade_magnitude = flight_numbers.fade * settings.fade_ft_per_point * spread * drift * profile.fade_scale

    launch = t ** 2
    # Turn builds in one order later than the release bias, so hyzer and
    # anhyzer leave the tee on opposite sides for any turn rating.
    turn_onset = t
    turn_weight = (1.0 - t) ** 2
    fade_weight = t ** 2
    shaped = launch * (TURN_PEAK_GAIN * turn_onset * turn_weight * turn_magnitude - fade_weight * fade_magnitude)
    bias = profile.bias_direction * settings.release_bias_ft * drift * _bias_ramp(t, settings.bias_ramp)
    return sign * (shaped + bias)


class TrajectoryGenerator:
    def __init__(self, settings: Optional[GeneratorSettings] = None) -> None:
        self._settings = settings or GeneratorSettings()

    @property
    def settings(self) -> GeneratorSettings:
        return self._settings

    def generate(
        self,
        flight_numbers: Optional[FlightNumbers],
        throw_type: ThrowType,
        total_distance: float,
    ) -> TrajectorySet:
        fn = flight_numbers if flight_numbers is not None else UNKNOWN_FLIGHT_NUMBERS
        t = progress(self._settings.sample_count)

        if fn.is_unknown:
            carry = max(self._settings.fallback_distance_ft, 0.0)
            logger.debug(f"No usable flight numbers; straight {carry:.0f} ft reference line")
            straight = _to_samples(t * carry, np.zeros_like(t))
            return TrajectorySet(
                hyzer=straight,
                flat=straight,
                anhyzer=straight,
                carry_ft=carry,
                is_fallback=True,
            )

        carry = max(float(total_distance), 0.0)
        distances = t * carry
        sign = mirror_sign(throw_type)
        curves = {
            angle: _to_samples(distances, lateral_offset_ft(t, fn, angle, sign, carry, self._settings))
            for angle in ReleaseAngle
        }
        return TrajectorySet(
            hyzer=curves[ReleaseAngle.HYZER],
            flat=curves[ReleaseAngle.FLAT],
            anhyzer=curves[ReleaseAngle.ANHYZER],
            carry_ft=carry,
        )


def generate_trajectories(
    flight_numbers: Optional[FlightNumbers],
    throw_type: ThrowType,
    total_distance: float,
    settings: Optional[GeneratorSettings] = None,
) -> TrajectorySet:
    return TrajectoryGenerator(settings).generate(flight_numbers, throw_type, total_distance)


def _to_samples(distances: np.ndarray, laterals: np.ndarray) -> Tuple[TrajectorySample, ...]:
    return tuple(
        TrajectorySample(distance_ft=float(d), lateral_ft=float(l) + 0.0)
        for d, l in zip(distances, laterals)
    )
