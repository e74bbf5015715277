"""Flight path overlay between a tee and a basket marked on a hole photo."""

from __future__ import annotations

import math
from typing import Any, List, Mapping, Optional, Sequence, Tuple, Union

import numpy as np

from contracts import FlightNumbers, PixelPoint, ReleaseAngle, ThrowType, TrajectorySample
from flightpath.generator import GeneratorSettings, TrajectoryGenerator
from flightpath.normalize import with_overlay_defaults
from flightpath.scale import MAX_SCALE_FT, carry_distance_ft
from flightpath.serializers import PathSerializer, SvgCubicPathSerializer
from log_config.logger import get_logger

logger = get_logger(__name__)

Point = Tuple[float, float]


def percent_to_pixels(point_pct: Point, canvas_width: float, canvas_height: float) -> Point:
    return (point_pct[0] / 100.0 * canvas_width, point_pct[1] / 100.0 * canvas_height)


def project_onto_line(samples: Sequence[TrajectorySample], tee: Point, basket: Point) -> List[PixelPoint]:
    """Place a curve so its first sample sits on the tee and its last on the basket.

    The curve is rotated and uniformly scaled (the thrower aims so the disc
    finishes at the basket). Lateral offsets land on the right-hand
    perpendicular of the tee-to-basket line as seen from the tee.
    """
    tee_v = np.asarray(tee, dtype=float)
    line = np.asarray(basket, dtype=float) - tee_v
    length = float(np.hypot(line[0], line[1]))
    if not samples or length == 0.0:
        return [PixelPoint(x=float(tee_v[0]), y=float(tee_v[1]))]

    local = np.array([[s.distance_ft, s.lateral_ft] for s in samples], dtype=float)
    chord = local[-1] - local[0]
    chord_len = float(np.hypot(chord[0], chord[1]))
    if chord_len == 0.0:
        return [PixelPoint(x=float(tee_v[0]), y=float(tee_v[1])), PixelPoint(x=float(basket[0]), y=float(basket[1]))]

    theta = math.atan2(chord[1], chord[0])
    cos_t, sin_t = math.cos(theta), math.sin(theta)
    rotation = np.array([[cos_t, sin_t], [-sin_t, cos_t]])
    aligned = (local - local[0]) @ rotation.T * (length / chord_len)

    along = line / length
    perpendicular = np.array([-along[1], along[0]])
    pixels = tee_v + np.outer(aligned[:, 0], along) + np.outer(aligned[:, 1], perpendicular)
    return [PixelPoint(x=float(x), y=float(y)) for x, y in pixels]


def compute_overlay_path(
    flight_numbers: Optional[Union[FlightNumbers, Mapping[str, Any]]],
    release_angle: ReleaseAngle,
    throw_type: ThrowType,
    tee_pct: Point,
    basket_pct: Point,
    canvas_width: float,
    canvas_height: float,
    serializer: Optional[PathSerializer] = None,
    settings: Optional[GeneratorSettings] = None,
) -> Any:
    """Serialized curve for one release angle from the tee to the basket.

    Tee and basket are percentages (0-100) of the photo size. Missing flight
    numbers, individually or all at once, use the overlay defaults.
    """
    serializer = serializer or SvgCubicPathSerializer()
    width = max(float(canvas_width), 1.0)
    height = max(float(canvas_height), 1.0)
    tee = percent_to_pixels(tee_pct, width, height)
    basket = percent_to_pixels(basket_pct, width, height)

    generator = TrajectoryGenerator(settings)
    fn = with_overlay_defaults(flight_numbers)
    carry = carry_distance_ft(fn, MAX_SCALE_FT, generator.settings.fallback_distance_ft)
    samples = generator.generate(fn, throw_type, carry).get(release_angle)

    points = [
        PixelPoint(x=min(max(p.x, 0.0), width), y=min(max(p.y, 0.0), height))
        for p in project_onto_line(samples, tee, basket)
    ]
    if len(points) == 1:
        logger.debug("Tee and basket coincide; overlay collapses to the tee")
    return serializer.serialize(points, (0.0, 0.0, width, height))
