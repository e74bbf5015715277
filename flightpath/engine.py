"""Flight path engine: flight numbers + throw type + canvas -> three curves."""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Any, Optional

from contracts import (
    CanvasConfig,
    FlightNumbers,
    FlightPathResult,
    ThrowType,
    TrajectorySet,
)
from flightpath.generator import GeneratorSettings, TrajectoryGenerator
from flightpath.mapper import DEFAULT_LATERAL_PX_PER_FT, CanvasMapper
from flightpath.normalize import normalize_mapping
from flightpath.scale import carry_distance_ft
from flightpath.serializers import PathSerializer, SvgCubicPathSerializer, get_serializer
from log_config.logger import get_logger, log_performance

if TYPE_CHECKING:
    from configs.settings import AppConfig

logger = get_logger(__name__)


class FlightPathEngine:
    """Stateless engine bundling generator settings, lateral scale and serializer."""

    def __init__(
        self,
        settings: Optional[GeneratorSettings] = None,
        serializer: Optional[PathSerializer] = None,
        lateral_px_per_ft: float = DEFAULT_LATERAL_PX_PER_FT,
    ) -> None:
        self._generator = TrajectoryGenerator(settings)
        self._serializer = serializer or SvgCubicPathSerializer()
        self._lateral_px_per_ft = lateral_px_per_ft

    @classmethod
    def from_config(cls, config: "AppConfig") -> "FlightPathEngine":
        return cls(
            settings=config.generator,
            serializer=get_serializer(config.serializer.name, precision=config.serializer.precision),
            lateral_px_per_ft=config.canvas.lateral_px_per_ft,
        )

    @property
    def settings(self) -> GeneratorSettings:
        return self._generator.settings

    @property
    def serializer(self) -> PathSerializer:
        return self._serializer

    def trajectories(
        self,
        flight_numbers: Optional[FlightNumbers],
        throw_type: ThrowType,
        max_distance: float,
    ) -> TrajectorySet:
        fn = normalize_mapping(flight_numbers)
        total = carry_distance_ft(fn, max(float(max_distance), 1.0), self.settings.fallback_distance_ft)
        return self._generator.generate(fn, throw_type, total)

    def compute(
        self,
        flight_numbers: Optional[FlightNumbers],
        throw_type: ThrowType,
        canvas: CanvasConfig,
    ) -> FlightPathResult[Any]:
        started = time.perf_counter()
        frame = canvas.normalized()
        if frame != canvas:
            logger.debug(f"Clamped canvas geometry {canvas} -> {frame}")

        curves = self.trajectories(flight_numbers, throw_type, frame.max_distance)
        mapper = CanvasMapper(frame, self._lateral_px_per_ft)
        serialize = self._serializer.serialize
        result = FlightPathResult(
            hyzer=serialize(mapper.map_curve(curves.hyzer), frame.bounds),
            flat=serialize(mapper.map_curve(curves.flat), frame.bounds),
            anhyzer=serialize(mapper.map_curve(curves.anhyzer), frame.bounds),
        )
        log_performance("compute_flight_paths", (time.perf_counter() - started) * 1000.0, threshold_ms=20.0)
        return result


def compute_trajectories(
    flight_numbers: Optional[FlightNumbers],
    throw_type: ThrowType,
    max_distance: float,
    settings: Optional[GeneratorSettings] = None,
) -> TrajectorySet:
    """Geometry stage only: samples in feet, no canvas or serializer involved."""
    return FlightPathEngine(settings).trajectories(flight_numbers, throw_type, max_distance)


def compute_flight_paths(
    flight_numbers: Optional[FlightNumbers],
    throw_type: ThrowType,
    canvas: CanvasConfig,
    serializer: Optional[PathSerializer] = None,
    settings: Optional[GeneratorSettings] = None,
    lateral_px_per_ft: float = DEFAULT_LATERAL_PX_PER_FT,
) -> FlightPathResult[Any]:
    """Hyzer, flat and anhyzer curves for a disc, anchored at the canvas tee.

    ``flight_numbers`` may be None (disc without catalog data); the result is
    then three straight reference lines.
    """
    engine = FlightPathEngine(settings=settings, serializer=serializer, lateral_px_per_ft=lateral_px_per_ft)
    return engine.compute(flight_numbers, throw_type, canvas)
