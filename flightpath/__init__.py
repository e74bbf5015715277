"""Disc flight path engine."""

from flightpath.chart import ChartLayout, DistanceMarker, toggle_selection, visible_paths
from flightpath.engine import FlightPathEngine, compute_flight_paths, compute_trajectories
from flightpath.generator import GeneratorSettings, ReleaseProfile, TrajectoryGenerator, generate_trajectories
from flightpath.mapper import CanvasMapper, to_pixels
from flightpath.normalize import normalize_flight_numbers, normalize_mapping, with_overlay_defaults
from flightpath.overlay import compute_overlay_path, project_onto_line
from flightpath.scale import carry_distance_ft, compute_max_distance_ft, estimated_distance_ft
from flightpath.serializers import (
    PathSerializer,
    PointListSerializer,
    SvgCubicPathSerializer,
    SvgPolylineSerializer,
    get_serializer,
)
from flightpath.throw_type import mirror_sign, resolve_throw_type

__all__ = [
    "CanvasMapper",
    "ChartLayout",
    "DistanceMarker",
    "FlightPathEngine",
    "GeneratorSettings",
    "PathSerializer",
    "PointListSerializer",
    "ReleaseProfile",
    "SvgCubicPathSerializer",
    "SvgPolylineSerializer",
    "TrajectoryGenerator",
    "carry_distance_ft",
    "compute_flight_paths",
    "compute_max_distance_ft",
    "compute_overlay_path",
    "compute_trajectories",
    "estimated_distance_ft",
    "generate_trajectories",
    "get_serializer",
    "mirror_sign",
    "normalize_flight_numbers",
    "normalize_mapping",
    "project_onto_line",
    "resolve_throw_type",
    "to_pixels",
    "toggle_selection",
    "visible_paths",
    "with_overlay_defaults",
]
