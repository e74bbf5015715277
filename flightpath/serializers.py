"""Curve serializers.

Geometry never depends on a rendering syntax: the engine hands ordered pixel
points to a :class:`PathSerializer` and returns whatever it produces.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from contracts import PixelPoint
from exceptions import UnknownSerializerError

Bounds = Tuple[float, float, float, float]  # min_x, min_y, max_x, max_y


def format_number(value: float, precision: int = 2) -> str:
    text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return text


def _clamp_point(x: float, y: float, bounds: Optional[Bounds]) -> Tuple[float, float]:
    if bounds is None:
        return x, y
    min_x, min_y, max_x, max_y = bounds
    return min(max(x, min_x), max_x), min(max(y, min_y), max_y)


class PathSerializer(ABC):
    name: str = ""

    @abstractmethod
    def serialize(self, points: Sequence[PixelPoint], bounds: Optional[Bounds] = None) -> Any:
        raise NotImplementedError


class PointListSerializer(PathSerializer):
    name = "points"

    def serialize(self, points: Sequence[PixelPoint], bounds: Optional[Bounds] = None) -> Tuple[Tuple[float, float], ...]:
        return tuple(_clamp_point(p.x, p.y, bounds) for p in points)


class SvgPolylineSerializer(PathSerializer):
    name = "svg_polyline"

    def __init__(self, precision: int = 2) -> None:
        self.precision = precision

    def serialize(self, points: Sequence[PixelPoint], bounds: Optional[Bounds] = None) -> str:
        if not points:
            return ""
        fmt = self._fmt
        coords = [_clamp_point(p.x, p.y, bounds) for p in points]
        parts = [f"M {fmt(coords[0][0])} {fmt(coords[0][1])}"]
        parts.extend(f"L {fmt(x)} {fmt(y)}" for x, y in coords[1:])
        return " ".join(parts)

    def _fmt(self, value: float) -> str:
        return format_number(value, self.precision)


class SvgCubicPathSerializer(PathSerializer):
    """Smooth SVG path through every point (uniform Catmull-Rom as cubic Beziers).

    Control points are clamped to ``bounds`` when given; a cubic Bezier stays
    inside the hull of its control points, so the drawn curve does too.
    """

    name = "svg_cubic"

    def __init__(self, precision: int = 2) -> None:
        self.precision = precision

    def serialize(self, points: Sequence[PixelPoint], bounds: Optional[Bounds] = None) -> str:
        if not points:
            return ""
        fmt = self._fmt
        parts = [f"M {fmt(points[0].x)} {fmt(points[0].y)}"]
        last = len(points) - 1
        for i in range(last):
            p0 = points[i - 1] if i > 0 else points[i]
            p1 = points[i]
            p2 = points[i + 1]
            p3 = points[i + 2] if i + 2 <= last else p2
            c1 = _clamp_point(p1.x + (p2.x - p0.x) / 6.0, p1.y + (p2.y - p0.y) / 6.0, bounds)
            c2 = _clamp_point(p2.x - (p3.x - p1.x) / 6.0, p2.y - (p3.y - p1.y) / 6.0, bounds)
            parts.append(
                f"C {fmt(c1[0])} {fmt(c1[1])}, {fmt(c2[0])} {fmt(c2[1])}, {fmt(p2.x)} {fmt(p2.y)}"
            )
        return " ".join(parts)

    def _fmt(self, value: float) -> str:
        return format_number(value, self.precision)


SERIALIZERS: Dict[str, Callable[..., PathSerializer]] = {
    SvgCubicPathSerializer.name: SvgCubicPathSerializer,
    SvgPolylineSerializer.name: SvgPolylineSerializer,
    PointListSerializer.name: PointListSerializer,
}


def get_serializer(name: str, precision: int = 2) -> PathSerializer:
    try:
        factory = SERIALIZERS[name]
    except KeyError:
        raise UnknownSerializerError(name) from None
    if factory is PointListSerializer:
        return factory()
    return factory(precision=precision)


def available_serializers() -> List[str]:
    return sorted(SERIALIZERS)
