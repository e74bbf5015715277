"""Canvas coordinate mapping from (distance, lateral) feet into pixels."""

from __future__ import annotations

from typing import Iterable, List

from contracts import CanvasConfig, PixelPoint, TrajectorySample

# Lateral drift is stylized and drawn at a fixed scale, independent of max_distance.
DEFAULT_LATERAL_PX_PER_FT = 0.5


class CanvasMapper:
    """Maps trajectory samples onto a canvas anchored at the tee.

    Distance grows "up" the canvas from ``start_y``; the usable height
    represents ``max_distance`` feet. Points are clamped to the drawing
    surface so extreme turn/fade never escapes it. Both axes are clamped, so
    the first sample lands exactly on ``(start_x, start_y)`` only while the
    tee itself lies on the canvas; an off-canvas tee is pulled to the edge.
    """

    def __init__(self, canvas: CanvasConfig, lateral_px_per_ft: float = DEFAULT_LATERAL_PX_PER_FT) -> None:
        self._canvas = canvas.normalized()
        self._lateral_px_per_ft = lateral_px_per_ft
        self._px_per_ft = self._canvas.usable_height / self._canvas.max_distance

    @property
    def canvas(self) -> CanvasConfig:
        return self._canvas

    @property
    def pixels_per_foot(self) -> float:
        return self._px_per_ft

    def to_pixels(self, sample: TrajectorySample) -> PixelPoint:
        canvas = self._canvas
        x = canvas.start_x + sample.lateral_ft * self._lateral_px_per_ft
        y = canvas.start_y - sample.distance_ft * self._px_per_ft
        return PixelPoint(
            x=min(max(x, 0.0), canvas.width),
            y=min(max(y, 0.0), canvas.height),
        )

    def map_curve(self, samples: Iterable[TrajectorySample]) -> List[PixelPoint]:
        return [self.to_pixels(sample) for sample in samples]


def to_pixels(
    sample: TrajectorySample,
    canvas: CanvasConfig,
    lateral_px_per_ft: float = DEFAULT_LATERAL_PX_PER_FT,
) -> PixelPoint:
    return CanvasMapper(canvas, lateral_px_per_ft).to_pixels(sample)
