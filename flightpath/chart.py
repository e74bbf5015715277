"""Static flight chart layout: tee anchor, distance scale and legend toggling."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, List, Optional

from contracts import CanvasConfig, FlightNumbers, ReleaseAngle
from flightpath.normalize import normalize_mapping
from flightpath.scale import compute_max_distance_ft


@dataclass(frozen=True)
class DistanceMarker:
    y: float
    distance_ft: int

    @property
    def label(self) -> str:
        return f"{self.distance_ft}ft"


@dataclass(frozen=True)
class ChartLayout:
    width: float = 240.0
    height: float = 300.0
    left_margin: float = 40.0  # room for distance labels
    top_margin: float = 20.0
    tee_offset: float = 20.0
    marker_count: int = 4

    @property
    def tee_x(self) -> float:
        return self.left_margin + (self.width - self.left_margin) / 2.0

    @property
    def tee_y(self) -> float:
        return self.height - self.tee_offset

    def canvas_for(self, flight_numbers: Optional[FlightNumbers]) -> CanvasConfig:
        fn = normalize_mapping(flight_numbers)
        return CanvasConfig(
            width=self.width,
            height=self.height,
            start_x=self.tee_x,
            start_y=self.tee_y,
            max_distance=compute_max_distance_ft(fn.speed, fn.glide),
            top_margin=self.top_margin,
        )

    def distance_markers(self, canvas: CanvasConfig) -> List[DistanceMarker]:
        """Evenly spaced gridlines from the tee to the top of the scale, tee excluded."""
        frame = canvas.normalized()
        count = max(int(self.marker_count), 1)
        interval = frame.max_distance / count
        px_per_ft = frame.usable_height / frame.max_distance
        return [
            DistanceMarker(
                y=frame.start_y - i * interval * px_per_ft,
                distance_ft=int(math.floor(i * interval + 0.5)),
            )
            for i in range(1, count + 1)
        ]


def visible_paths(selected: Optional[ReleaseAngle]) -> Dict[ReleaseAngle, bool]:
    """None shows every curve; a release angle isolates that one."""
    return {angle: selected is None or angle == selected for angle in ReleaseAngle}


def toggle_selection(current: Optional[ReleaseAngle], angle: ReleaseAngle) -> Optional[ReleaseAngle]:
    """Tapping the isolated curve again shows all of them."""
    angle = ReleaseAngle(angle)
    return None if current == angle else angle
