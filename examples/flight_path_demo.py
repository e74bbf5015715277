"""Flight path demo for a few catalog discs."""

from __future__ import annotations

import json

from configs.settings import load_config
from contracts import Hand, ThrowStyle
from flightpath import FlightPathEngine, normalize_flight_numbers, resolve_throw_type
from log_config.logger import configure_logging

DISCS = {
    "distance_driver": (12, 5, -1, 3),
    "fairway_driver": (7, 5, 0, 2),
    "putter": (2, 3, 0, 1),
    "no_catalog_data": (None, None, None, None),
}


def main() -> None:
    config = load_config()
    configure_logging(config.logging.level, config.logging.logs_dir)
    engine = FlightPathEngine.from_config(config)
    throw_type = resolve_throw_type(Hand.RIGHT, ThrowStyle.BACKHAND)

    payload = {}
    for name, numbers in DISCS.items():
        flight_numbers = normalize_flight_numbers(*numbers)
        canvas = config.chart.canvas_for(flight_numbers)
        payload[name] = {
            "max_distance_ft": canvas.max_distance,
            "markers": [marker.label for marker in config.chart.distance_markers(canvas)],
            "paths": engine.compute(flight_numbers, throw_type, canvas).to_dict(),
        }
    print(json.dumps(payload, indent=2))


if __name__ == "__main__":
    main()
