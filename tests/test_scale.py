import pytest

from contracts import UNKNOWN_FLIGHT_NUMBERS, FlightNumbers
from flightpath.scale import carry_distance_ft, compute_max_distance_ft, estimated_distance_ft


@pytest.mark.parametrize(
    "speed, glide, expected",
    [
        (12, 5, 400),  # 391 -> 400
        (2, 1, 100),  # 91 -> 100
        (7, 5, 300),  # 251 -> 300
        (5, 4, 200),  # 190 -> 200
        (15, 7, 400),  # clamped from 500
        (1, 1, 100),  # 63 -> 100
        (0, 0, 100),
    ],
)
def test_compute_max_distance_ft(speed, glide, expected) -> None:
    assert compute_max_distance_ft(speed, glide) == expected


def test_max_distance_is_a_multiple_of_fifty() -> None:
    for speed in range(1, 16):
        for glide in range(1, 8):
            value = compute_max_distance_ft(speed, glide)
            assert value % 50 == 0
            assert 100 <= value <= 400


def test_estimated_distance() -> None:
    assert estimated_distance_ft(7, 5) == 251


def test_carry_is_capped_by_scale() -> None:
    assert carry_distance_ft(FlightNumbers(7, 5, 0, 2), 400) == 251
    assert carry_distance_ft(FlightNumbers(15, 7, -5, 5), 400) == 400


def test_unknown_disc_uses_fallback_carry() -> None:
    assert carry_distance_ft(UNKNOWN_FLIGHT_NUMBERS, 400) == 100
    assert carry_distance_ft(UNKNOWN_FLIGHT_NUMBERS, 400, fallback_distance_ft=60) == 60
    assert carry_distance_ft(UNKNOWN_FLIGHT_NUMBERS, 50) == 50
