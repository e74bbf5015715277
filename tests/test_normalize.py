import math

from contracts import UNKNOWN_FLIGHT_NUMBERS, FlightNumbers
from flightpath.normalize import normalize_flight_numbers, normalize_mapping, with_overlay_defaults


def test_in_range_values_pass_through() -> None:
    fn = normalize_flight_numbers(12, 5, -1, 3)
    assert fn == FlightNumbers(speed=12.0, glide=5.0, turn=-1.0, fade=3.0)
    assert not fn.is_unknown


def test_out_of_range_values_are_clamped() -> None:
    fn = normalize_flight_numbers(20, 9, -8, 7)
    assert fn == FlightNumbers(speed=15.0, glide=7.0, turn=-5.0, fade=5.0)

    fn = normalize_flight_numbers(0.5, 0, 3, -1)
    assert fn == FlightNumbers(speed=1.0, glide=1.0, turn=1.0, fade=0.0)


def test_numeric_strings_are_accepted() -> None:
    assert normalize_flight_numbers("7", "5", "0", "2") == FlightNumbers(7.0, 5.0, 0.0, 2.0)


def test_missing_or_bad_values_become_unknown() -> None:
    assert normalize_flight_numbers(None, 5, 0, 2) is UNKNOWN_FLIGHT_NUMBERS
    assert normalize_flight_numbers(9, None, 0, 2) is UNKNOWN_FLIGHT_NUMBERS
    assert normalize_flight_numbers("fast", 5, 0, 2) is UNKNOWN_FLIGHT_NUMBERS
    assert normalize_flight_numbers(math.nan, 5, 0, 2) is UNKNOWN_FLIGHT_NUMBERS
    assert normalize_flight_numbers(9, math.inf, 0, 2) is UNKNOWN_FLIGHT_NUMBERS
    assert normalize_flight_numbers(True, 5, 0, 2) is UNKNOWN_FLIGHT_NUMBERS


def test_non_positive_speed_means_no_data() -> None:
    assert normalize_flight_numbers(0, 5, 0, 1).is_unknown
    assert normalize_flight_numbers(-3, 5, 0, 1).is_unknown


def test_normalize_mapping() -> None:
    assert normalize_mapping(None) is UNKNOWN_FLIGHT_NUMBERS
    assert normalize_mapping({"speed": 2, "glide": 3, "turn": 0, "fade": 1}) == FlightNumbers(2.0, 3.0, 0.0, 1.0)
    assert normalize_mapping({"speed": 2, "glide": 3}) is UNKNOWN_FLIGHT_NUMBERS
    assert normalize_mapping(FlightNumbers(16, 5, 0, 1)).speed == 15.0


def test_overlay_defaults_fill_partial_data() -> None:
    fn = with_overlay_defaults({"speed": None, "glide": 4, "turn": None, "fade": None})
    assert fn == FlightNumbers(speed=9.0, glide=4.0, turn=0.0, fade=2.0)
    assert with_overlay_defaults({}) == FlightNumbers(9.0, 5.0, 0.0, 2.0)
    assert with_overlay_defaults(None) == FlightNumbers(9.0, 5.0, 0.0, 2.0)
