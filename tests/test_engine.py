"""End-to-end properties of the flight path engine."""

import pytest

from contracts import CanvasConfig, FlightNumbers, FlightPathResult, ReleaseAngle, ThrowType
from flightpath.chart import ChartLayout
from flightpath.engine import FlightPathEngine, compute_flight_paths, compute_trajectories
from flightpath.scale import compute_max_distance_ft
from flightpath.serializers import PointListSerializer, SvgPolylineSerializer

DRIVER = FlightNumbers(speed=12, glide=5, turn=-1, fade=3)


@pytest.fixture
def canvas() -> CanvasConfig:
    return CanvasConfig(width=240, height=300, start_x=140, start_y=280, max_distance=400)


def _points(flight_numbers, throw_type, canvas) -> FlightPathResult:
    return compute_flight_paths(flight_numbers, throw_type, canvas, serializer=PointListSerializer())


def test_compute_max_distance_scenarios() -> None:
    assert compute_max_distance_ft(12, 5) == 400
    assert compute_max_distance_ft(2, 1) == 100
    assert compute_max_distance_ft(7, 5) == 300


def test_default_output_is_svg(canvas) -> None:
    result = compute_flight_paths(DRIVER, ThrowType.RHBH, canvas)
    for angle in ReleaseAngle:
        assert result.get(angle).startswith("M 140 280 C ")


def test_results_are_deterministic(canvas) -> None:
    first = compute_flight_paths(DRIVER, ThrowType.RHFH, canvas)
    second = compute_flight_paths(DRIVER, ThrowType.RHFH, canvas)
    assert first == second
    assert compute_trajectories(DRIVER, ThrowType.RHFH, 400) == compute_trajectories(DRIVER, ThrowType.RHFH, 400)


@pytest.mark.parametrize("throw_type", list(ThrowType))
def test_every_curve_originates_at_the_tee(canvas, throw_type) -> None:
    result = _points(DRIVER, throw_type, canvas)
    for angle in ReleaseAngle:
        assert result.get(angle)[0] == (140.0, 280.0)


def test_distance_is_monotonic_up_the_canvas(canvas) -> None:
    result = _points(DRIVER, ThrowType.LHBH, canvas)
    for angle in ReleaseAngle:
        ys = [y for _, y in result.get(angle)]
        assert all(b <= a for a, b in zip(ys, ys[1:]))


def test_carry_never_exceeds_the_scale() -> None:
    curves = compute_trajectories(FlightNumbers(15, 7, -5, 5), ThrowType.RHBH, max_distance=300)
    assert curves.carry_ft == 300
    assert max(s.distance_ft for s in curves.flat) == pytest.approx(300)


def test_left_hand_negates_lateral_offsets() -> None:
    right = compute_trajectories(DRIVER, ThrowType.RHBH, 400)
    left = compute_trajectories(DRIVER, ThrowType.LHBH, 400)
    for angle in ReleaseAngle:
        assert [s.distance_ft for s in left.get(angle)] == [s.distance_ft for s in right.get(angle)]
        assert [s.lateral_ft for s in left.get(angle)] == [-s.lateral_ft for s in right.get(angle)]


def test_left_hand_mirrors_pixels_around_the_tee(canvas) -> None:
    right = _points(DRIVER, ThrowType.RHBH, canvas)
    left = _points(DRIVER, ThrowType.LHBH, canvas)
    for (rx, ry), (lx, ly) in zip(right.flat, left.flat):
        assert ly == ry
        assert lx - 140 == pytest.approx(-(rx - 140))


def test_hyzer_fades_more_than_flat_and_anhyzer_less(canvas) -> None:
    result = _points(DRIVER, ThrowType.RHBH, canvas)
    # right-hand backhand fade pulls toward smaller x
    assert result.hyzer[-1][0] < result.flat[-1][0] < result.anhyzer[-1][0]


def test_missing_flight_numbers_draw_straight_lines(canvas) -> None:
    result = _points(None, ThrowType.RHBH, canvas)
    for angle in ReleaseAngle:
        assert all(x == 140.0 for x, _ in result.get(angle))
    curves = compute_trajectories(None, ThrowType.RHBH, 400)
    assert curves.is_fallback
    assert all(s.lateral_ft == 0.0 for s in curves.hyzer + curves.flat + curves.anhyzer)


@pytest.mark.parametrize(
    "flight_numbers",
    [FlightNumbers(speed=15, glide=7, turn=-5, fade=5), FlightNumbers(speed=1, glide=1, turn=0, fade=0)],
)
@pytest.mark.parametrize("throw_type", list(ThrowType))
def test_extreme_discs_stay_on_the_canvas(flight_numbers, throw_type) -> None:
    canvas = ChartLayout().canvas_for(flight_numbers)
    result = _points(flight_numbers, throw_type, canvas)
    for angle in ReleaseAngle:
        for x, y in result.get(angle):
            assert 0.0 <= x <= canvas.width
            assert 0.0 <= y <= canvas.height


def test_out_of_range_numbers_are_clamped_before_generation() -> None:
    wild = compute_trajectories(FlightNumbers(speed=18, glide=9, turn=-8, fade=7), ThrowType.RHBH, 400)
    legal = compute_trajectories(FlightNumbers(speed=15, glide=7, turn=-5, fade=5), ThrowType.RHBH, 400)
    assert wild == legal


def test_degenerate_canvas_does_not_raise() -> None:
    result = _points(DRIVER, ThrowType.RHBH, CanvasConfig(width=0, height=0, start_x=0, start_y=0, max_distance=0))
    for angle in ReleaseAngle:
        for x, y in result.get(angle):
            assert 0.0 <= x <= 1.0
            assert 0.0 <= y <= 1.0


def test_engine_uses_its_serializer(canvas) -> None:
    engine = FlightPathEngine(serializer=SvgPolylineSerializer(precision=0))
    result = engine.compute(DRIVER, ThrowType.RHBH, canvas)
    assert result.flat.startswith("M 140 280 L ")
    assert "C" not in result.flat
    assert set(result.to_dict()) == {"hyzer", "flat", "anhyzer"}
