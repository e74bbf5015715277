import pytest

from contracts import Hand, ThrowStyle, ThrowType
from flightpath.throw_type import mirror_sign, resolve_throw_type


@pytest.mark.parametrize(
    "hand, style, expected",
    [
        (Hand.RIGHT, ThrowStyle.BACKHAND, ThrowType.RHBH),
        (Hand.RIGHT, ThrowStyle.FOREHAND, ThrowType.RHFH),
        (Hand.LEFT, ThrowStyle.BACKHAND, ThrowType.LHBH),
        (Hand.LEFT, ThrowStyle.FOREHAND, ThrowType.LHFH),
    ],
)
def test_resolve_throw_type(hand, style, expected) -> None:
    assert resolve_throw_type(hand, style) is expected


def test_resolve_accepts_enum_values() -> None:
    assert resolve_throw_type("left", "forehand") is ThrowType.LHFH


def test_backhand_and_opposite_forehand_share_a_side() -> None:
    assert mirror_sign(ThrowType.RHBH) == mirror_sign(ThrowType.LHFH) == 1
    assert mirror_sign(ThrowType.RHFH) == mirror_sign(ThrowType.LHBH) == -1


def test_throw_type_properties() -> None:
    assert ThrowType.LHBH.hand is Hand.LEFT
    assert ThrowType.LHBH.style is ThrowStyle.BACKHAND
    assert ThrowType.RHFH.hand is Hand.RIGHT
    assert ThrowType.RHFH.style is ThrowStyle.FOREHAND
