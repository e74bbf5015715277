"""Hand and style resolution into canonical throw types."""

from __future__ import annotations

from typing import Dict, Tuple

from contracts import Hand, ThrowStyle, ThrowType

_THROW_TYPES: Dict[Tuple[Hand, ThrowStyle], ThrowType] = {
    (Hand.RIGHT, ThrowStyle.BACKHAND): ThrowType.RHBH,
    (Hand.RIGHT, ThrowStyle.FOREHAND): ThrowType.RHFH,
    (Hand.LEFT, ThrowStyle.BACKHAND): ThrowType.LHBH,
    (Hand.LEFT, ThrowStyle.FOREHAND): ThrowType.LHFH,
}


def resolve_throw_type(hand: Hand, style: ThrowStyle) -> ThrowType:
    return _THROW_TYPES[(Hand(hand), ThrowStyle(style))]


def mirror_sign(throw_type: ThrowType) -> int:
    """Sign applied to every lateral offset.

    RHBH and LHFH curve the same way on screen; RHFH and LHBH are their mirror.
    """
    return ThrowType(throw_type).mirror_sign
