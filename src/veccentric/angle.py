"""
Angles and conversion between units.

Methods of :class:`veccentric.fvec2` taking an angle accept a plain number
(radians), a :class:`Rad` or a :class:`Deg`. Using the wrapper types makes the
unit explicit at the call site.
"""

from __future__ import annotations

import math

from veccentric.types import AngleLike


class Rad:
    """
    An angle expressed in radians.
    """

    __slots__ = ("value",)

    def __init__(self, value: float):
        self.value = float(value)

    def to_rad(self) -> float:
        return self.value

    def __eq__(self, other) -> bool:
        if isinstance(other, Rad):
            return self.value == other.value
        return NotImplemented

    def __hash__(self) -> int:
        return hash((Rad, self.value))

    def __repr__(self) -> str:
        return f"Rad({self.value!r})"


class Deg:
    """
    An angle expressed in degrees.
    """

    __slots__ = ("value",)

    def __init__(self, value: float):
        self.value = float(value)

    def to_rad(self) -> float:
        return math.radians(self.value)

    def __eq__(self, other) -> bool:
        if isinstance(other, Deg):
            return self.value == other.value
        return NotImplemented

    def __hash__(self) -> int:
        return hash((Deg, self.value))

    def __repr__(self) -> str:
        return f"Deg({self.value!r})"


def _check_plain(value) -> None:
    if isinstance(value, (Rad, Deg)):
        raise TypeError(f"{value!r} already carries a unit.")


def rad(value: float) -> Rad:
    """
    Marks a plain number as an angle in radians.

    Args:
        value: The angle.

    Returns:
        The wrapped angle.
    """
    _check_plain(value)
    return Rad(value)


def deg(value: float) -> Deg:
    """
    Marks a plain number as an angle in degrees.

    Args:
        value: The angle.

    Returns:
        The wrapped angle.
    """
    _check_plain(value)
    return Deg(value)


def to_rad(angle: AngleLike) -> float:
    """
    Converts any accepted angle argument to a float in radians.

    Args:
        angle: A plain number (radians), a :class:`Rad` or a :class:`Deg`.

    Returns:
        The angle in radians.
    """
    if isinstance(angle, (Rad, Deg)):
        return angle.to_rad()
    # numpy scalars convert through __float__ as well
    if isinstance(angle, bool) or not hasattr(angle, "__float__"):
        raise TypeError(f"Cannot interpret {angle!r} as an angle.")
    return float(angle)
