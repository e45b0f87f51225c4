from __future__ import annotations

import math

from veccentric.angle import to_rad
from veccentric.logging import VeccValueError
from veccentric.types import AngleLike
from veccentric.vec2 import vec2

DEFAULT_EPSILON = 1e-9


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class fvec2(vec2):
    """
    A vector in :math:`R^2` with ``float`` components and the geometry that
    needs floating point: magnitude, angle, normalization, rotation and
    limiting.

    All arithmetic inherited from :class:`veccentric.vec2` returns
    :class:`fvec2` instances. The degenerate zero vector is handled as follows:

        - :meth:`angle` returns ``0.0``,
        - :meth:`normalize` and :meth:`resize` return the zero vector,
        - :meth:`turn` keeps the magnitude at zero.
    """

    __slots__ = ()

    def __init__(self, x: float, y: float):
        """
        Creates an fvec2 instance. Components are converted with ``float()``.

        Args:
            x: The x component.
            y: The y component.
        """
        super().__init__(float(x), float(y))

    @classmethod
    def zero(cls) -> fvec2:
        return cls(0.0, 0.0)

    @classmethod
    def from_angle(cls, angle: AngleLike) -> fvec2:
        """
        Creates a unit vector pointing in the given direction.

        Args:
            angle: Direction measured counter-clockwise from the positive x axis.

        Returns:
            The unit vector.
        """
        angle = to_rad(angle)
        return cls(math.cos(angle), math.sin(angle))

    def mag(self) -> float:
        """
        Computes the magnitude of this vector :math:`|v|`.

        Return:
            The magnitude (scalar) of this vector.
        """
        return math.hypot(self.x, self.y)

    def is_zero(self) -> bool:
        return self.x == 0.0 and self.y == 0.0

    def angle(self) -> float:
        """
        Computes the heading angle of this vector, in radians, in range :math:`(-\\pi, \\pi]`.
        The zero vector has no direction and reports ``0.0``.

        Return:
            The heading angle of this vector.
        """
        if self.is_zero():
            return 0.0
        a = math.atan2(self.y, self.x)
        # atan2(-0.0, x < 0) gives -pi
        if a == -math.pi:
            return math.pi
        return a

    def angle_to(self, b: fvec2) -> float:
        """
        Computes the signed angle from this vector to another one, as the difference
        of their headings. The result is not wrapped and lies in :math:`(-2\\pi, 2\\pi)`.

        Args:
            b: The target vector.

        Returns:
            ``b.angle() - self.angle()``.
        """
        return b.angle() - self.angle()

    def dist(self, b: fvec2) -> float:
        """
        Computes the Euclidean distance between the tips of this vector and a second given vector.

        Args:
            b: the given second vector.

        Return:
            The distance between the two points.
        """
        return (self - b).mag()

    def dist_squared(self, b: fvec2) -> float:
        return (self - b).mag_squared()

    def normalize(self) -> fvec2:
        """
        Normalizes this vector so that it becomes unit length (magnitude = 1).
        The zero vector is returned unchanged instead of producing NaN components.
        Works across the whole float range, including vectors whose magnitude
        overflows to ``inf`` and subnormal ones.

        Return:
            The normalized, unit vector.
        """
        if self.is_zero():
            return fvec2.zero()
        # scaled components lie in [-1, 1] so the magnitude is in [1, sqrt(2)]
        u = self / max(abs(self.x), abs(self.y))
        return u / u.mag()

    def limit(self, max_mag: float) -> fvec2:
        """
        Limits the magnitude of this vector, keeping its direction. A vector that is
        already within the bound is returned unchanged.

        Args:
            max_mag: The largest allowed magnitude, non-negative.

        Returns:
            A vector with a magnitude of at most ``max_mag``.
        """
        if max_mag < 0:
            raise VeccValueError(f"Magnitude limit cannot be negative, got {max_mag}.")
        mag = self.mag()
        if mag <= max_mag:
            return self
        # max_mag / mag can overflow or go subnormal at the ends of the float range
        base = self.normalize()
        factor = float(max_mag)
        limited = base * factor
        # rounding can leave the result a few ulps above the bound
        while limited.mag() > max_mag:
            factor = math.nextafter(factor, 0.0)
            limited = base * factor
        return limited

    def resize(self, mag: float) -> fvec2:
        """
        Sets the magnitude of this vector, keeping its direction. The zero vector has
        no direction, so it is returned as the zero vector whatever the requested magnitude.

        Args:
            mag: The new magnitude.

        Returns:
            The resized vector.
        """
        if self.is_zero():
            return fvec2.zero()
        return self.normalize() * mag

    set_mag = resize

    def turn(self, angle: AngleLike) -> fvec2:
        """
        Sets the heading of this vector, keeping its magnitude.

        Args:
            angle: The new heading.

        Returns:
            The turned vector.
        """
        return fvec2.from_angle(angle) * self.mag()

    def rotate(self, angle: AngleLike) -> fvec2:
        """
        Rotates this vector counter-clockwise, keeping its magnitude.

        Args:
            angle: The rotation angle.

        Returns:
            The rotated vector.
        """
        angle = to_rad(angle)
        c = math.cos(angle)
        s = math.sin(angle)
        return fvec2(self.x * c - self.y * s, self.x * s + self.y * c)

    def reflect(self, normal: fvec2) -> fvec2:
        """
        Mirrors this vector about the line spanned by ``normal``: a vector pointing
        right reflected about an upward normal points left. The magnitude is kept.
        The normal need not be unit length. A zero normal raises :class:`ZeroDivisionError`.

        This is the negation of the bounce reflection :math:`v - 2n(v \\cdot n)/(n \\cdot n)`.
        To bounce a velocity off a surface with this normal, use ``-v.reflect(normal)``.

        Args:
            normal: The axis to mirror about.

        Returns:
            The reflected vector.
        """
        return normal * (2.0 * self.dot(normal) / normal.dot(normal)) - self

    def approx_eq(self, b: vec2, epsilon: float = DEFAULT_EPSILON) -> bool:
        """
        Compares two vectors component-wise with an absolute tolerance.

        Args:
            b: The vector to compare with.
            epsilon: The largest allowed difference per component.

        Returns:
            True if :math:`|\\Delta x| \\leq \\epsilon` and :math:`|\\Delta y| \\leq \\epsilon`.
        """
        return abs(self.x - b.x) <= epsilon and abs(self.y - b.y) <= epsilon

    def round(self) -> vec2:
        """
        Rounds both components to the nearest integer, halves away from zero.

        Returns:
            A :class:`veccentric.vec2` of ints.
        """
        return self.map(_round_half_away)

    def floor(self) -> vec2:
        return self.map(math.floor)

    def ceil(self) -> vec2:
        return self.map(math.ceil)
