from __future__ import annotations

from numbers import Number
from typing import TYPE_CHECKING, Callable, Iterable, Iterator, Tuple

from veccentric.logging import VeccValueError

if TYPE_CHECKING:
    from veccentric.fvec2 import fvec2


class vec2:
    """
    A class for storing vectors in :math:`R^2` with components of any numeric type.

    The components may be ``int``, ``float``, ``fractions.Fraction`` or any other
    scalar supporting the arithmetic used by an operation. The vector only ever
    combines its components with the operators of the scalar type, so errors such
    as division by zero surface exactly as the scalar raises them.

    Instances behave as values: no method mutates the vector, each one returns a
    new instance of the same class. For geometry (magnitude, angle, rotation, ...)
    see :class:`veccentric.fvec2`.
    """

    __slots__ = ("x", "y")

    # numpy scalars on the left defer to __rmul__ instead of building an array
    __array_ufunc__ = None

    def __init__(self, x, y):
        """
        Creates a vec2 instance.

        Args:
            x: The x component.
            y: The y component.
        """
        self.x = x
        self.y = y

    @classmethod
    def from_tuple(cls, xy: Iterable):
        """
        Creates a vector from an ``(x, y)`` pair.

        Args:
            xy: Any iterable holding exactly two components.

        Returns:
            The new vector.
        """
        xy = tuple(xy)
        if len(xy) != 2:
            raise VeccValueError(f"Expected a pair of components, got {len(xy)} values: {xy!r}.")
        return cls(xy[0], xy[1])

    def to_tuple(self) -> Tuple:
        return (self.x, self.y)

    def to_float(self) -> fvec2:
        """
        Converts this vector to a :class:`veccentric.fvec2`.

        Returns:
            The vector with both components converted to ``float``.
        """
        from veccentric.fvec2 import fvec2

        return fvec2(self.x, self.y)

    def map(self, func: Callable) -> vec2:
        """
        Applies a function to both components, e.g. ``v.map(int)``.

        Args:
            func: A callable taking and returning a scalar.

        Returns:
            A :class:`vec2` holding the mapped components.
        """
        return vec2(func(self.x), func(self.y))

    def __add__(self, b):
        """
        Vector addition.

        Args:
            b: A given vector to be added to this vector.

        Returns:
            The sum of the two vectors.
        """
        if not isinstance(b, vec2):
            return NotImplemented
        return self.__class__(self.x + b.x, self.y + b.y)

    def __sub__(self, b):
        """
        Vector subtraction.

        Args:
            b: A given vector to be subtracted from this vector.

        Returns:
            The difference of the two vectors.
        """
        if not isinstance(b, vec2):
            return NotImplemented
        return self.__class__(self.x - b.x, self.y - b.y)

    def __neg__(self):
        return self.__class__(-self.x, -self.y)

    def __invert__(self):
        return self.__class__(~self.x, ~self.y)

    def __mul__(self, b):
        """
        Scalar multiplication.

        Args:
            b: A given scalar value to be multiplied to this vector (from either left or right).

        Returns:
            This vector multiplied by the given scalar value.
        """
        if not isinstance(b, Number):
            return NotImplemented
        return self.__class__(self.x * b, self.y * b)

    def __rmul__(self, b):
        if not isinstance(b, Number):
            return NotImplemented
        return self.__class__(b * self.x, b * self.y)

    def __truediv__(self, b):
        """
        Scalar division. Each component is divided by ``b`` with the scalar's own
        ``/``, so dividing by zero raises :class:`ZeroDivisionError` like it does
        for plain numbers.

        Args:
            b: A given scalar value by which to divide this vector.

        Returns:
            This vector divided by the given scalar value.
        """
        if not isinstance(b, Number):
            return NotImplemented
        return self.__class__(self.x / b, self.y / b)

    def __floordiv__(self, b):
        if not isinstance(b, Number):
            return NotImplemented
        return self.__class__(self.x // b, self.y // b)

    def __mod__(self, b):
        """
        Component-wise remainder, either by a scalar or by another vector.
        Follows Python's sign rule, so ``vec2(-3, 12) % 10 == vec2(7, 2)``, which
        makes it usable to wrap positions around the bounds of a world.

        Args:
            b: A scalar or a vector holding the modulus for each component.

        Returns:
            The wrapped vector.
        """
        if isinstance(b, vec2):
            return self.__class__(self.x % b.x, self.y % b.y)
        if not isinstance(b, Number):
            return NotImplemented
        return self.__class__(self.x % b, self.y % b)

    def __eq__(self, b) -> bool:
        if not isinstance(b, vec2):
            return NotImplemented
        return self.x == b.x and self.y == b.y

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def __getitem__(self, n: int):
        """
        Returns the n-th element of the vector, starting by zero. Negative indices
        count from the end like they do for a tuple.

        Args:
            n: The index of the element to return.

        Returns:
            The vector element at n-th index.
        """
        if n == 0 or n == -2:
            return self.x
        if n == 1 or n == -1:
            return self.y
        raise IndexError(f"{self.__class__.__name__} does not have an element at index {n}.")

    def __len__(self) -> int:
        return 2

    def __iter__(self) -> Iterator:
        yield self.x
        yield self.y

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(x={self.x!r}, y={self.y!r})"

    def dot(self, b):
        """
        Computes the dot product between this vector and a given vector.

        Args:
            b: the given second vector with which to compute the dot product.

        Returns:
            The scalar-valued dot product.
        """
        return self.x * b.x + self.y * b.y

    def cross(self, b):
        """
        Computes the cross product between this vector and a given vector

        Args:
            b: the given second vector with which to compute the cross product.

        Return:
            The scalar valued cross product (cross products are scalar in :math:`R^2`).
            Positive when ``b`` lies counter-clockwise from this vector.
        """
        return self.x * b.y - self.y * b.x

    def mag_squared(self):
        """
        Computes the squared magnitude of this vector, :math:`|v|^2`. Stays exact for integer components.

        Return:
            The squared magnitude.
        """
        return self.x * self.x + self.y * self.y

    def min(self, b) -> vec2:
        return self.__class__(min(self.x, b.x), min(self.y, b.y))

    def max(self, b) -> vec2:
        return self.__class__(max(self.x, b.x), max(self.y, b.y))

    def clamp(self, lo, hi) -> vec2:
        """
        Clamps each component to the matching components of two bounding vectors.

        Args:
            lo: The lower bounds.
            hi: The upper bounds.

        Returns:
            The clamped vector.
        """
        return self.max(lo).min(hi)
