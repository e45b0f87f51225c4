"""
Random vectors.

The functions here take the random source as an argument so callers control
seeding. Anything with a ``random()`` method returning a uniform float in
``[0, 1)`` works, e.g. :class:`numpy.random.Generator` or :class:`random.Random`.
"""

from __future__ import annotations

import math
from logging import getLogger
from typing import Any

import numpy as np

from veccentric.fvec2 import fvec2
from veccentric.logging import LOGGER_ID, VeccValueError
from veccentric.types import Float2

TAU = 2.0 * math.pi

module_logger = getLogger(f"{LOGGER_ID}.rand")


def _check_mag_range(mag_range: Float2 | None) -> None:
    if mag_range is None:
        return
    if len(mag_range) != 2:
        raise VeccValueError(f"Magnitude range must be a (low, high) pair, got {mag_range}.")
    lo, hi = mag_range
    if lo < 0:
        raise VeccValueError(f"Magnitude range cannot start below zero, got {mag_range}.")
    if hi < lo:
        raise VeccValueError(f"Magnitude range is empty, got {mag_range}.")


def from_rng(rng: Any, mag_range: Float2 | None = None) -> fvec2:
    """
    Creates a vector pointing in a uniformly random direction.

    Args:
        rng: The random source, any object with a ``random()`` method.
        mag_range: Optional ``(low, high)`` pair. If given, the magnitude is drawn uniformly
                   from ``[low, high)``, otherwise the vector has unit length.

    Returns:
        The random vector.
    """
    _check_mag_range(mag_range)
    angle = float(rng.random()) * TAU
    # r * 2pi can round up to 2pi for r close to 1
    if angle >= TAU:
        angle = 0.0
    v = fvec2.from_angle(angle)
    if mag_range is None:
        return v
    lo, hi = mag_range
    return v * (lo + float(rng.random()) * (hi - lo))


def from_seed(seed: int, mag_range: Float2 | None = None) -> fvec2:
    """
    Creates a random vector from a freshly seeded :func:`numpy.random.default_rng`.
    The same seed always gives the same vector.

    Args:
        seed: The seed for the random generator.
        mag_range: See :func:`from_rng`.

    Returns:
        The random vector.
    """
    module_logger.debug(f"Creating random vector with seed {seed}.")
    return from_rng(np.random.default_rng(seed), mag_range)


def from_entropy(mag_range: Float2 | None = None) -> fvec2:
    """
    Creates a random vector from a :func:`numpy.random.default_rng` seeded by the OS.

    Args:
        mag_range: See :func:`from_rng`.

    Returns:
        The random vector.
    """
    rng = np.random.default_rng()
    module_logger.debug("Creating random vector from OS entropy.")
    return from_rng(rng, mag_range)
