from __future__ import annotations

from typing import TYPE_CHECKING, Tuple, Union

if TYPE_CHECKING:
    from veccentric.angle import Deg, Rad

# these empty comments are because of the autodocumentation

Float2 = Tuple[float, float]
""
AngleLike = Union[float, int, "Rad", "Deg"]
"""
Angle argument. Can be either:

    - a plain number, interpreted as radians,
    - a :class:`veccentric.angle.Rad`,
    - a :class:`veccentric.angle.Deg`.
"""
