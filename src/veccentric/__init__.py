import os

from veccentric.angle import Deg, Rad, deg, rad, to_rad
from veccentric.fvec2 import DEFAULT_EPSILON, fvec2
from veccentric.logging import VeccError, VeccValueError
from veccentric.rand import from_entropy, from_rng, from_seed
from veccentric.vec2 import vec2

Vector2D = vec2
FloatVector2D = fvec2


def read(fil):
    fil = os.path.join(os.path.dirname(__file__), fil)
    with open(fil, encoding="utf-8") as f:
        return f.read()


__version__ = read("version.txt")
