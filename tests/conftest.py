from __future__ import annotations

import numpy as np
import pytest

from veccentric import fvec2


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)


@pytest.fixture
def sample_vectors(rng: np.random.Generator):
    vectors = [fvec2(*xy) for xy in rng.uniform(-100.0, 100.0, size=(20, 2))]
    vectors += [fvec2(1.0, 0.0), fvec2(0.0, -3.5), fvec2(-1e-3, 2e-3), fvec2(1e6, -1e6)]
    return vectors
