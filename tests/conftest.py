import math
import random

import pytest


@pytest.fixture
def square_with_center():
    return [(0, 0), (0, 1), (1, 0), (1, 1), (0.5, 0.5)]


@pytest.fixture
def unit_circle():
    return [(math.cos(2 * math.pi * k / 8), math.sin(2 * math.pi * k / 8)) for k in range(8)]


@pytest.fixture
def random_cloud():
    rng = random.Random(42)
    return [(rng.uniform(0, 100), rng.uniform(0, 100)) for _ in range(100)]
