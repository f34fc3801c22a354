import os
import random
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from maze.generator import generate_maze  # noqa: E402
from maze.items import place_items  # noqa: E402


class FakeClock:
    """Manually advanced millisecond clock."""

    def __init__(self, start=0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, ms):
        self.now += ms


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def seeded_maze():
    """11x11 maze with coins, built from a fixed seed.

    Returns (grid, solution, items).
    """
    r = random.Random(42)
    grid, solution = generate_maze(11, 11, rng=r)
    items = place_items(grid, solution, 0.3, rng=r)
    return grid, solution, items
