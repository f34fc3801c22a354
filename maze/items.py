"""
Item placement - scatter collectibles off the solution path
"""

import logging

from utils.constants import COIN_DENSITY
from utils.helpers import clamp, make_rng
from maze.maze_core import Item, ItemKind

logger = logging.getLogger(__name__)


def eligible_cells(grid, solution):
    """
    Cells that may hold an item: part of the maze (at least one open face),
    not on the solution path and not already holding an item
    """
    path_cells = set(solution)
    return [
        pos for pos in grid.open_cells()
        if pos not in path_cells and grid.cell(*pos).item is None
    ]


def place_items(grid, solution, density=COIN_DENSITY, rng=None, kind=ItemKind.COIN):
    """
    Tag floor(len(eligible) * density) eligible cells with kind

    Cells are sampled uniformly without replacement.

    Returns:
        List of placed Item records
    """
    rng = make_rng(rng)
    candidates = eligible_cells(grid, solution)
    count = int(len(candidates) * clamp(density, 0.0, 1.0))

    placed = []
    for x, y in rng.sample(candidates, count):
        grid.cell(x, y).item = kind
        placed.append(Item(x, y, kind))

    logger.debug("Placed %d %s items on %d eligible cells",
                 len(placed), kind.value, len(candidates))
    return placed


def restore_items(grid, items):
    """Put previously placed items back onto the grid"""
    grid.clear_items()
    for item in items:
        grid.cell(item.x, item.y).item = item.kind
