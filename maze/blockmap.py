"""
Block Map - convert bitmask walls into a solid block grid

The block map is (2*rows+1) x (2*cols+1):
  - Corners [2*cy, 2*cx]: solid if any adjacent wall segment is solid
  - Horizontal walls [2*cy, 2*cx+1]: TOP/BOTTOM walls
  - Vertical walls [2*cy+1, 2*cx]: LEFT/RIGHT walls
  - Interiors [2*cy+1, 2*cx+1]: solid only for cells outside the maze graph
"""

import numpy as np

from utils.constants import TOP, RIGHT, BOTTOM, LEFT


def grid_to_blockmap(grid):
    """
    Convert a MazeGrid into a 2D int32 array (bm_h, bm_w), 1=solid, 0=empty
    """
    cols, rows = grid.cols, grid.rows
    bm_w = 2 * cols + 1
    bm_h = 2 * rows + 1
    blockmap = np.zeros((bm_h, bm_w), dtype=np.int32)

    maze_cells = set(grid.maze_cells())

    for cell in grid:
        cx, cy = cell.x, cell.y
        w = cell.walls

        if (w & TOP) != 0:
            blockmap[2 * cy, 2 * cx + 1] = 1
        if (w & BOTTOM) != 0:
            blockmap[2 * (cy + 1), 2 * cx + 1] = 1
        if (w & LEFT) != 0:
            blockmap[2 * cy + 1, 2 * cx] = 1
        if (w & RIGHT) != 0:
            blockmap[2 * cy + 1, 2 * (cx + 1)] = 1

        if cell.pos not in maze_cells:
            blockmap[2 * cy + 1, 2 * cx + 1] = 1

    # Corner pillars are solid when any neighbouring segment is solid
    for by in range(0, bm_h, 2):
        for bx in range(0, bm_w, 2):
            if ((by > 0 and blockmap[by - 1, bx]) or
                    (by < bm_h - 1 and blockmap[by + 1, bx]) or
                    (bx > 0 and blockmap[by, bx - 1]) or
                    (bx < bm_w - 1 and blockmap[by, bx + 1])):
                blockmap[by, bx] = 1

    return blockmap


def pos_to_blockmap(x, y):
    """Block map coordinates (row, col) of a cell's interior"""
    return 2 * y + 1, 2 * x + 1
