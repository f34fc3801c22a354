"""
Maze generation - randomized DFS backtracker over the corridor lattice
"""

import logging

from utils.constants import MAX_GENERATION_ATTEMPTS
from utils.helpers import make_rng
from maze.maze_core import MazeGrid, MazeInvariantError
from maze.pathfinding import find_path

logger = logging.getLogger(__name__)


def unvisited_corridor_neighbors(grid, x, y):
    """Corridor cells two steps away that the generator has not reached yet"""
    return [(nx, ny) for nx, ny in grid.corridor_neighbors(x, y)
            if not grid.cell(nx, ny).visited]


# ========== GENERATOR: DFS BACKTRACKER ==========

def gen_dfs_backtracker(cols, rows, rng=None, seed=None):
    """
    Depth-First Search with backtracking - step generator

    Works on the even-coordinate corridor lattice with an explicit stack.
    Each carve opens the wall cell between two corridor cells and marks it
    visited. Yields a state dict after every carve or backtrack so a host
    can animate or spread generation over several frames.
    """
    rng = make_rng(rng, seed)
    grid = MazeGrid.create(cols, rows)

    current = grid.entrance
    grid.cell(*current).visited = True
    stack = []

    yield {"grid": grid, "current": current, "carved": None, "done": False}

    while True:
        neighbors = unvisited_corridor_neighbors(grid, *current)

        if neighbors:
            nxt = rng.choice(neighbors)
            mid = grid.remove_wall_between(current, nxt)
            grid.cell(*mid).visited = True
            grid.cell(*nxt).visited = True
            stack.append(current)
            carved = (current, nxt)
            current = nxt

            yield {"grid": grid, "current": current, "carved": carved, "done": False}
        elif stack:
            current = stack.pop()
            yield {"grid": grid, "current": current, "carved": None, "done": False}
        else:
            break

    yield {"grid": grid, "current": grid.entrance, "carved": None, "done": True}


def run_to_completion(gen):
    """Drain a step generator and return its final grid"""
    last_state = None
    for state in gen:
        last_state = state
    return last_state["grid"]


def solve(grid):
    """
    Reference solution from entrance to exit

    Raises:
        MazeInvariantError: if the exit is unreachable
    """
    solution = find_path(grid, grid.entrance, grid.exit)
    if not solution:
        raise MazeInvariantError(f"no path from {grid.entrance} to {grid.exit}")
    return tuple(solution)


def build_maze(cols, rows, rng=None):
    """
    Generate one maze, validate it and compute its solution

    Returns:
        (MazeGrid, solution tuple)

    Raises:
        MazeInvariantError: if the result is not a perfect maze
    """
    grid = run_to_completion(gen_dfs_backtracker(cols, rows, rng=rng))
    grid.validate()
    return grid, solve(grid)


def generate_maze(width, height, rng=None, seed=None):
    """
    Build a perfect maze of (normalized) width x height

    A grid that fails validation is discarded and regenerated; after
    MAX_GENERATION_ATTEMPTS failures the last error propagates.

    Returns:
        (MazeGrid, solution tuple of (x, y) from entrance to exit)
    """
    rng = make_rng(rng, seed)
    last_error = None
    for attempt in range(1, MAX_GENERATION_ATTEMPTS + 1):
        try:
            grid, solution = build_maze(width, height, rng=rng)
        except MazeInvariantError as e:
            logger.error("Maze %sx%s failed validation (attempt %d): %s",
                         width, height, attempt, e)
            last_error = e
            continue
        logger.debug("Generated %r, solution length %d", grid, len(solution))
        return grid, solution
    raise last_error
