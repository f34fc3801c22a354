"""Block map export, size tiers and run state transitions."""

from __future__ import annotations

import pytest

from game.game_state import RunState, RunStateManager
from maze.blockmap import grid_to_blockmap, pos_to_blockmap
from maze.difficulty import (
    get_difficulty_config, get_difficulty_description, get_difficulty_name, size_tier_for
)
from maze.generator import generate_maze
from maze.maze_core import MazeGrid
from utils.constants import DIFFICULTY_EASY, DIFFICULTY_HARD, DIFFICULTY_EXPERT
from utils.helpers import format_time, format_score


def test_blockmap_shape_and_border():
    grid, _ = generate_maze(11, 11, seed=1)
    bm = grid_to_blockmap(grid)
    assert bm.shape == (23, 23)
    assert bm[0, :].all() and bm[-1, :].all()
    assert bm[:, 0].all() and bm[:, -1].all()


def test_blockmap_matches_open_passages():
    grid, _ = generate_maze(9, 7, seed=4)
    bm = grid_to_blockmap(grid)
    for c in grid:
        r, col = pos_to_blockmap(c.x, c.y)
        is_maze_cell = c.pos in set(grid.maze_cells())
        assert bm[r, col] == (0 if is_maze_cell else 1)
        if c.x + 1 < grid.cols:
            open_east = grid.is_open_between(c.pos, (c.x + 1, c.y))
            assert bm[r, col + 1] == (0 if open_east else 1)


def test_blockmap_counts_passages():
    grid, _ = generate_maze(11, 11, seed=2)
    bm = grid_to_blockmap(grid)
    # Open wall segments between maze cells equal the tree's edge count
    wall_segments = [(r, c) for r in range(bm.shape[0]) for c in range(bm.shape[1])
                     if (r % 2) != (c % 2)]
    assert sum(1 for r, c in wall_segments if bm[r, c] == 0) == grid.edge_count()


def test_blockmap_of_fresh_grid_is_solid_except_entrance():
    bm = grid_to_blockmap(MazeGrid.create(3, 3))
    assert int(bm.sum()) == bm.size - 1
    assert bm[1, 1] == 0


@pytest.mark.parametrize(
    "size,tier",
    [((11, 11), 0), ((5, 5), 0), ((17, 17), 1), ((20, 20), 1), ((23, 23), 2), ((31, 31), 3), ((61, 61), 3)],
)
def test_size_tier_for(size, tier):
    assert size_tier_for(*size) == tier


def test_tier_configs():
    assert (get_difficulty_config(DIFFICULTY_HARD).cols, get_difficulty_config(DIFFICULTY_HARD).rows) == (23, 23)
    assert get_difficulty_config(42) is get_difficulty_config(DIFFICULTY_EASY)
    assert get_difficulty_name(DIFFICULTY_EXPERT) == "EXPERT"
    assert get_difficulty_name(9) == "UNKNOWN"
    assert get_difficulty_description(DIFFICULTY_EASY) == "EASY (11x11) x1"


def test_run_state_transitions():
    sm = RunStateManager()
    assert sm.is_state(RunState.ACTIVE)
    sm.transition_to(RunState.PAUSED)
    sm.transition_to(RunState.ACTIVE)
    sm.transition_to(RunState.WON)
    assert sm.previous_state is RunState.ACTIVE
    for state in RunState:
        with pytest.raises(ValueError):
            sm.transition_to(state)


def test_paused_run_cannot_win_directly():
    sm = RunStateManager()
    sm.transition_to(RunState.PAUSED)
    assert not sm.can_transition(RunState.WON)


def test_formatting_helpers():
    assert format_time(0) == "0:00"
    assert format_time(75500) == "1:15"
    assert format_score(1234567) == "1,234,567"
