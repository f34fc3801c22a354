"""Maze generation invariants.

Every generated maze must be a perfect maze over its carved cells:
connected, acyclic, wall faces mirrored, and every corridor cell
(even x, even y) carved into it.
"""

from __future__ import annotations

import itertools
import random

import pytest

from maze import generator
from maze.generator import build_maze, gen_dfs_backtracker, generate_maze
from maze.maze_core import MazeInvariantError
from tests.maze_test_utils import bfs_distances, count_simple_paths


def corridor_cells(grid):
    return [(x, y) for y in range(0, grid.rows, 2) for x in range(0, grid.cols, 2)]


@pytest.mark.parametrize("size", [(3, 3), (11, 11), (17, 9), (31, 31)])
def test_generated_maze_is_spanning_tree(size):
    grid, _ = generate_maze(*size, seed=7)
    nodes = grid.maze_cells()

    # Connectivity: BFS from the entrance reaches every maze cell exactly once
    dist = bfs_distances(grid, grid.entrance)
    assert set(dist) == set(nodes)

    # Acyclicity: open adjacent pairs == cells - 1
    assert grid.edge_count() == len(nodes) - 1
    grid.validate()


def test_every_corridor_cell_is_carved():
    grid, _ = generate_maze(11, 11, seed=3)
    corridors = corridor_cells(grid)
    assert len(corridors) == 36
    assert set(corridors) <= set(grid.maze_cells())
    # One wall cell opened per tree edge between corridor cells
    assert len(grid.maze_cells()) == 2 * len(corridors) - 1


def test_odd_odd_cells_stay_solid():
    grid, _ = generate_maze(11, 11, seed=5)
    for y in range(1, grid.rows, 2):
        for x in range(1, grid.cols, 2):
            assert not grid.cell(x, y).is_open()


def test_visited_flags_mark_exactly_the_maze_cells():
    grid, _ = generate_maze(13, 9, seed=11)
    visited = {c.pos for c in grid if c.visited}
    assert visited == set(grid.maze_cells())


def test_unique_simple_path_between_cells():
    grid, _ = generate_maze(7, 7, seed=21)
    cells = corridor_cells(grid)
    for a, b in itertools.combinations(cells, 2):
        assert count_simple_paths(grid, a, b) == 1, f"{a} -> {b}"


def test_solution_connects_entrance_to_exit():
    grid, solution = generate_maze(11, 11, seed=99)
    assert solution[0] == (0, 0)
    assert solution[-1] == (10, 10)
    assert isinstance(solution, tuple)
    for a, b in zip(solution, solution[1:]):
        assert grid.is_open_between(a, b)


def test_even_sizes_round_up():
    grid, solution = generate_maze(10, 16, seed=1)
    assert (grid.width, grid.height) == (11, 17)
    assert solution[-1] == (10, 16)


@pytest.mark.parametrize("size", [(1, 1), (0, 0), (-3, 1)])
def test_degenerate_sizes_give_single_cell(size):
    grid, solution = generate_maze(*size, seed=1)
    assert (grid.cols, grid.rows) == (1, 1)
    assert solution == ((0, 0),)
    assert grid.edge_count() == 0
    grid.validate()


def test_single_row_maze_is_a_corridor():
    grid, solution = generate_maze(9, 1, seed=1)
    assert len(solution) == 9
    grid.validate()


def test_same_seed_same_maze():
    a, sa = generate_maze(17, 17, seed=2024)
    b, sb = generate_maze(17, 17, seed=2024)
    assert [c.walls for c in a] == [c.walls for c in b]
    assert sa == sb


def test_injected_rng_is_used():
    a, _ = generate_maze(17, 17, rng=random.Random(8))
    b, _ = generate_maze(17, 17, rng=random.Random(8))
    c, _ = generate_maze(17, 17, rng=random.Random(9))
    assert [x.walls for x in a] == [x.walls for x in b]
    assert [x.walls for x in a] != [x.walls for x in c]


def test_step_generator_yields_carves_then_done():
    states = list(gen_dfs_backtracker(7, 7, seed=4))
    assert states[0]["carved"] is None and not states[0]["done"]
    assert states[-1]["done"]
    carves = [s["carved"] for s in states if s["carved"]]
    # 16 corridor cells joined by 15 tree edges
    assert len(carves) == 15
    for a, b in carves:
        assert abs(a[0] - b[0]) + abs(a[1] - b[1]) == 2
    # Every state shares the same grid object
    assert all(s["grid"] is states[0]["grid"] for s in states)


def test_build_maze_raises_when_exit_unreachable(monkeypatch):
    monkeypatch.setattr(generator, "find_path", lambda grid, start, goal: [])
    with pytest.raises(MazeInvariantError):
        build_maze(5, 5, rng=random.Random(0))


def test_generate_maze_regenerates_after_invariant_failure(monkeypatch, caplog):
    real_build = generator.build_maze
    calls = {"n": 0}

    def flaky_build(cols, rows, rng=None):
        calls["n"] += 1
        if calls["n"] == 1:
            raise MazeInvariantError("corrupt")
        return real_build(cols, rows, rng=rng)

    monkeypatch.setattr(generator, "build_maze", flaky_build)
    with caplog.at_level("ERROR", logger="maze.generator"):
        grid, solution = generate_maze(9, 9, seed=1)
    assert calls["n"] == 2
    assert solution[-1] == grid.exit
    assert "failed validation" in caplog.text


def test_generate_maze_gives_up_after_max_attempts(monkeypatch):
    def broken(cols, rows, rng=None):
        raise MazeInvariantError("always corrupt")

    monkeypatch.setattr(generator, "build_maze", broken)
    with pytest.raises(MazeInvariantError, match="always corrupt"):
        generate_maze(9, 9, seed=1)
