"""
Maze engine - grid, generation, pathfinding and item placement
"""

from .maze_core import (
    Cell, Direction, Item, ItemKind, MazeGrid, MazeInvariantError, normalize_size
)
from .generator import gen_dfs_backtracker, build_maze, generate_maze
from .pathfinding import find_path, bfs_shortest_path
from .items import place_items

__all__ = ['Cell', 'Direction', 'Item', 'ItemKind', 'MazeGrid', 'MazeInvariantError',
           'normalize_size', 'gen_dfs_backtracker', 'build_maze', 'generate_maze',
           'find_path', 'bfs_shortest_path', 'place_items']
