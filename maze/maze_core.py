"""
Core maze structures - cells, walls, and grid invariants
"""

from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from utils.constants import (
    RIGHT, BOTTOM, ALL_WALLS, DIRS, DIR_TO_BITS,
    CORRIDOR_STEP, MIN_MAZE_SIZE
)


class MazeInvariantError(Exception):
    """Raised when a grid's wall topology is not a perfect maze"""


class ItemKind(Enum):
    """Collectible item kinds"""
    COIN = "coin"
    KEY = "key"
    POWER = "power"
    TRAP = "trap"


class Direction(Enum):
    """Movement directions, valued by their (dx, dy) step"""
    NORTH = (0, -1)
    EAST = (1, 0)
    SOUTH = (0, 1)
    WEST = (-1, 0)

    @property
    def dx(self):
        return self.value[0]

    @property
    def dy(self):
        return self.value[1]

    @property
    def wall_bit(self):
        return DIR_TO_BITS[self.value][0]

    @property
    def opposite_bit(self):
        return DIR_TO_BITS[self.value][1]

    @classmethod
    def parse(cls, value):
        """
        Coerce a Direction, a name ('north', 'up', ...) or a (dx, dy) pair

        Raises:
            ValueError: if value does not name a direction
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            if key in _DIRECTION_ALIASES:
                return _DIRECTION_ALIASES[key]
        elif isinstance(value, tuple) and value in DIR_TO_BITS:
            return cls(value)
        raise ValueError(f"Unknown direction: {value!r}")


_DIRECTION_ALIASES = {
    "north": Direction.NORTH, "up": Direction.NORTH, "n": Direction.NORTH,
    "east": Direction.EAST, "right": Direction.EAST, "e": Direction.EAST,
    "south": Direction.SOUTH, "down": Direction.SOUTH, "s": Direction.SOUTH,
    "west": Direction.WEST, "left": Direction.WEST, "w": Direction.WEST,
}


@dataclass
class Cell:
    """
    One grid cell. Walls are a TOP|RIGHT|BOTTOM|LEFT bitmask, item is an
    ItemKind or None, visited is only meaningful during generation.
    """
    x: int
    y: int
    walls: int = ALL_WALLS
    item: Optional[ItemKind] = None
    visited: bool = False

    @property
    def pos(self):
        return (self.x, self.y)

    def has_wall(self, direction):
        """Check whether the face towards direction is walled"""
        return (self.walls & direction.wall_bit) != 0

    def is_open(self):
        """True if at least one face is open"""
        return self.walls != ALL_WALLS


@dataclass(frozen=True)
class Item:
    """A collectible placed on a cell"""
    x: int
    y: int
    kind: ItemKind

    @property
    def pos(self):
        return (self.x, self.y)


def normalize_size(n):
    """Round a requested side length up to a valid odd size"""
    n = int(n)
    if n < MIN_MAZE_SIZE:
        return MIN_MAZE_SIZE
    if n % 2 == 0:
        return n + 1
    return n


class MazeGrid:
    """
    Maze grid with wall-based representation
    Cells are stored row-major: cells[y][x]
    """
    def __init__(self, cols, rows):
        self.cols = cols
        self.rows = rows
        # Initialize all walls closed
        self.cells = [[Cell(x, y) for x in range(cols)] for y in range(rows)]

    @classmethod
    def create(cls, width, height):
        """Fully walled grid with both sides normalized to odd sizes"""
        return cls(normalize_size(width), normalize_size(height))

    @property
    def width(self):
        return self.cols

    @property
    def height(self):
        return self.rows

    @property
    def entrance(self):
        return (0, 0)

    @property
    def exit(self):
        return (self.cols - 1, self.rows - 1)

    def in_bounds(self, x, y):
        """Check if coordinates are within grid bounds"""
        return 0 <= x < self.cols and 0 <= y < self.rows

    def cell(self, x, y):
        """Get the Cell at (x, y)"""
        return self.cells[y][x]

    def __iter__(self):
        for row in self.cells:
            yield from row

    def __len__(self):
        return self.cols * self.rows

    def __repr__(self):
        return f"MazeGrid({self.cols}x{self.rows})"

    # ---------- neighbours ----------

    def neighbors4(self, x, y):
        """Get in-bounds orthogonal neighbours of a cell"""
        res = []
        for dx, dy, _, _ in DIRS:
            nx, ny = x + dx, y + dy
            if self.in_bounds(nx, ny):
                res.append((nx, ny))
        return res

    def corridor_neighbors(self, x, y):
        """Get in-bounds corridor cells two steps away"""
        res = []
        for dx, dy, _, _ in DIRS:
            nx, ny = x + dx * CORRIDOR_STEP, y + dy * CORRIDOR_STEP
            if self.in_bounds(nx, ny):
                res.append((nx, ny))
        return res

    def can_move(self, x, y, direction):
        """Check if a step in direction from (x, y) passes through an open face"""
        nx, ny = x + direction.dx, y + direction.dy
        if not self.in_bounds(nx, ny):
            return False
        return not self.cells[y][x].has_wall(direction)

    def open_neighbors(self, x, y):
        """Get list of neighbour cells reachable without crossing a wall"""
        res = []
        for direction in Direction:
            if self.can_move(x, y, direction):
                res.append((x + direction.dx, y + direction.dy))
        return res

    def is_open_between(self, a, b):
        """Check if passage is open between two adjacent cells"""
        bits = DIR_TO_BITS.get((b[0] - a[0], b[1] - a[1]))
        if bits is None:
            return False
        return (self.cells[a[1]][a[0]].walls & bits[0]) == 0

    # ---------- mutation ----------

    def carve_passage(self, a, b):
        """Clear the mirrored wall pair between two adjacent cells"""
        bits = DIR_TO_BITS.get((b[0] - a[0], b[1] - a[1]))
        assert bits is not None, f"cells {a} and {b} are not adjacent"
        assert self.in_bounds(*a) and self.in_bounds(*b), f"carve out of bounds: {a} -> {b}"
        wall_bit, opp_bit = bits
        self.cells[a[1]][a[0]].walls &= ~wall_bit
        self.cells[b[1]][b[0]].walls &= ~opp_bit

    def remove_wall_between(self, a, b):
        """
        Open the corridor between two lattice cells exactly two apart on one axis

        Clears a->mid and mid->b, where mid is the wall cell between them.
        Returns the mid coordinate.
        """
        dx = b[0] - a[0]
        dy = b[1] - a[1]
        assert (abs(dx), abs(dy)) in ((CORRIDOR_STEP, 0), (0, CORRIDOR_STEP)), \
            f"cells {a} and {b} are not {CORRIDOR_STEP} apart on one axis"
        mid = (a[0] + dx // 2, a[1] + dy // 2)
        self.carve_passage(a, mid)
        self.carve_passage(mid, b)
        return mid

    def clear_items(self):
        """Remove every item tag"""
        for cell in self:
            cell.item = None

    # ---------- queries ----------

    def maze_cells(self):
        """
        Cells that belong to the maze graph: the entrance plus every cell
        with an open face. Fully walled cells elsewhere are solid rock.
        """
        ex, ey = self.entrance
        return [c.pos for c in self if c.is_open() or (c.x == ex and c.y == ey)]

    def open_cells(self):
        """Cells with at least one open face"""
        return [c.pos for c in self if c.is_open()]

    def edge_count(self):
        """Count open adjacent pairs"""
        edges = 0
        for c in self:
            if c.x + 1 < self.cols and (c.walls & RIGHT) == 0:
                edges += 1
            if c.y + 1 < self.rows and (c.walls & BOTTOM) == 0:
                edges += 1
        return edges

    def items(self):
        """List of Item records currently on the grid"""
        return [Item(c.x, c.y, c.item) for c in self if c.item is not None]

    def reachable_from(self, start):
        """BFS set of cells reachable from start through open faces"""
        q = deque([start])
        seen = {start}
        while q:
            x, y = q.popleft()
            for n in self.open_neighbors(x, y):
                if n not in seen:
                    seen.add(n)
                    q.append(n)
        return seen

    def validate(self):
        """
        Check that the grid is a perfect maze

        Raises:
            MazeInvariantError: on wall-mirroring mismatch, an opened outer
                face, a disconnected maze cell, or a cycle
        """
        for c in self:
            for dx, dy, wall_bit, opp_bit in DIRS:
                nx, ny = c.x + dx, c.y + dy
                here = (c.walls & wall_bit) != 0
                if not self.in_bounds(nx, ny):
                    if not here:
                        raise MazeInvariantError(f"outer face open at {c.pos}")
                    continue
                there = (self.cells[ny][nx].walls & opp_bit) != 0
                if here != there:
                    raise MazeInvariantError(
                        f"wall mismatch between {c.pos} and {(nx, ny)}"
                    )

        nodes = self.maze_cells()
        reached = self.reachable_from(self.entrance)
        if len(reached) != len(nodes):
            raise MazeInvariantError(
                f"maze disconnected: reached {len(reached)} of {len(nodes)} cells"
            )
        edges = self.edge_count()
        if edges != len(nodes) - 1:
            raise MazeInvariantError(
                f"maze has cycles: {edges} passages for {len(nodes)} cells"
            )
