"""
Pathfinding over a MazeGrid - A* for solutions and hints, BFS as reference
"""

import heapq
from collections import deque

from utils.helpers import manhattan_distance


def manhattan(a, b):
    """Manhattan distance heuristic"""
    return manhattan_distance(a[0], a[1], b[0], b[1])


def reconstruct_path(prev, goal):
    """Reconstruct path from prev dictionary"""
    path = []
    cur = goal
    while cur is not None:
        path.append(cur)
        cur = prev[cur]
    path.reverse()
    return path


def find_path(grid, start, goal, cost=None):
    """
    A* shortest path from start to goal through open walls

    Args:
        grid: MazeGrid
        start, goal: (x, y) tuples
        cost: optional callable (x, y) -> step cost of entering a cell.
              Costs must be >= 1 to keep the Manhattan heuristic admissible.

    Returns:
        List of (x, y) from start to goal, or [] if no path exists
    """
    if not (grid.in_bounds(*start) and grid.in_bounds(*goal)):
        return []
    if start == goal:
        return [start]

    open_heap = []
    heapq.heappush(open_heap, (manhattan(start, goal), 0, start))

    prev = {start: None}
    g_score = {start: 0}
    closed = set()

    while open_heap:
        f, g, cur = heapq.heappop(open_heap)
        if cur in closed:
            continue
        closed.add(cur)

        if cur == goal:
            return reconstruct_path(prev, goal)

        for nxt in grid.open_neighbors(*cur):
            if nxt in closed:
                continue
            step = 1 if cost is None else cost(*nxt)
            tentative_g = g + step

            old_g = g_score.get(nxt)
            if old_g is None or tentative_g < old_g:
                g_score[nxt] = tentative_g
                prev[nxt] = cur
                heapq.heappush(open_heap, (tentative_g + manhattan(nxt, goal), tentative_g, nxt))
    return []


def bfs_shortest_path(grid, start, goal):
    """BFS shortest path finder"""
    if not (grid.in_bounds(*start) and grid.in_bounds(*goal)):
        return []
    if start == goal:
        return [start]

    q = deque([start])
    prev = {start: None}

    while q:
        cur = q.popleft()
        for n in grid.open_neighbors(*cur):
            if n not in prev:
                prev[n] = cur
                if n == goal:
                    return reconstruct_path(prev, goal)
                q.append(n)
    return []


def path_length(path):
    """Number of steps in a path (cells - 1), or None for an empty path"""
    if not path:
        return None
    return len(path) - 1
