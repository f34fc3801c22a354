"""
Player entity with position, move counter and collected items
"""

from maze.maze_core import ItemKind


class Player:
    """
    Player state for a single run
    """
    def __init__(self, x, y):
        self.x = x
        self.y = y
        self.prev_x = x
        self.prev_y = y

        # Trail for visual effect
        self.trail = [(x, y)]
        self.max_trail_length = 30

        # Gameplay tracking
        self.moves = 0
        self.collected = set()  # {(x, y)} of picked-up items
        self.collected_by_kind = {kind: 0 for kind in ItemKind}

    @property
    def pos(self):
        return (self.x, self.y)

    def move(self, direction, grid):
        """
        Move player one cell in direction
        Returns True if move was successful
        """
        if not grid.can_move(self.x, self.y, direction):
            return False

        self.prev_x, self.prev_y = self.x, self.y
        self.x += direction.dx
        self.y += direction.dy
        self.trail.append((self.x, self.y))

        # Limit trail length
        if len(self.trail) > self.max_trail_length:
            self.trail.pop(0)

        self.moves += 1
        return True

    def collect(self, item):
        """Record a picked-up Item"""
        self.collected.add(item.pos)
        self.collected_by_kind[item.kind] += 1

    @property
    def items_collected(self):
        return len(self.collected)

    @property
    def coins_collected(self):
        return self.collected_by_kind[ItemKind.COIN]

    def reset_position(self, x, y):
        """Reset player to starting position"""
        self.x = x
        self.y = y
        self.prev_x = x
        self.prev_y = y
        self.trail = [(x, y)]
        self.moves = 0
        self.collected = set()
        self.collected_by_kind = {kind: 0 for kind in ItemKind}

    def __repr__(self):
        return f"Player(pos=({self.x},{self.y}), moves={self.moves}, items={self.items_collected})"
