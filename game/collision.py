"""
Collision detection - item pickup at the player's cell
"""

from maze.maze_core import Item


class CollisionHandler:
    """
    Handles item collection when the player enters a cell
    """
    def __init__(self):
        self.last_collision = None

    def check_player_position(self, player, grid):
        """
        Check player's current cell for an item and collect it

        Args:
            player: Player object
            grid: MazeGrid

        Returns:
            The collected Item, or None
        """
        cell = grid.cell(player.x, player.y)
        if cell.item is None:
            self.last_collision = None
            return None

        item = Item(cell.x, cell.y, cell.item)
        cell.item = None
        player.collect(item)

        self.last_collision = item
        return item
