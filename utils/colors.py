"""
Color palette for the pygame host
"""

# Background colors
COLOR_BG = (20, 22, 28)           # Main background
COLOR_MAZE_BG = (16, 18, 24)      # Maze area background
COLOR_PANEL_BG = (12, 14, 18)     # Panel background

# UI colors
COLOR_WALL = (230, 230, 230)      # Maze walls
COLOR_TEXT = (210, 210, 210)      # Normal text
COLOR_TEXT_HIGHLIGHT = (255, 230, 160)  # Highlighted text

# Entity colors
COLOR_PLAYER = (70, 140, 255)     # Player
COLOR_PLAYER_TRAIL = (160, 230, 255)  # Player trail
COLOR_GOAL = (60, 200, 120)       # Goal/Exit

# Item colors
ITEM_COLORS = {
    "coin": (255, 215, 0),
    "key": (255, 80, 80),
    "power": (100, 255, 200),
    "trap": (180, 50, 50),
}

# Overlay colors
COLOR_SOLUTION = (90, 70, 140)    # Full solution overlay
COLOR_HINT = (200, 120, 60)       # Hint from the player's cell
