"""
Global constants for the maze engine
"""

# Screen settings (pygame host)
CELL_SIZE = 24
FPS = 60
PANEL_H = 100
PLAYER_MOVE_COOLDOWN_MS = 90

# Wall bit flags
TOP = 1
RIGHT = 2
BOTTOM = 4
LEFT = 8
ALL_WALLS = TOP | RIGHT | BOTTOM | LEFT

# Direction vectors with wall bits
DIRS = [
    (0, -1, TOP, BOTTOM),    # north
    (1, 0, RIGHT, LEFT),     # east
    (0, 1, BOTTOM, TOP),     # south
    (-1, 0, LEFT, RIGHT),    # west
]

# Direction to bit mapping
DIR_TO_BITS = {
    (0, -1): (TOP, BOTTOM),
    (1, 0): (RIGHT, LEFT),
    (0, 1): (BOTTOM, TOP),
    (-1, 0): (LEFT, RIGHT),
}

# Corridor lattice step used by the generator
CORRIDOR_STEP = 2

# Smallest maze side; anything below degrades to a single cell
MIN_MAZE_SIZE = 1

# Regeneration attempts after an invariant failure
MAX_GENERATION_ATTEMPTS = 3

# Size tiers
DIFFICULTY_EASY = 0
DIFFICULTY_MEDIUM = 1
DIFFICULTY_HARD = 2
DIFFICULTY_EXPERT = 3

DIFFICULTY_NAMES = [
    "EASY",
    "MEDIUM",
    "HARD",
    "EXPERT",
]

# Item placement
COIN_DENSITY = 0.1

# Score constants
SCORE_TIME_WINDOW_MS = 30000
SCORE_TIME_DIVISOR = 100
SCORE_MOVE_PAR = 500
SCORE_MOVE_WEIGHT = 2
SCORE_PER_COIN = 50

# Logging
LOG_LEVEL_ENV = "MAZE_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
