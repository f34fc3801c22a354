"""
Size tier configurations
Defines 4 tiers with increasing maze size and score multiplier
"""

from utils.constants import (
    DIFFICULTY_EASY, DIFFICULTY_MEDIUM, DIFFICULTY_HARD, DIFFICULTY_EXPERT,
    DIFFICULTY_NAMES, COIN_DENSITY
)


class DifficultyConfig:
    """Configuration for a single size tier"""
    def __init__(self, **kwargs):
        # Maze dimensions
        self.cols = kwargs.get('cols', 11)
        self.rows = kwargs.get('rows', 11)

        # Share of eligible cells that receive a coin
        self.coin_density = kwargs.get('coin_density', COIN_DENSITY)

        # Score multiplier
        self.score_multiplier = kwargs.get('score_multiplier', 1)

    def __repr__(self):
        return (f"DifficultyConfig({self.cols}x{self.rows}, "
                f"coins={self.coin_density}, x{self.score_multiplier})")


# ========== SIZE TIER DEFINITIONS ==========

LEVEL_EASY = DifficultyConfig(cols=11, rows=11, score_multiplier=1)
LEVEL_MEDIUM = DifficultyConfig(cols=17, rows=17, score_multiplier=2)
LEVEL_HARD = DifficultyConfig(cols=23, rows=23, score_multiplier=3)
LEVEL_EXPERT = DifficultyConfig(cols=31, rows=31, score_multiplier=4)

# Difficulty level mapping
DIFFICULTY_CONFIGS = {
    DIFFICULTY_EASY: LEVEL_EASY,
    DIFFICULTY_MEDIUM: LEVEL_MEDIUM,
    DIFFICULTY_HARD: LEVEL_HARD,
    DIFFICULTY_EXPERT: LEVEL_EXPERT,
}


def get_difficulty_config(difficulty_level):
    """
    Get configuration for a size tier

    Args:
        difficulty_level: Integer (0-3) or constant from utils.constants

    Returns:
        DifficultyConfig object (EASY for unknown tiers)
    """
    return DIFFICULTY_CONFIGS.get(difficulty_level, LEVEL_EASY)


def get_difficulty_name(difficulty_level):
    """Get human-readable name for a size tier"""
    if 0 <= difficulty_level < len(DIFFICULTY_NAMES):
        return DIFFICULTY_NAMES[difficulty_level]
    return "UNKNOWN"


def size_tier_for(cols, rows):
    """Largest tier whose area does not exceed cols x rows (EASY at minimum)"""
    area = cols * rows
    tier = DIFFICULTY_EASY
    for level, config in sorted(DIFFICULTY_CONFIGS.items()):
        if config.cols * config.rows <= area:
            tier = level
    return tier


def get_difficulty_description(difficulty_level):
    """Get a short description of a size tier"""
    config = get_difficulty_config(difficulty_level)
    name = get_difficulty_name(difficulty_level)
    return f"{name} ({config.cols}x{config.rows}) x{config.score_multiplier}"
