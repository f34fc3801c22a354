"""
Helper utility functions for the maze engine
"""

import random


def clamp(value, min_value, max_value):
    """Clamp a value between min and max"""
    return max(min_value, min(value, max_value))


def manhattan_distance(x1, y1, x2, y2):
    """Calculate Manhattan distance between two points"""
    return abs(x2 - x1) + abs(y2 - y1)


def make_rng(rng=None, seed=None):
    """
    Resolve a randomness source

    An explicit rng wins; otherwise a new random.Random seeded with seed
    (None seeds from system entropy).
    """
    if rng is not None:
        return rng
    return random.Random(seed)


def format_time(ms):
    """Format milliseconds to M:SS string"""
    seconds = int(ms // 1000)
    minutes = seconds // 60
    return f"{minutes}:{seconds % 60:02d}"


def format_score(score):
    """Format score with thousands separator"""
    return f"{score:,}"
