"""
Score model for a completed run

score = (time_bonus + move_bonus + coin_bonus) x difficulty multiplier
"""

import math
from dataclasses import dataclass

from utils.constants import (
    SCORE_TIME_WINDOW_MS, SCORE_TIME_DIVISOR, SCORE_MOVE_PAR,
    SCORE_MOVE_WEIGHT, SCORE_PER_COIN
)
from maze.difficulty import get_difficulty_config


@dataclass
class ScoreModel:
    """Tunable scoring constants"""
    time_window_ms: int = SCORE_TIME_WINDOW_MS
    time_divisor: int = SCORE_TIME_DIVISOR
    move_par: int = SCORE_MOVE_PAR
    move_weight: int = SCORE_MOVE_WEIGHT
    per_coin_value: int = SCORE_PER_COIN

    def time_bonus(self, elapsed_ms):
        """Bonus for finishing inside the time window, zero after it"""
        return max(0, self.time_window_ms - elapsed_ms) / self.time_divisor

    def move_bonus(self, move_count):
        """Bonus for finishing under par moves"""
        return max(0, self.move_par - move_count) * self.move_weight

    def coin_bonus(self, items_collected):
        return items_collected * self.per_coin_value

    def difficulty_multiplier(self, size_tier):
        return get_difficulty_config(size_tier).score_multiplier

    def compute(self, elapsed_ms, move_count, items_collected, size_tier):
        """Final score, floored to an int"""
        base = (self.time_bonus(elapsed_ms)
                + self.move_bonus(move_count)
                + self.coin_bonus(items_collected))
        return int(math.floor(base * self.difficulty_multiplier(size_tier)))


DEFAULT_SCORE_MODEL = ScoreModel()


def compute_score(elapsed_ms, move_count, items_collected, size_tier, model=None):
    """Score a run with the given (or default) ScoreModel"""
    model = model or DEFAULT_SCORE_MODEL
    return model.compute(elapsed_ms, move_count, items_collected, size_tier)
