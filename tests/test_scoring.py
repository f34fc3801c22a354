"""Score model: bonuses, clamping and tier multipliers."""

from __future__ import annotations

import pytest

from game.scoring import ScoreModel, compute_score
from utils.constants import (
    DIFFICULTY_EASY, DIFFICULTY_MEDIUM, DIFFICULTY_HARD, DIFFICULTY_EXPERT
)


def test_reference_values():
    # (30000 - 10000) / 100 + (500 - 40) * 2 + 3 * 50 = 200 + 920 + 150
    assert compute_score(10000, 40, 3, DIFFICULTY_EASY) == 1270
    assert compute_score(10000, 40, 3, DIFFICULTY_HARD) == 3810


def test_bonuses_clamp_at_zero():
    assert compute_score(60000, 900, 0, DIFFICULTY_EASY) == 0
    assert compute_score(60000, 900, 2, DIFFICULTY_EASY) == 100


def test_fractional_time_bonus_is_floored():
    # 29999ms leaves 0.01 time bonus
    assert compute_score(29999, 500, 0, DIFFICULTY_EXPERT) == 0
    assert compute_score(29950, 500, 0, DIFFICULTY_MEDIUM) == 1


def test_time_and_move_bonus_never_increase():
    model = ScoreModel()
    times = [model.time_bonus(t) for t in range(0, 40000, 2500)]
    moves = [model.move_bonus(m) for m in range(0, 700, 50)]
    assert times == sorted(times, reverse=True)
    assert moves == sorted(moves, reverse=True)
    assert min(times) == 0 and min(moves) == 0


def test_multiplier_strictly_increases_with_tier():
    model = ScoreModel()
    tiers = [DIFFICULTY_EASY, DIFFICULTY_MEDIUM, DIFFICULTY_HARD, DIFFICULTY_EXPERT]
    mults = [model.difficulty_multiplier(t) for t in tiers]
    assert mults == [1, 2, 3, 4]


def test_unknown_tier_scores_as_easy():
    assert compute_score(0, 0, 0, 99) == compute_score(0, 0, 0, DIFFICULTY_EASY)


@pytest.mark.parametrize("per_coin", [10, 50, 100])
def test_custom_model(per_coin):
    model = ScoreModel(time_window_ms=0, move_par=0, per_coin_value=per_coin)
    assert compute_score(1234, 10, 4, DIFFICULTY_EASY, model=model) == 4 * per_coin
