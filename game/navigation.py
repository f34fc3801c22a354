"""
Navigation controller - validates and applies player moves for one run
"""

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from entities.player import Player
from game.collision import CollisionHandler
from game.game_state import RunState, RunStateManager
from game.scoring import compute_score
from maze.difficulty import size_tier_for
from maze.maze_core import Direction, ItemKind
from maze.pathfinding import find_path

logger = logging.getLogger(__name__)


def monotonic_ms():
    """Default clock: monotonic milliseconds"""
    return time.monotonic() * 1000.0


@dataclass(frozen=True)
class MoveResult:
    """Outcome of a single move request"""
    accepted: bool
    picked_up: Optional[ItemKind] = None
    won: bool = False
    position: Tuple[int, int] = (0, 0)


@dataclass(frozen=True)
class RunStats:
    """Terminal statistics of a finished run"""
    score: int
    elapsed_ms: int
    moves: int
    items_collected: int
    total_items: int
    size_tier: int


class NavigationController:
    """
    Owns the player for one maze and applies move requests against the
    grid's walls. States: ACTIVE -> WON, with ACTIVE <-> PAUSED.
    """
    def __init__(self, grid, solution=(), size_tier=None,
                 clock: Optional[Callable[[], float]] = None,
                 score_model=None, on_finish=None):
        """
        Args:
            grid: generated MazeGrid (items already placed)
            solution: reference entrance->exit path
            size_tier: tier used for the score multiplier, derived from the
                grid size if None
            clock: zero-arg callable returning milliseconds
            score_model: ScoreModel, default constants if None
            on_finish: callable(RunStats) invoked once when the run is won
        """
        self.grid = grid
        self.solution = tuple(solution)
        self.size_tier = size_tier_for(grid.cols, grid.rows) if size_tier is None else size_tier
        self.clock = clock or monotonic_ms
        self.score_model = score_model
        self.on_finish = on_finish

        self.player = Player(*grid.entrance)
        self.collision_handler = CollisionHandler()
        self.state = RunStateManager()
        self.total_items = len(grid.items())

        self.started_at = self.clock()
        self.paused_at = None
        self.paused_total = 0.0
        self.finished_elapsed = None
        self.score = None
        self.stats = None

        # A single-cell maze starts on its exit
        if self.player.pos == grid.exit:
            self._finish()

    # ---------- state ----------

    @property
    def run_state(self):
        return self.state.current_state

    @property
    def won(self):
        return self.state.is_state(RunState.WON)

    @property
    def paused(self):
        return self.state.is_state(RunState.PAUSED)

    def elapsed_ms(self):
        """Milliseconds of active play (pauses excluded, frozen once won)"""
        if self.finished_elapsed is not None:
            return self.finished_elapsed
        now = self.paused_at if self.paused_at is not None else self.clock()
        return max(0, int(now - self.started_at - self.paused_total))

    def pause(self):
        """Pause an active run; returns True if the state changed"""
        if not self.state.can_transition(RunState.PAUSED):
            return False
        self.state.transition_to(RunState.PAUSED)
        self.paused_at = self.clock()
        return True

    def resume(self):
        """Resume a paused run; returns True if the state changed"""
        if not self.paused:
            return False
        self.state.transition_to(RunState.ACTIVE)
        self.paused_total += self.clock() - self.paused_at
        self.paused_at = None
        return True

    def toggle_pause(self):
        return self.resume() if self.paused else self.pause()

    # ---------- moves ----------

    def request_move(self, direction):
        """
        Try to move the player one cell

        Blocked moves, and any move while paused or after winning, are
        no-ops reported with accepted=False. An accepted move also collects
        the destination's item and may win the run.

        Raises:
            ValueError: if direction does not name a direction
        """
        direction = Direction.parse(direction)
        if not self.state.is_state(RunState.ACTIVE):
            return MoveResult(False, position=self.player.pos)

        if not self.player.move(direction, self.grid):
            return MoveResult(False, position=self.player.pos)

        item = self.collision_handler.check_player_position(self.player, self.grid)
        picked_up = item.kind if item else None

        won = False
        if self.player.pos == self.grid.exit:
            self._finish()
            won = True

        return MoveResult(True, picked_up, won, self.player.pos)

    def hint(self):
        """Shortest path from the player's cell to the exit"""
        if self.won:
            return []
        return find_path(self.grid, self.player.pos, self.grid.exit)

    def remaining_items(self):
        return self.total_items - self.player.items_collected

    # ---------- completion ----------

    def _finish(self):
        self.finished_elapsed = self.elapsed_ms()
        self.state.transition_to(RunState.WON)
        self.score = compute_score(
            self.finished_elapsed, self.player.moves,
            self.player.items_collected, self.size_tier, self.score_model
        )
        self.stats = RunStats(
            score=self.score,
            elapsed_ms=self.finished_elapsed,
            moves=self.player.moves,
            items_collected=self.player.items_collected,
            total_items=self.total_items,
            size_tier=self.size_tier,
        )
        logger.info("Run won: score=%d elapsed=%dms moves=%d items=%d/%d",
                    self.score, self.finished_elapsed, self.player.moves,
                    self.player.items_collected, self.total_items)
        if self.on_finish is not None:
            self.on_finish(self.stats)

    def __repr__(self):
        return f"NavigationController(state={self.run_state.name}, player={self.player})"
