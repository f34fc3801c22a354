"""
Level Manager - handles maze generation, item placement, and session stats
"""

import logging

from utils.helpers import make_rng
from maze.difficulty import get_difficulty_config
from maze.generator import generate_maze
from maze.items import place_items, restore_items
from game.navigation import NavigationController

logger = logging.getLogger(__name__)


class Level:
    """
    Represents a single maze and the run being played on it
    """
    def __init__(self, difficulty_level, rng=None, seed=None, coin_density=None,
                 clock=None, score_model=None, on_finish=None):
        """
        Args:
            difficulty_level: Size tier (0-3)
            rng: random.Random used for generation and item placement
            seed: seed for a new rng when rng is None
            coin_density: overrides the tier's coin density
            clock: zero-arg callable returning milliseconds
            score_model: ScoreModel for the run's score
            on_finish: callable(RunStats) invoked when a run is won
        """
        self.difficulty_level = difficulty_level
        self.config = get_difficulty_config(difficulty_level)
        self.rng = make_rng(rng, seed)
        self.coin_density = self.config.coin_density if coin_density is None else coin_density
        self.clock = clock
        self.score_model = score_model
        self.on_finish = on_finish

        # Maze data
        self.grid = None
        self.solution = ()
        self.items = []
        self.controller = None

    @property
    def cols(self):
        return self.grid.cols if self.grid else self.config.cols

    @property
    def rows(self):
        return self.grid.rows if self.grid else self.config.rows

    @property
    def player(self):
        return self.controller.player if self.controller else None

    def generate_maze(self):
        """Generate the maze, place coins and start a run"""
        self.grid, self.solution = generate_maze(self.config.cols, self.config.rows, rng=self.rng)
        self.items = place_items(self.grid, self.solution, self.coin_density, rng=self.rng)
        logger.debug("Level ready: %r with %d items", self.grid, len(self.items))
        self.start_run()
        return self.grid

    def start_run(self):
        """Begin a fresh run on the current maze"""
        self.controller = NavigationController(
            self.grid, self.solution, size_tier=self.difficulty_level,
            clock=self.clock, score_model=self.score_model, on_finish=self.on_finish
        )
        return self.controller

    def reset(self):
        """Restart the run on the same maze with every item back in place"""
        restore_items(self.grid, self.items)
        return self.start_run()

    def __repr__(self):
        return f"Level(difficulty={self.difficulty_level}, size={self.cols}x{self.rows})"


class LevelManager:
    """
    Manages the current level and statistics across runs
    """
    def __init__(self, stats_sink=None, clock=None, rng=None, seed=None, score_model=None):
        """
        Args:
            stats_sink: callable(dict) receiving run and session stats on every win
            clock: zero-arg callable returning milliseconds
            rng/seed: randomness source shared by every generated level
            score_model: ScoreModel applied to every run
        """
        self.stats_sink = stats_sink
        self.clock = clock
        self.rng = make_rng(rng, seed)
        self.score_model = score_model

        self.current_level = None
        self.difficulty_level = 0
        self.total_score = 0
        self.mazes_completed = 0
        self.best_time_ms = None
        self.high_scores = {}  # {difficulty_level: score}

    def create_level(self, difficulty_level, coin_density=None):
        """
        Create and generate a new level

        Returns:
            Level object
        """
        self.difficulty_level = difficulty_level
        level = Level(
            difficulty_level, rng=self.rng, coin_density=coin_density,
            clock=self.clock, score_model=self.score_model,
            on_finish=self._on_run_finished
        )
        level.generate_maze()
        self.current_level = level
        return level

    def reset_current_level(self):
        """Restart the run on the current level"""
        if self.current_level:
            self.current_level.reset()

    def get_current_level(self):
        return self.current_level

    def _on_run_finished(self, stats):
        """Fold a won run into session totals and report it"""
        self.total_score += stats.score
        self.mazes_completed += 1
        if self.best_time_ms is None or stats.elapsed_ms < self.best_time_ms:
            self.best_time_ms = stats.elapsed_ms
        self.record_score(stats.size_tier, stats.score)

        if self.stats_sink is not None:
            self.stats_sink({
                "score": stats.score,
                "elapsed_ms": stats.elapsed_ms,
                "moves": stats.moves,
                "items_collected": stats.items_collected,
                "total_items": stats.total_items,
                "size_tier": stats.size_tier,
                "total_score": self.total_score,
                "total_completed": self.mazes_completed,
                "best_time_ms": self.best_time_ms,
            })

    def record_score(self, difficulty_level, score):
        """Record high score for a size tier"""
        if difficulty_level not in self.high_scores:
            self.high_scores[difficulty_level] = score
        else:
            self.high_scores[difficulty_level] = max(
                self.high_scores[difficulty_level], score
            )

    def get_high_score(self, difficulty_level):
        """Get high score for a size tier"""
        return self.high_scores.get(difficulty_level, 0)

    def __repr__(self):
        return f"LevelManager(difficulty={self.difficulty_level}, current_level={self.current_level})"
