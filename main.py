"""
Maze Runner - pygame host for the maze engine
Arrow keys / WASD move, SPACE toggles the solution, H shows a hint,
P pauses, R restarts the run, N generates a new maze, 1-4 pick the size.
"""

import logging
import os
import sys

import pygame

from game.level_manager import LevelManager
from maze.blockmap import grid_to_blockmap, pos_to_blockmap
from maze.difficulty import get_difficulty_description
from maze.maze_core import Direction
from utils.constants import (
    CELL_SIZE, FPS, PANEL_H, PLAYER_MOVE_COOLDOWN_MS,
    DIFFICULTY_EASY, DIFFICULTY_MEDIUM, DIFFICULTY_HARD, DIFFICULTY_EXPERT,
    LOG_LEVEL_ENV, LOG_FORMAT
)
from utils.colors import (
    COLOR_BG, COLOR_MAZE_BG, COLOR_WALL, COLOR_PLAYER, COLOR_PLAYER_TRAIL,
    COLOR_GOAL, COLOR_TEXT, COLOR_TEXT_HIGHLIGHT, COLOR_PANEL_BG,
    COLOR_SOLUTION, COLOR_HINT, ITEM_COLORS
)
from utils.helpers import format_time, format_score

logger = logging.getLogger("maze_runner")

# Movement keys
KEY_TO_DIRECTION = {
    pygame.K_UP: Direction.NORTH, pygame.K_w: Direction.NORTH,
    pygame.K_RIGHT: Direction.EAST, pygame.K_d: Direction.EAST,
    pygame.K_DOWN: Direction.SOUTH, pygame.K_s: Direction.SOUTH,
    pygame.K_LEFT: Direction.WEST, pygame.K_a: Direction.WEST,
}

# Size tier keys
KEY_TO_TIER = {
    pygame.K_1: DIFFICULTY_EASY,
    pygame.K_2: DIFFICULTY_MEDIUM,
    pygame.K_3: DIFFICULTY_HARD,
    pygame.K_4: DIFFICULTY_EXPERT,
}

# Block map cells are half a maze cell wide
BLOCK = CELL_SIZE // 2


def configure_logging():
    """Configure console logging once; level from MAZE_LOG_LEVEL"""
    level_name = os.getenv(LOG_LEVEL_ENV, "INFO").upper()
    root = logging.getLogger()
    root.setLevel(getattr(logging, level_name, logging.INFO))

    # Avoid duplicate handlers if reconfigured
    if not any(isinstance(h, logging.StreamHandler) for h in root.handlers):
        console = logging.StreamHandler()
        console.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(console)


def cell_center(x, y):
    """Screen center of a maze cell on the block map layout"""
    row, col = pos_to_blockmap(x, y)
    return col * BLOCK + BLOCK // 2, row * BLOCK + BLOCK // 2


def draw_blockmap(screen, blockmap):
    """Draw solid blocks"""
    rows, cols = blockmap.shape
    for by in range(rows):
        for bx in range(cols):
            if blockmap[by, bx]:
                pygame.draw.rect(screen, COLOR_WALL, (bx * BLOCK, by * BLOCK, BLOCK, BLOCK))


def draw_cell(screen, x, y, color, radius):
    """Draw a filled marker on a maze cell"""
    pygame.draw.circle(screen, color, cell_center(x, y), radius)


def draw_path(screen, path, color):
    """Draw a polyline through cell centers"""
    if len(path) > 1:
        pygame.draw.lines(screen, color, False, [cell_center(x, y) for x, y in path], 3)


def main():
    configure_logging()
    pygame.init()

    def report(stats):
        logger.info("Stats: %s", stats)

    level_manager = LevelManager(stats_sink=report, clock=pygame.time.get_ticks)
    level = level_manager.create_level(DIFFICULTY_EASY)

    def open_window(level):
        screen_w = (2 * level.cols + 1) * BLOCK
        screen_h = (2 * level.rows + 1) * BLOCK + PANEL_H
        screen = pygame.display.set_mode((max(screen_w, 480), screen_h))
        pygame.display.set_caption("Maze Runner")
        return screen, grid_to_blockmap(level.grid)

    screen, blockmap = open_window(level)
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("consolas", 16)

    last_move_time = 0
    show_solution = False
    hint = []
    running = True

    while running:
        clock.tick(FPS)
        now = pygame.time.get_ticks()
        controller = level.controller

        # Events
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    show_solution = not show_solution
                elif event.key == pygame.K_h:
                    hint = controller.hint()
                elif event.key == pygame.K_p:
                    controller.toggle_pause()
                elif event.key == pygame.K_r:
                    level_manager.reset_current_level()
                    hint = []
                elif event.key == pygame.K_n or event.key in KEY_TO_TIER:
                    tier = KEY_TO_TIER.get(event.key, level.difficulty_level)
                    level = level_manager.create_level(tier)
                    screen, blockmap = open_window(level)
                    hint = []

        # Movement with cooldown
        controller = level.controller
        if (now - last_move_time) >= PLAYER_MOVE_COOLDOWN_MS:
            keys = pygame.key.get_pressed()
            for key, direction in KEY_TO_DIRECTION.items():
                if keys[key]:
                    result = controller.request_move(direction)
                    if result.accepted:
                        last_move_time = now
                        hint = []
                    break

        # Draw
        screen.fill(COLOR_BG)
        maze_h = (2 * level.rows + 1) * BLOCK
        pygame.draw.rect(screen, COLOR_MAZE_BG, (0, 0, screen.get_width(), maze_h))

        if show_solution:
            draw_path(screen, level.solution, COLOR_SOLUTION)
        draw_path(screen, hint, COLOR_HINT)

        draw_blockmap(screen, blockmap)
        draw_cell(screen, *level.grid.exit, COLOR_GOAL, BLOCK // 2 + 2)
        for item in level.grid.items():
            draw_cell(screen, item.x, item.y, ITEM_COLORS[item.kind.value], BLOCK // 3)
        for x, y in controller.player.trail[:-1]:
            draw_cell(screen, x, y, COLOR_PLAYER_TRAIL, 2)
        draw_cell(screen, *controller.player.pos, COLOR_PLAYER, BLOCK // 2 + 1)

        # Panel
        pygame.draw.rect(screen, COLOR_PANEL_BG, (0, maze_h, screen.get_width(), PANEL_H))
        player = controller.player
        info_lines = [
            f"{get_difficulty_description(level.difficulty_level)}  "
            f"Time: {format_time(controller.elapsed_ms())}  Moves: {player.moves}",
            f"Coins: {player.items_collected}/{controller.total_items}  "
            f"Session: {format_score(level_manager.total_score)} "
            f"({level_manager.mazes_completed} mazes)",
            "Arrows/WASD move | SPACE solution | H hint | P pause | R restart | N new | 1-4 size",
        ]
        for i, line in enumerate(info_lines):
            text = font.render(line, True, COLOR_TEXT)
            screen.blit(text, (10, maze_h + 10 + i * 20))

        banner = None
        if controller.won:
            banner = f"YOU WIN! +{format_score(controller.score)}"
        elif controller.paused:
            banner = "PAUSED"
        if banner:
            big_font = pygame.font.SysFont("consolas", 32, bold=True)
            text = big_font.render(banner, True, COLOR_TEXT_HIGHLIGHT)
            screen.blit(text, (screen.get_width() // 2 - text.get_width() // 2, maze_h // 2))

        pygame.display.flip()

    pygame.quit()
    logger.info("Game closed.")


if __name__ == "__main__":
    sys.exit(main())
