"""Drawing and the window loop for the snake game."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence, Tuple

import pygame

from .snake_game import Game, Key

BLOCK_SIZE = 25.0
WIDTH = 30
HEIGHT = 30

Color = Tuple[float, float, float, float]

SNAKE_COLOR: Color = (0.00, 0.80, 0.00, 1.0)
FOOD_COLOR: Color = (0.80, 0.00, 0.00, 1.0)
BORDER_COLOR: Color = (0.00, 0.00, 0.00, 1.0)
GAMEOVER_COLOR: Color = (0.90, 0.00, 0.00, 0.5)
BACKGROUND_COLOR: Color = (0.5, 0.5, 0.5, 1.0)

_KEYS = {
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
}


def to_coord(game_coord: int) -> float:
    """Pixel offset of a grid coordinate."""
    return game_coord * BLOCK_SIZE


def to_coord_u32(game_coord: int) -> int:
    """Pixel offset of a grid coordinate as a whole number."""
    return int(to_coord(game_coord))


def _to_rgba(color: Color) -> Tuple[int, int, int, int]:
    return tuple(round(channel * 255) for channel in color)  # type: ignore[return-value]


def _fill(surface: pygame.Surface, color: Color, rect: pygame.Rect) -> None:
    rgba = _to_rgba(color)
    if rgba[3] == 255:
        surface.fill(rgba, rect)
        return
    overlay = pygame.Surface(rect.size, pygame.SRCALPHA)
    overlay.fill(rgba)
    surface.blit(overlay, rect.topleft)


def draw_block(surface: pygame.Surface, color: Color, x: int, y: int) -> None:
    """Paint one grid block."""
    size = int(BLOCK_SIZE)
    _fill(surface, color, pygame.Rect(to_coord_u32(x), to_coord_u32(y), size, size))


def draw_rectangle(surface: pygame.Surface, color: Color, x: int, y: int,
                   width: int, height: int) -> None:
    """Paint a rectangle of ``width`` x ``height`` grid blocks."""
    rect = pygame.Rect(
        to_coord_u32(x), to_coord_u32(y),
        int(BLOCK_SIZE * width), int(BLOCK_SIZE * height),
    )
    _fill(surface, color, rect)


def draw_game(surface: pygame.Surface, game: Game) -> None:
    """Paint the snake, the food, the border and the game-over veil."""
    for x, y in game.snake:
        draw_block(surface, SNAKE_COLOR, x, y)
    if game.food_exists:
        draw_block(surface, FOOD_COLOR, game.food_x, game.food_y)
    draw_rectangle(surface, BORDER_COLOR, 0, 0, game.width, 1)
    draw_rectangle(surface, BORDER_COLOR, 0, game.height - 1, game.width, 1)
    draw_rectangle(surface, BORDER_COLOR, 0, 0, 1, game.height)
    draw_rectangle(surface, BORDER_COLOR, game.width - 1, 0, 1, game.height)
    if game.game_over:
        draw_rectangle(surface, GAMEOVER_COLOR, 0, 0, game.width, game.height)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the snake window and run until it is closed or Escape is pressed."""
    parser = argparse.ArgumentParser(prog="snake", description="Play snake in a window.")
    parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((to_coord_u32(WIDTH), to_coord_u32(HEIGHT)))
        pygame.display.set_caption("Snake")
        clock = pygame.time.Clock()
        game = Game(WIDTH, HEIGHT)
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    else:
                        game.key_pressed(_KEYS.get(event.key, Key.OTHER))
            screen.fill(_to_rgba(BACKGROUND_COLOR))
            draw_game(screen, game)
            pygame.display.flip()
            game.update(clock.tick(60) / 1000.0)
    finally:
        pygame.quit()
    return 0