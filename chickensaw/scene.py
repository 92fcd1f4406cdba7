"""Backgrounds, menus, the score display and the pause overlay."""

from __future__ import annotations

import os
from pathlib import Path

import pygame

from chickensaw.assets import load_texture

SCREEN_WIDTH = 900
SCREEN_HEIGHT = 700
DIGIT_WIDTH = 94
DIGIT_HEIGHT = 121
START_WIDTH = 182
START_HEIGHT = 60
STOP_WIDTH = 120
STOP_HEIGHT = 100

NUMBER_CLIPS = tuple(
    pygame.Rect((i % 4) * DIGIT_WIDTH, (i // 4) * DIGIT_HEIGHT, DIGIT_WIDTH, DIGIT_HEIGHT)
    for i in range(10)
)

_FULL_SCREEN = pygame.Rect(0, 0, SCREEN_WIDTH, SCREEN_HEIGHT)


def _half(value: int) -> int:
    """Integer halving that truncates toward zero."""
    return int(value / 2)


def score_digit_rects(score: int, scale: int = 1) -> list[tuple[int, pygame.Rect]]:
    """Return each digit of ``score`` with the screen rectangle it is drawn in.

    At scale 1 the number is centred near the top of the screen; at larger
    scales it is shrunk and placed in the top-left corner.
    """
    if score < 0:
        raise ValueError("score must not be negative")
    if scale < 1:
        raise ValueError("scale must be at least 1")
    text = str(score)
    width = DIGIT_WIDTH // scale
    height = DIGIT_HEIGHT // scale
    if scale > 1:
        start_x, y = 50, 50
    else:
        start_x = _half(SCREEN_WIDTH - len(text) * width)
        y = SCREEN_HEIGHT // 2 - height // 2 - 195
    return [
        (int(char), pygame.Rect(start_x + index * width, y, width, height))
        for index, char in enumerate(text)
    ]


def _blit_scaled(surface, texture, dest, clip=None) -> None:
    if texture is None:
        return
    if clip is None:
        image = texture
    else:
        image = pygame.Surface(clip.size, pygame.SRCALPHA)
        image.blit(texture, (0, 0), clip)
    if image.get_size() != dest.size:
        image = pygame.transform.scale(image, dest.size)
    surface.blit(image, dest.topleft)


class Scene:
    """Draws everything on screen that is not the chicken or a saw."""

    def __init__(self, image_dir: str | os.PathLike[str] = "images") -> None:
        image_dir = Path(image_dir)
        self._background = load_texture(image_dir / "bg.png")
        self._menu = load_texture(image_dir / "menu1.png")
        self._game_over_menu = load_texture(image_dir / "menu2.png")
        self._start = load_texture(image_dir / "start.png")
        self._numbers = load_texture(image_dir / "number.png")
        self._stop = load_texture(image_dir / "stop.png")
        self.game_over_menu = False

    def set_game_over_menu(self, state: bool) -> None:
        self.game_over_menu = state

    def render(self, surface: pygame.Surface, is_menu: bool) -> None:
        """Draw the play field, or the start or game-over menu."""
        if not is_menu:
            _blit_scaled(surface, self._background, _FULL_SCREEN)
        elif self.game_over_menu:
            _blit_scaled(surface, self._game_over_menu, _FULL_SCREEN)
        else:
            _blit_scaled(surface, self._menu, _FULL_SCREEN)
            start_rect = pygame.Rect(
                (SCREEN_WIDTH - START_WIDTH) // 2,
                (SCREEN_HEIGHT - START_HEIGHT) // 2,
                START_WIDTH,
                START_HEIGHT,
            )
            _blit_scaled(surface, self._start, start_rect)

    def render_score(self, surface: pygame.Surface, score: int, scale: int = 1) -> None:
        for digit, dest in score_digit_rects(score, scale):
            _blit_scaled(surface, self._numbers, dest, NUMBER_CLIPS[digit])

    def render_pause(self, surface: pygame.Surface) -> None:
        stop_rect = pygame.Rect(
            (SCREEN_WIDTH - STOP_WIDTH) // 2,
            (SCREEN_HEIGHT - STOP_HEIGHT) // 2,
            STOP_WIDTH,
            STOP_HEIGHT,
        )
        _blit_scaled(surface, self._stop, stop_rect)