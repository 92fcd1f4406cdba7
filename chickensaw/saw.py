"""Bouncing saw blades that fall in from the top of the arena."""

from __future__ import annotations

import math
import os
import random
from pathlib import Path

import pygame

from chickensaw.assets import load_texture

SAW_SIZE = 150
DISPLAY_SIZE = 50
FRAME_DELAY = 10
FRAME_COUNT = 11
LEFT_BOUNDARY = 250
RIGHT_BOUNDARY = 651
GROUND_LEVEL = 580
TOP_BOUNDARY = 60
SPEED = 4.0

CLIPS = tuple(
    pygame.Rect((i % 3) * SAW_SIZE, (i // 3) * SAW_SIZE, SAW_SIZE, SAW_SIZE)
    for i in range(FRAME_COUNT)
)


class Saw:
    """A saw that enters at a random spot, bounces and leaves through the top."""

    def __init__(self, image_dir: str | os.PathLike[str] = "images", rng: random.Random | None = None) -> None:
        rng = rng if rng is not None else random.Random()
        self._texture = load_texture(Path(image_dir) / "saw.png")
        x = LEFT_BOUNDARY + rng.randrange(RIGHT_BOUNDARY - LEFT_BOUNDARY - DISPLAY_SIZE)
        self._rect = pygame.Rect(x, TOP_BOUNDARY, DISPLAY_SIZE, DISPLAY_SIZE)
        base = 35 if rng.randrange(2) == 0 else 125
        angle = math.radians(base + rng.randrange(11))
        self.vx = math.cos(angle) * SPEED
        self.vy = math.sin(angle) * SPEED
        self.frame = 0
        self._last_frame_time = 0

    @property
    def rect(self) -> pygame.Rect:
        """A copy of the saw's position and size."""
        return self._rect.copy()

    def update(self, now_ms: int) -> bool:
        """Advance one step; return True once the saw has left through the top."""
        self._rect.x += int(self.vx)
        self._rect.y += int(self.vy)

        if self._rect.x < LEFT_BOUNDARY:
            self._rect.x = LEFT_BOUNDARY
            self.vx = -self.vx
        elif self._rect.x + DISPLAY_SIZE > RIGHT_BOUNDARY:
            self._rect.x = RIGHT_BOUNDARY - DISPLAY_SIZE
            self.vx = -self.vx

        if self._rect.y + DISPLAY_SIZE > GROUND_LEVEL:
            self._rect.y = GROUND_LEVEL - DISPLAY_SIZE
            self.vy = -self.vy

        if self._rect.y < TOP_BOUNDARY:
            return True

        if now_ms - self._last_frame_time >= FRAME_DELAY:
            self.frame = (self.frame + 1) % FRAME_COUNT
            self._last_frame_time = now_ms
        return False

    def render(self, surface: pygame.Surface) -> None:
        if self._texture is None:
            return
        clip = CLIPS[self.frame]
        image = pygame.Surface(clip.size, pygame.SRCALPHA)
        image.blit(self._texture, (0, 0), clip)
        image = pygame.transform.scale(image, self._rect.size)
        surface.blit(image, self._rect.topleft)