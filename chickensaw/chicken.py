"""The player-controlled chicken: jumping, running and its animation."""

from __future__ import annotations

import os
from pathlib import Path

import pygame

from chickensaw.assets import load_texture

IDLE_CLIPS = tuple(pygame.Rect(col * 60, row * 65, 60, 65) for row in range(2) for col in range(3))
RUN_CLIPS = tuple(pygame.Rect((i % 3) * 60, (i // 3) * 57, 60, 57) for i in range(7))


def _draw_clip(surface, texture, clip, dest, flip=False):
    frame = pygame.Surface(clip.size, pygame.SRCALPHA)
    frame.blit(texture, (0, 0), clip)
    if frame.get_size() != dest.size:
        frame = pygame.transform.scale(frame, dest.size)
    if flip:
        frame = pygame.transform.flip(frame, True, False)
    surface.blit(frame, dest.topleft)


class Chicken:
    """The chicken sprite with a chargeable double jump."""

    MIN_JUMP_FORCE = -10
    GRAVITY = 1
    JUMP_LIMIT = 2
    MAX_JUMP_CHARGE = -14
    CHARGE_RATE = 1
    MAX_CHARGE_TIME = 15
    SECOND_JUMP_FACTOR = 0.9
    CHICKEN_SPEED = 5
    SCREEN_WIDTH = 900
    LEFT_BOUNDARY = 250
    RIGHT_BOUNDARY = 651
    GROUND_LEVEL = 528
    TOP_BOUNDARY = 60
    FRAME_DELAY = 5

    def __init__(self, image_dir: str | os.PathLike[str] = "images") -> None:
        image_dir = Path(image_dir)
        self._idle_texture = load_texture(image_dir / "chicken.png")
        self._run_texture = load_texture(image_dir / "chickenrun.png")
        self._running_anim = False
        self._rect = pygame.Rect(self.SCREEN_WIDTH // 2 - 500, self.GROUND_LEVEL, 60, 63)
        self._jumping = False
        self._jump_time = 0
        self._jump_charge = 0
        self._saved_jump_force = 0
        self._frame_counter = 0
        self.velocity_y = 0
        self.facing_left = False
        self.frame = 0
        self.jump_count = 0
        self.moving = False

    @property
    def rect(self) -> pygame.Rect:
        """A copy of the chicken's position and size."""
        return self._rect.copy()

    @property
    def is_jumping(self) -> bool:
        return self._jumping

    @property
    def ground_level(self) -> int:
        return self.GROUND_LEVEL

    def _start_jump(self) -> None:
        if self.jump_count >= self.JUMP_LIMIT:
            return
        if self.jump_count == 0:
            self._jump_charge = self.MIN_JUMP_FORCE
            self.velocity_y = self._jump_charge
            self._saved_jump_force = self._jump_charge
        else:
            self._jump_charge = int(self._saved_jump_force * self.SECOND_JUMP_FACTOR)
            self.velocity_y = self._jump_charge
        self._jumping = True
        self._jump_time = 0
        self.jump_count += 1

    def handle_input(self, event, keys) -> None:
        """React to an event (or None) and to the currently held keys."""
        if event is not None and event.type == pygame.KEYDOWN and event.key == pygame.K_UP:
            self._start_jump()

        if (
            keys[pygame.K_UP]
            and self._jumping
            and self.jump_count == 1
            and self._jump_time < self.MAX_CHARGE_TIME
        ):
            self._jump_charge = max(self._jump_charge - self.CHARGE_RATE, self.MAX_JUMP_CHARGE)
            self.velocity_y = self._jump_charge
            self._saved_jump_force = self._jump_charge
            self._jump_time += 1

        left = bool(keys[pygame.K_LEFT])
        right = bool(keys[pygame.K_RIGHT])
        self.moving = left or right

        if left and self._rect.x > self.LEFT_BOUNDARY:
            self.facing_left = True
        elif right and self._rect.right < self.RIGHT_BOUNDARY:
            self.facing_left = False

        if self.moving and not self._running_anim:
            self._running_anim = True
            self._rect.size = (60, 57)
            self.frame = 0
        elif not self.moving and self._running_anim:
            self._running_anim = False
            self._rect.size = (60, 65)
            self.frame = 0

        self._frame_counter += 1
        if self._frame_counter >= self.FRAME_DELAY:
            self.frame = (self.frame + 1) % (len(RUN_CLIPS) if self.moving else len(IDLE_CLIPS))
            self._frame_counter = 0

    def update(self, keys) -> None:
        """Apply gravity and horizontal movement for one frame."""
        if self._jumping:
            self.velocity_y += self.GRAVITY
            self._rect.y += self.velocity_y
            if self._rect.y >= self.GROUND_LEVEL:
                self._rect.y = self.GROUND_LEVEL
                self._jumping = False
                self.velocity_y = 0
                self.jump_count = 0
                self._jump_time = 0
            if self._rect.y <= self.TOP_BOUNDARY:
                self._rect.y = self.TOP_BOUNDARY
                self.velocity_y = 0

        if keys[pygame.K_LEFT] and self._rect.x > self.LEFT_BOUNDARY:
            self._rect.x -= self.CHICKEN_SPEED
        elif keys[pygame.K_RIGHT] and self._rect.right < self.RIGHT_BOUNDARY:
            self._rect.x += self.CHICKEN_SPEED

    def render(self, surface: pygame.Surface) -> None:
        texture = self._run_texture if self._running_anim else self._idle_texture
        if texture is None:
            return
        clips = RUN_CLIPS if self._running_anim else IDLE_CLIPS
        _draw_clip(surface, texture, clips[self.frame], self._rect, self.facing_left)

    def reset_position(self) -> None:
        """Put the chicken back on the ground in the middle of the screen."""
        self._rect.x = self.SCREEN_WIDTH // 2
        self._rect.y = self.GROUND_LEVEL
        self.velocity_y = 0
        self._jumping = False
        self.jump_count = 0
        self._jump_time = 0
        self.facing_left = False