"""Game state, the main loop and the high-score file."""

from __future__ import annotations

import argparse
import os
import random
import re
import sys
from dataclasses import dataclass
from pathlib import Path

import pygame

from chickensaw.chicken import Chicken
from chickensaw.collision import check_circle_collision, check_jump_over_saw
from chickensaw.saw import Saw
from chickensaw.scene import Scene

SCREEN_WIDTH = 900
SCREEN_HEIGHT = 700
FRAME_TARGET_TIME = 1000 // 60
SAW_SCHEDULE = (500, 2000, 4000, 6000, 8000, 10000, 12000, 14000)
REAPPEAR_INTERVAL = 10000

START_BUTTON = ((SCREEN_WIDTH - 182) // 2, (SCREEN_HEIGHT - 60) // 2, 182, 60)
RESTART_BUTTON = ((SCREEN_WIDTH - 200) // 2, (SCREEN_HEIGHT - 100) // 2, 200, 100)
QUIT_BUTTON = (
    (SCREEN_WIDTH - 200) // 2,
    RESTART_BUTTON[1] + RESTART_BUTTON[3] + 10,
    200,
    100,
)
PAUSE_BUTTON = (SCREEN_WIDTH - 38 - 70, 30, 38, 40)
STOP_PANEL = ((SCREEN_WIDTH - 116) // 2, (SCREEN_HEIGHT - 101) // 2, 116, 101)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def load_high_score(path: str | os.PathLike[str]) -> int:
    """Read the stored high score; a missing or unreadable file counts as 0."""
    try:
        text = Path(path).read_text()
    except (OSError, UnicodeDecodeError):
        return 0
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def save_high_score(path: str | os.PathLike[str], score: int) -> None:
    """Store the high score; failures to write are ignored."""
    try:
        Path(path).write_text(str(score))
    except OSError:
        pass


def _inside(pos, left, top, width, height) -> bool:
    x, y = pos
    return left <= x <= left + width and top <= y <= top + height


@dataclass
class SawSlot:
    """One saw that appears after a delay and then at regular intervals."""

    initial_delay: int
    reappear_interval: int
    saw: Saw | None = None
    last_appear_time: int = 0
    jumped_over: bool = False


class Game:
    """Menus, pausing, saw scheduling, scoring and collisions."""

    def __init__(
        self,
        image_dir: str | os.PathLike[str] = "images",
        high_score_path: str | os.PathLike[str] = "highscore.txt",
        rng: random.Random | None = None,
    ) -> None:
        self._image_dir = Path(image_dir)
        self._rng = rng if rng is not None else random.Random()
        self.high_score_path = Path(high_score_path)
        self.chicken = Chicken(self._image_dir)
        self.slots = [SawSlot(delay, REAPPEAR_INTERVAL) for delay in SAW_SCHEDULE]
        self.playing = False
        self.game_over = False
        self.paused = False
        self.running = True
        self.game_over_menu = False
        self.score = 0
        self.high_score = load_high_score(self.high_score_path)
        self._start_time = 0

    def _clear_slots(self) -> None:
        for slot in self.slots:
            slot.saw = None
            slot.last_appear_time = 0
            slot.jumped_over = False

    def start(self, now_ms: int) -> None:
        """Begin a fresh round."""
        self.playing = True
        self.game_over = False
        self._start_time = now_ms
        self.game_over_menu = False
        self.score = 0
        self.chicken.reset_position()
        self._clear_slots()

    def end_game(self) -> None:
        """Stop the round, show the game-over menu and keep the best score."""
        self.paused = False
        self.playing = False
        self.game_over = True
        self.game_over_menu = True
        if self.score > self.high_score:
            self.high_score = self.score
            save_high_score(self.high_score_path, self.high_score)

    def handle_event(self, event, keys, now_ms: int) -> None:
        """React to one input event."""
        if event.type == pygame.QUIT:
            self.running = False
            return

        clicked = event.type == pygame.MOUSEBUTTONDOWN
        pos = event.pos if clicked else None

        if clicked and not self.playing and not self.game_over:
            if _inside(pos, *START_BUTTON):
                self.start(now_ms)

        if clicked and self.game_over:
            if _inside(pos, *RESTART_BUTTON):
                self.start(now_ms)
            if _inside(pos, *QUIT_BUTTON):
                self.running = False

        if clicked and self.playing and not self.game_over and not self.paused:
            if _inside(pos, *PAUSE_BUTTON):
                self.paused = True

        if clicked and self.paused:
            left, top, width, height = STOP_PANEL
            middle = top + height // 2
            x, y = pos
            if left <= x <= left + width:
                if top <= y <= middle:
                    self.paused = False
                elif middle < y <= top + height:
                    self.end_game()

        if self.playing and not self.game_over:
            self.chicken.handle_input(event, keys)

    def _spawn_saws(self, elapsed: int) -> None:
        for slot in self.slots:
            if slot.saw is not None:
                continue
            if slot.last_appear_time == 0:
                due = elapsed >= slot.initial_delay
            else:
                due = elapsed - slot.last_appear_time >= slot.reappear_interval
            if due:
                slot.saw = Saw(self._image_dir, self._rng)
                slot.last_appear_time = elapsed
                slot.jumped_over = False

    def step(self, now_ms: int, keys) -> None:
        """Advance the round by one frame."""
        if not self.playing or self.game_over or self.paused:
            return

        self.chicken.update(keys)
        self.chicken.handle_input(None, keys)
        self._spawn_saws(now_ms - self._start_time)

        for slot in self.slots:
            if slot.saw is not None and slot.saw.update(now_ms):
                slot.saw = None
                slot.jumped_over = False

        chicken_rect = self.chicken.rect
        for slot in self.slots:
            if slot.saw is None:
                continue
            saw_rect = slot.saw.rect
            if check_jump_over_saw(chicken_rect, saw_rect):
                slot.jumped_over = True
            if check_circle_collision(chicken_rect, saw_rect):
                self.end_game()
                for other in self.slots:
                    if other.saw is not None:
                        other.saw = None
                        other.last_appear_time = 0
                        other.jumped_over = False
                break

        if not self.chicken.is_jumping:
            for slot in self.slots:
                if slot.saw is not None and slot.jumped_over:
                    slot.saw = None
                    slot.jumped_over = False
                    self.score += 1

    def draw(self, surface: pygame.Surface, scene: Scene) -> None:
        surface.fill((0, 0, 0))
        scene.set_game_over_menu(self.game_over_menu)
        scene.render(surface, self.game_over or not self.playing)
        if self.playing and not self.game_over:
            self.chicken.render(surface)
            for slot in self.slots:
                if slot.saw is not None:
                    slot.saw.render(surface)
        if self.game_over:
            scene.render_score(surface, self.score)
            scene.render_score(surface, self.high_score, 7)
        if self.paused:
            scene.render_pause(surface)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="chickensaw", description="Chicken and Sawblades")
    parser.add_argument("--images", default="images", help="directory holding the sprites")
    parser.add_argument("--high-score-file", default="highscore.txt")
    parser.add_argument("--music", default="music.mp3")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
    except pygame.error as exc:
        print(f"Display init failed: {exc}", file=sys.stderr)
        pygame.quit()
        return 1
    pygame.display.set_caption("Chicken and Sawblades")

    try:
        pygame.mixer.init(44100, -16, 2, 2048)
        pygame.mixer.music.load(args.music)
    except pygame.error as exc:
        print(f"Failed to load music: {exc}", file=sys.stderr)
        pygame.quit()
        return 1
    pygame.mixer.music.play(-1)

    game = Game(args.images, args.high_score_file)
    scene = Scene(args.images)

    while game.running:
        frame_start = pygame.time.get_ticks()
        events = pygame.event.get()
        keys = pygame.key.get_pressed()
        for event in events:
            game.handle_event(event, keys, pygame.time.get_ticks())
        game.step(pygame.time.get_ticks(), keys)
        game.draw(screen, scene)
        pygame.display.flip()
        frame_time = pygame.time.get_ticks() - frame_start
        if frame_time < FRAME_TARGET_TIME:
            pygame.time.delay(FRAME_TARGET_TIME - frame_time)

    save_high_score(game.high_score_path, game.high_score)
    pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())