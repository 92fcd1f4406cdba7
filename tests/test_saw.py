import math
import random

import pygame
import pytest

from chickensaw import saw as saw_module
from chickensaw.saw import Saw


@pytest.fixture
def make_saw(tmp_path):
    def factory(seed=0):
        return Saw(tmp_path, random.Random(seed))

    return factory


@pytest.mark.parametrize("seed", range(20))
def test_spawn_position_and_speed(make_saw, seed):
    saw = make_saw(seed)
    rect = saw.rect
    assert saw_module.LEFT_BOUNDARY <= rect.x < saw_module.RIGHT_BOUNDARY - saw_module.DISPLAY_SIZE
    assert rect.y == saw_module.TOP_BOUNDARY
    assert rect.size == (saw_module.DISPLAY_SIZE, saw_module.DISPLAY_SIZE)
    assert math.hypot(saw.vx, saw.vy) == pytest.approx(saw_module.SPEED)
    assert saw.vy > 0
    degrees = math.degrees(math.atan2(saw.vy, saw.vx))
    assert 35 - 1e-6 <= degrees <= 45 + 1e-6 or 125 - 1e-6 <= degrees <= 135 + 1e-6


def test_same_seed_same_saw(make_saw):
    a, b = make_saw(7), make_saw(7)
    assert a.rect == b.rect
    assert (a.vx, a.vy) == (b.vx, b.vy)


def test_update_moves_by_truncated_velocity(make_saw):
    saw = make_saw(3)
    before = saw.rect
    assert saw.update(0) is False
    assert saw.rect.y == before.y + int(saw.vy)


def test_bounces_and_leaves_through_top(make_saw):
    saw = make_saw(11)
    removed = False
    for step in range(2000):
        if saw.update(step * 16):
            removed = True
            break
        rect = saw.rect
        assert saw_module.LEFT_BOUNDARY <= rect.x
        assert rect.right <= saw_module.RIGHT_BOUNDARY
        assert rect.bottom <= saw_module.GROUND_LEVEL
    assert removed
    assert saw.vy < 0
    assert saw.rect.y < saw_module.TOP_BOUNDARY


def test_frame_advances_with_time(make_saw):
    saw = make_saw(1)
    saw.update(5)
    assert saw.frame == 0
    saw.update(saw_module.FRAME_DELAY)
    assert saw.frame == 1
    saw.update(saw_module.FRAME_DELAY + 1)
    assert saw.frame == 1


def test_frame_wraps(make_saw):
    saw = make_saw(2)
    saw.vx = 0.0
    saw.vy = 0.0
    for i in range(1, saw_module.FRAME_COUNT + 1):
        saw.update(i * saw_module.FRAME_DELAY)
    assert saw.frame == 0


def test_render_draws_texture(tmp_path):
    sheet = pygame.Surface((450, 600))
    sheet.fill((0, 0, 255))
    pygame.image.save(sheet, str(tmp_path / "saw.png"))
    saw = Saw(tmp_path, random.Random(4))
    screen = pygame.Surface((900, 700))
    saw.render(screen)
    assert tuple(screen.get_at(saw.rect.center))[:3] == (0, 0, 255)
    assert tuple(screen.get_at((5, 5)))[:3] == (0, 0, 0)