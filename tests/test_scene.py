import pygame
import pytest

from chickensaw.scene import SCREEN_WIDTH, Scene, score_digit_rects

COLORS = {
    "bg.png": (10, 20, 30),
    "menu1.png": (200, 0, 0),
    "menu2.png": (0, 0, 200),
    "start.png": (0, 200, 0),
    "stop.png": (200, 200, 0),
}
NUMBER_COLOR = (250, 250, 250)


def _digit_color(digit):
    return (digit * 20 + 10, 100, 50)


@pytest.fixture
def image_dir(tmp_path):
    for name, color in COLORS.items():
        image = pygame.Surface((40, 30))
        image.fill(color)
        pygame.image.save(image, str(tmp_path / name))
    numbers = pygame.Surface((376, 363))
    numbers.fill(NUMBER_COLOR)
    pygame.image.save(numbers, str(tmp_path / "number.png"))
    return tmp_path


@pytest.fixture
def striped_dir(tmp_path):
    numbers = pygame.Surface((376, 363))
    numbers.fill((0, 0, 0))
    for digit in range(10):
        row, col = divmod(digit, 4)
        numbers.fill(_digit_color(digit), pygame.Rect(col * 94, row * 121, 94, 121))
    pygame.image.save(numbers, str(tmp_path / "number.png"))
    return tmp_path


def _pixel(surface, pos):
    return tuple(surface.get_at(pos))[:3]


def _screen():
    surface = pygame.Surface((900, 700))
    surface.fill((0, 0, 0))
    return surface


@pytest.mark.parametrize("digit", [0, 3, 4, 7, 9])
def test_render_score_uses_sprite_sheet_cell(striped_dir, digit):
    surface = _screen()
    Scene(striped_dir).render_score(surface, digit)
    (_, rect), = score_digit_rects(digit, 1)
    assert _pixel(surface, rect.center) == _digit_color(digit)


def test_digits_match_score():
    assert [digit for digit, _ in score_digit_rects(2048, 1)] == [2, 0, 4, 8]


def test_digit_rects_are_contiguous_and_full_size():
    rects = [rect for _, rect in score_digit_rects(9876, 1)]
    assert all(rect.size == (94, 121) for rect in rects)
    for left, right in zip(rects, rects[1:]):
        assert right.x == left.right
        assert right.y == left.y


def test_unscaled_score_is_centred():
    rects = [rect for _, rect in score_digit_rects(12, 1)]
    assert rects[0].x + rects[-1].right == SCREEN_WIDTH


def test_scaled_score_sits_top_left():
    rects = [rect for _, rect in score_digit_rects(35, 7)]
    assert rects[0].topleft == (50, 50)
    assert all(rect.size == (94 // 7, 121 // 7) for rect in rects)
    assert rects[1].x == rects[0].right


def test_negative_score_rejected():
    with pytest.raises(ValueError):
        score_digit_rects(-1, 1)


def test_zero_scale_rejected():
    with pytest.raises(ValueError):
        score_digit_rects(5, 0)


def test_render_play_field(image_dir):
    surface = _screen()
    Scene(image_dir).render(surface, False)
    assert _pixel(surface, (0, 0)) == COLORS["bg.png"]
    assert _pixel(surface, (899, 699)) == COLORS["bg.png"]


def test_render_start_menu(image_dir):
    surface = _screen()
    Scene(image_dir).render(surface, True)
    assert _pixel(surface, (0, 0)) == COLORS["menu1.png"]
    assert _pixel(surface, (450, 350)) == COLORS["start.png"]


def test_render_game_over_menu(image_dir):
    surface = _screen()
    scene = Scene(image_dir)
    scene.set_game_over_menu(True)
    scene.render(surface, True)
    assert scene.game_over_menu is True
    assert _pixel(surface, (450, 350)) == COLORS["menu2.png"]
    assert _pixel(surface, (0, 0)) == COLORS["menu2.png"]


def test_render_pause(image_dir):
    surface = _screen()
    Scene(image_dir).render_pause(surface)
    assert _pixel(surface, (450, 350)) == COLORS["stop.png"]
    assert _pixel(surface, (0, 0)) == (0, 0, 0)


def test_render_score_draws_in_digit_rects(image_dir):
    surface = _screen()
    Scene(image_dir).render_score(surface, 7)
    (_, rect), = score_digit_rects(7, 1)
    assert _pixel(surface, rect.center) == NUMBER_COLOR
    assert _pixel(surface, (rect.right + 5, rect.centery)) == (0, 0, 0)


def test_missing_images_draw_nothing(tmp_path):
    surface = _screen()
    scene = Scene(tmp_path)
    scene.render(surface, True)
    scene.render_pause(surface)
    scene.render_score(surface, 42)
    assert _pixel(surface, (450, 350)) == (0, 0, 0)
    assert _pixel(surface, (0, 0)) == (0, 0, 0)