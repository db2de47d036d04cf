import pygame
import pytest

from sdltour.text import DynamicText

WHITE = (0xFF, 0xFF, 0xFF, 0xFF)


def _transparent(size):
    target = pygame.Surface(size, pygame.SRCALPHA)
    target.fill((0, 0, 0, 0))
    return target


def test_render_stays_inside_position():
    text = DynamicText(None, 32)
    text.set_text("SDL2 Tutorial", WHITE)
    text.set_position((10, 20, 100, 50))
    target = _transparent((200, 100))
    text.render(target)
    drawn = target.get_bounding_rect()
    assert drawn.w > 0 and drawn.h > 0
    assert pygame.Rect(10, 20, 100, 50).contains(drawn)


def test_text_drawn_in_requested_color():
    text = DynamicText(None, 16)
    text.set_text("Message", WHITE)
    text.set_position((0, 0, 60, 20))
    target = _transparent((60, 20))
    text.render(target)
    drawn = target.get_bounding_rect()
    colors = {
        tuple(target.get_at((x, y)))
        for x in range(drawn.left, drawn.right)
        for y in range(drawn.top, drawn.bottom)
        if target.get_at((x, y)).a
    }
    assert colors == {WHITE}


def test_set_position_accepts_tuples():
    text = DynamicText(None, 16)
    text.set_position((50, 300, 50, 50))
    assert text.position == pygame.Rect(50, 300, 50, 50)


def test_render_before_set_text_raises():
    text = DynamicText(None, 16)
    with pytest.raises(RuntimeError):
        text.render(_transparent((10, 10)))


def test_missing_font_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        DynamicText(tmp_path / "font.ttf", 32)