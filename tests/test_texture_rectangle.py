import pygame
import pytest

from sdltour.resources import destroy_resources, get_resources
from sdltour.texture_rectangle import TextureRectangle

RED = pygame.Color(255, 0, 0)
BLACK = pygame.Color(0, 0, 0)
MAGENTA = (255, 0, 255)


@pytest.fixture(autouse=True)
def _fresh_manager():
    destroy_resources()
    yield
    destroy_resources()


def _write_bmp(path, color, size=(2, 2)):
    surface = pygame.Surface(size)
    surface.fill(color)
    pygame.image.save(surface, str(path))
    return path


def _rect(x, y, w, h):
    rect = TextureRectangle()
    rect.set_position(x, y)
    rect.set_dimensions(w, h)
    return rect


def test_render_stretches_texture_into_destination(tmp_path):
    path = _write_bmp(tmp_path / "red.bmp", RED)
    rect = TextureRectangle(path)
    rect.set_position(5, 5)
    rect.set_dimensions(10, 10)
    target = pygame.Surface((20, 20))
    target.fill(BLACK)
    rect.render(target)
    assert target.get_at((5, 5)) == RED
    assert target.get_at((14, 14)) == RED
    assert target.get_at((15, 15)) == BLACK
    assert target.get_at((4, 4)) == BLACK


def test_color_key_makes_pixels_transparent(tmp_path):
    path = _write_bmp(tmp_path / "key.bmp", MAGENTA)
    rect = TextureRectangle(path, MAGENTA)
    rect.set_dimensions(4, 4)
    target = pygame.Surface((4, 4))
    target.fill(BLACK)
    rect.render(target)
    assert tuple(rect.texture.get_colorkey())[:3] == MAGENTA
    assert target.get_at((1, 1)) == BLACK


def test_color_key_sticks_to_cached_surface(tmp_path):
    path = _write_bmp(tmp_path / "key.bmp", MAGENTA)
    TextureRectangle(path, MAGENTA)
    plain = TextureRectangle(path)
    assert tuple(plain.texture.get_colorkey())[:3] == MAGENTA
    assert tuple(get_resources().surface(path).get_colorkey())[:3] == MAGENTA


def test_texture_is_a_copy_of_cached_surface(tmp_path):
    path = _write_bmp(tmp_path / "red.bmp", RED)
    rect = TextureRectangle(path)
    assert rect.texture is not get_resources().surface(path)
    assert rect.texture.get_size() == get_resources().surface(path).get_size()


def test_empty_rectangle_cannot_render():
    with pytest.raises(RuntimeError):
        TextureRectangle().render(pygame.Surface((4, 4)))


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        TextureRectangle(tmp_path / "nothing.bmp")


def test_position_and_dimensions():
    rect = _rect(50, 60, 100, 150)
    assert rect.position == (50, 60)
    assert rect.dest_rect.size == (100, 150)


def test_overlap_collides():
    assert _rect(0, 0, 100, 100).is_colliding(_rect(50, 50, 100, 100)) is True


def test_adjacent_does_not_collide():
    assert _rect(0, 0, 100, 100).is_colliding(_rect(100, 0, 100, 100)) is False


def test_far_apart_does_not_collide():
    assert _rect(0, 0, 10, 10).is_colliding(_rect(300, 300, 10, 10)) is False