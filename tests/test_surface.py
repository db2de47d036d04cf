import pygame
import pytest

from sdltour.demos.surface import main, set_pixel


def test_set_pixel_changes_only_that_pixel():
    surface = pygame.Surface((4, 4))
    surface.fill((10, 20, 30))
    set_pixel(surface, 1, 2, 0, 0, 255)
    assert surface.get_at((1, 2))[:3] == (0, 0, 255)
    assert {
        tuple(surface.get_at((x, y))[:3])
        for x in range(4)
        for y in range(4)
        if (x, y) != (1, 2)
    } == {(10, 20, 30)}


def test_set_pixel_on_24_bit_surface():
    surface = pygame.Surface((3, 3), depth=24)
    set_pixel(surface, 2, 2, 12, 34, 56)
    assert surface.get_at((2, 2))[:3] == (12, 34, 56)


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (4, 0), (0, 4)])
def test_set_pixel_outside_raises(x, y):
    with pytest.raises(IndexError):
        set_pixel(pygame.Surface((4, 4)), x, y, 1, 2, 3)


@pytest.mark.parametrize("content", [None, b"not a bitmap"])
def test_main_reports_unusable_image(tmp_path, monkeypatch, capsys, content):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    path = tmp_path / "demo.bmp"
    if content is not None:
        path.write_bytes(content)
    assert main([str(path)]) == 1
    assert capsys.readouterr().err.startswith("Error:")