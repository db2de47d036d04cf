import pygame
import pytest

from sdltour.demos.texture import draw_frame, main

GREEN = (0, 200, 0)
DEST = pygame.Rect(50, 50, 150, 150)


@pytest.fixture
def drawn():
    screen = pygame.Surface((300, 300))
    screen.fill((7, 7, 7))
    image = pygame.Surface((2, 2))
    image.fill(GREEN)
    draw_frame(screen, image, (10, 290), DEST)
    return screen


@pytest.mark.parametrize("point", [(50, 50), (199, 199), (120, 120)])
def test_image_fills_destination_rect(drawn, point):
    assert drawn.get_at(point)[:3] == GREEN


@pytest.mark.parametrize(
    "point, color", [((250, 250), (0, 0, 0)), ((10, 200), (255, 0, 0))]
)
def test_outside_rect_is_background_or_line(drawn, point, color):
    assert drawn.get_at(point)[:3] == color


def test_main_reports_corrupt_image(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    broken = tmp_path / "test.bmp"
    broken.write_bytes(b"BM")
    assert main([str(broken)]) == 1
    assert "Error:" in capsys.readouterr().err