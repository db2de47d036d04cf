"""Draw a bitmap stretched into a rectangle under a mouse-following line."""

from __future__ import annotations

import pygame

from sdltour.demos.render_draw import BACKGROUND, LINE_COLOR, LINE_START
from sdltour.demos.surface import _demo_main, _event_loop, _open_window
from sdltour.texture_rectangle import _blit_scaled

TITLE = "SDL2 03_Texture"


def draw_frame(
    screen: pygame.Surface,
    image: pygame.Surface,
    mouse: tuple[int, int],
    rect: pygame.Rect,
) -> None:
    """Clear to black, draw a red line to ``mouse``, then ``image`` stretched into ``rect``."""
    screen.fill(BACKGROUND)
    pygame.draw.line(screen, LINE_COLOR, LINE_START, mouse)
    _blit_scaled(screen, image, pygame.Rect(rect))


def _run(image: pygame.Surface, screen: pygame.Surface) -> None:
    """Show ``image`` in the fixed rectangle until a quit request."""
    rect = pygame.Rect(50, 50, 150, 150)
    _event_loop(lambda mouse: draw_frame(screen, image, mouse, rect))


def _show(image_path: str | None) -> None:
    screen = _open_window(TITLE)
    _run(pygame.image.load(image_path), screen)


def main(argv: list[str] | None = None) -> int:
    return _demo_main(
        argv, "Draw a bitmap in a rectangle.", _show, "image", "images/test.bmp"
    )