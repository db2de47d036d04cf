"""Render a line of text with a TrueType font."""

from __future__ import annotations

import pygame

from sdltour.demos.surface import _demo_main, _event_loop, _open_window
from sdltour.texture_rectangle import _blit_scaled

TITLE = "SDL2 07_Fonts"
FPS = 60
BACKGROUND = (0, 0, 0xFF)
TEXT_COLOR = (0xFF, 0xFF, 0xFF, 0xFF)


def render_label(
    font: pygame.font.Font, text: str, position: tuple[int, int]
) -> tuple[pygame.Surface, pygame.Rect]:
    """Render ``text`` solid white; return it with a rect of its size at ``position``."""
    surface = font.render(text, False, TEXT_COLOR)
    return surface, pygame.Rect(position, surface.get_size())


def _show(font_path: str | None) -> None:
    screen = _open_window(TITLE)
    pygame.font.init()
    label, label_rect = render_label(pygame.font.Font(font_path, 32), "SDL2 TTF", (10, 10))

    def draw(_mouse: tuple[int, int]) -> None:
        screen.fill(BACKGROUND)
        _blit_scaled(screen, label, label_rect)

    _event_loop(draw, fps=FPS)


def main(argv: list[str] | None = None) -> int:
    return _demo_main(
        argv, "Draw some text.", _show, "font", "fonts/8bitOperatorPlus8-Regular.ttf"
    )