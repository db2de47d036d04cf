"""Draw a line that follows the mouse and a rectangle outline."""

from __future__ import annotations

import pygame

from sdltour.demos.surface import _demo_main, _event_loop, _open_window

TITLE = "SDL2 02_RenderDraw"
BACKGROUND = (0, 0, 0)
LINE_COLOR = (255, 0, 0)
RECT_COLOR = (255, 255, 255)
LINE_START = (10, 10)


def draw_frame(
    screen: pygame.Surface, mouse: tuple[int, int], rect: pygame.Rect
) -> None:
    """Clear to black, draw a red line to ``mouse`` and outline ``rect`` in white."""
    screen.fill(BACKGROUND)
    pygame.draw.line(screen, LINE_COLOR, LINE_START, mouse)
    pygame.draw.rect(screen, RECT_COLOR, rect, 1)


def _show(_: str | None) -> None:
    screen = _open_window(TITLE)
    rect = pygame.Rect(50, 50, 150, 150)
    _event_loop(lambda mouse: draw_frame(screen, mouse, rect))


def main(argv: list[str] | None = None) -> int:
    return _demo_main(argv, "Draw a line and a rectangle.", _show)