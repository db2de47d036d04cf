"""Two copies of an image scrolling horizontally and vertically, with blend modes."""

from __future__ import annotations

import pygame

from sdltour.demos.blending import BlendMode, blit_blended
from sdltour.demos.surface import (
    Mouse,
    _demo_main,
    _event_loop,
    _open_window,
    _remaining_ms,
)

TITLE = "SDL2 06_ScrollingBlending"
FPS = 60
BACKGROUND = (0, 0, 0xFF)

_SCROLL_BUTTON_MODES = {
    1: BlendMode.ADD,
    2: BlendMode.BLEND,
    3: BlendMode.MOD,
}


def scroll_x(x: int) -> int:
    """Advance a horizontal position by one, wrapping past 639 to -639."""
    x += 1
    return -639 if x > 639 else x


def scroll_y(y: int) -> int:
    """Advance a vertical position by one, wrapping past 479 to -480."""
    y += 1
    return -480 if y > 479 else y


def frame_delay_ms(fps: int, frame_time_ms: int) -> int:
    """Milliseconds left to wait so a frame lasts 1000 // ``fps`` ms."""
    return _remaining_ms(fps, frame_time_ms)


def _show(image_path: str | None) -> None:
    screen = _open_window(TITLE)
    image = pygame.image.load(image_path)

    horizontal = [pygame.Rect(0, 0, 640, 480), pygame.Rect(-639, 0, 640, 480)]
    vertical = [pygame.Rect(0, 0, 640, 480), pygame.Rect(0, -480, 640, 480)]
    mode = BlendMode.NONE

    def on_event(event: pygame.event.Event, mouse: Mouse) -> None:
        nonlocal mode
        if event.type == pygame.KEYDOWN and event.key == pygame.K_r:
            mode = BlendMode.NONE
        if event.type == pygame.MOUSEBUTTONDOWN:
            mode = _SCROLL_BUTTON_MODES.get(event.button, mode)

    def draw(mouse: Mouse) -> None:
        for rect in horizontal:
            rect.x = scroll_x(rect.x)
        for rect in vertical:
            rect.y = scroll_y(rect.y)
        screen.fill(BACKGROUND)
        for rect in horizontal:
            blit_blended(screen, image, rect, BlendMode.NONE)
        for rect in vertical:
            blit_blended(screen, image, rect, mode)

    _event_loop(draw, on_event, FPS)


def main(argv: list[str] | None = None) -> int:
    return _demo_main(
        argv, "Scroll and blend an image.", _show, "image", "images/pool2.bmp"
    )