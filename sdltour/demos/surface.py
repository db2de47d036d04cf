"""Blit a bitmap onto the window surface and paint pixels with the left mouse button.

Also holds the window, event-loop and command-line plumbing the other demos share.
"""

from __future__ import annotations

import argparse
import os
import sys
import time
from collections.abc import Callable

import pygame

TITLE = "SDL2 01_Surface"
WINDOW_POSITION = (20, 20)
WINDOW_SIZE = (640, 480)
PAINT_COLOR = (0, 0, 255)

Mouse = tuple[int, int]


def _open_window(title: str, size: tuple[int, int] = WINDOW_SIZE) -> pygame.Surface:
    """Open the demo window at the fixed position used by every demo."""
    os.environ["SDL_VIDEO_WINDOW_POS"] = "{},{}".format(*WINDOW_POSITION)
    pygame.display.init()
    screen = pygame.display.set_mode(size)
    pygame.display.set_caption(title)
    return screen


def _is_quit(event: pygame.event.Event) -> bool:
    """True for a window close request or a press of Escape."""
    if event.type == pygame.QUIT:
        return True
    return event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE


def _remaining_ms(fps: int, frame_time_ms: int) -> int:
    delay = 1000 // fps
    return delay - frame_time_ms if delay > frame_time_ms else 0


def _event_loop(
    draw: Callable[[Mouse], None] | None = None,
    on_event: Callable[[pygame.event.Event, Mouse], None] | None = None,
    fps: int | None = None,
) -> None:
    """Run frames until a quit request.

    The mouse position is sampled before the events of each frame and passed
    to both callbacks; with ``fps`` set, each frame is padded to its length.
    """
    running = True
    while running:
        frame_start = time.perf_counter()
        mouse = pygame.mouse.get_pos()
        for event in pygame.event.get():
            if _is_quit(event):
                running = False
            if on_event is not None:
                on_event(event, mouse)
        if draw is not None:
            draw(mouse)
        pygame.display.flip()
        if fps is not None:
            elapsed = int((time.perf_counter() - frame_start) * 1000)
            time.sleep(_remaining_ms(fps, elapsed) / 1000)


def _demo_main(
    argv: list[str] | None,
    description: str,
    run: Callable[[str | None], None],
    argument: str | None = None,
    default: str | None = None,
) -> int:
    """Parse the optional file argument, run the demo and report errors as exit status."""
    parser = argparse.ArgumentParser(description=description)
    if argument is not None:
        parser.add_argument(argument, nargs="?", default=default)
    args = parser.parse_args(argv)
    try:
        run(getattr(args, argument) if argument is not None else None)
        return 0
    except (pygame.error, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    finally:
        pygame.quit()


def set_pixel(surface: pygame.Surface, x: int, y: int, r: int, g: int, b: int) -> None:
    """Set one pixel of ``surface`` to the colour (r, g, b)."""
    width, height = surface.get_size()
    if not (0 <= x < width and 0 <= y < height):
        raise IndexError(f"pixel ({x}, {y}) lies outside a {width}x{height} surface")
    surface.lock()
    try:
        surface.set_at((x, y), (r, g, b))
    finally:
        surface.unlock()


def _paint(image_path: str | None) -> None:
    screen = _open_window(TITLE)
    screen.blit(pygame.image.load(image_path), (0, 0))
    pygame.display.flip()

    def on_event(event: pygame.event.Event, mouse: Mouse) -> None:
        if (
            event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEMOTION)
            and pygame.mouse.get_pressed()[0]
        ):
            print(f"Mouse Left pressed x = {mouse[0]} y = {mouse[1]}")
            set_pixel(screen, *mouse, *PAINT_COLOR)

    _event_loop(on_event=on_event)


def main(argv: list[str] | None = None) -> int:
    return _demo_main(
        argv, "Draw a bitmap and paint on it.", _paint, "image", "images/demo.bmp"
    )