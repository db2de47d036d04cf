"""Draw many copies of one cached image through TextureRectangle."""

from __future__ import annotations

import argparse
import os
import sys
import time

import pygame

from sdltour.demos.render_draw import BACKGROUND, LINE_COLOR, LINE_START
from sdltour.demos.scrolling import frame_delay_ms
from sdltour.demos.surface import _is_quit, _open_window
from sdltour.resources import destroy_resources
from sdltour.texture_rectangle import TextureRectangle

TITLE = "SDL2 09_TextureClassAbstraction"
FPS = 60
IMAGE = "images/test.bmp"
RECTANGLE_COUNT = 20
RECTANGLE_SIZE = (150, 150)


def build_rectangles(
    filepath: str | os.PathLike, count: int = RECTANGLE_COUNT
) -> list[TextureRectangle]:
    """Create ``count`` rectangles sharing one image, laid out diagonally."""
    rectangles = []
    for i in range(count):
        rectangle = TextureRectangle(filepath)
        rectangle.set_position((50 * i) % 600, (50 * i) % 400)
        rectangle.set_dimensions(*RECTANGLE_SIZE)
        rectangles.append(rectangle)
    return rectangles


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Draw many texture rectangles.")
    parser.add_argument("image", nargs="?", default=IMAGE)
    args = parser.parse_args(argv)
    try:
        screen = _open_window(TITLE)
        rectangles = build_rectangles(args.image)

        running = True
        while running:
            frame_start = time.perf_counter()
            mouse = pygame.mouse.get_pos()
            for event in pygame.event.get():
                if _is_quit(event):
                    running = False

            screen.fill(BACKGROUND)
            pygame.draw.line(screen, LINE_COLOR, LINE_START, mouse)
            for rectangle in rectangles:
                rectangle.render(screen)
            pygame.display.flip()

            frame_time = int((time.perf_counter() - frame_start) * 1000)
            time.sleep(frame_delay_ms(FPS, frame_time) / 1000)
        return 0
    except (pygame.error, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    finally:
        destroy_resources()
        pygame.quit()