"""Report whether a mouse-following rectangle overlaps a fixed one."""

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

TITLE = "SDL2 11_RectCollision"
FPS = 60
IMAGE = "images/test.bmp"


def make_objects(
    filepath: str | os.PathLike,
) -> tuple[TextureRectangle, TextureRectangle]:
    """A fixed 100x100 rectangle at (50, 50) and a movable 100x100 one at the origin."""
    fixed = TextureRectangle(filepath)
    movable = TextureRectangle(filepath)
    fixed.set_position(50, 50)
    fixed.set_dimensions(100, 100)
    movable.set_dimensions(100, 100)
    return fixed, movable


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Test two rectangles for overlap.")
    parser.add_argument("image", nargs="?", default=IMAGE)
    args = parser.parse_args(argv)
    try:
        screen = _open_window(TITLE)
        object1, object2 = make_objects(args.image)

        running = True
        while running:
            frame_start = time.perf_counter()
            mouse = pygame.mouse.get_pos()
            for event in pygame.event.get():
                if _is_quit(event):
                    running = False
                if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    print(f"IsColliding: {int(object1.is_colliding(object2))}")

            screen.fill(BACKGROUND)
            pygame.draw.line(screen, LINE_COLOR, LINE_START, mouse)
            object2.set_position(*mouse)
            object1.render(screen)
            object2.render(screen)
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