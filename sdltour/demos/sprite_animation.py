"""Play a strip of frames from a sprite sheet."""

from __future__ import annotations

import argparse
import sys
import time

import pygame

from sdltour.demos.render_draw import BACKGROUND, LINE_COLOR, LINE_START
from sdltour.demos.scrolling import frame_delay_ms
from sdltour.demos.surface import _is_quit, _open_window
from sdltour.resources import destroy_resources
from sdltour.sprite import AnimatedSprite

TITLE = "SDL2 10_SpriteAnimation"
FPS = 60
IMAGE = "images/edited.bmp"
LAST_FRAME = 6
FRAME_SIZE = (170, 110)


def next_frame(frame: int) -> int:
    """Advance to the next frame, wrapping after the last one back to 0."""
    frame += 1
    return 0 if frame > LAST_FRAME else frame


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Animate a sprite sheet.")
    parser.add_argument("image", nargs="?", default=IMAGE)
    args = parser.parse_args(argv)
    try:
        screen = _open_window(TITLE)
        sprite = AnimatedSprite(args.image)
        sprite.draw(200, 200, 150, 150)
        frame = 0

        running = True
        while running:
            frame_start = time.perf_counter()
            mouse = pygame.mouse.get_pos()
            for event in pygame.event.get():
                if _is_quit(event):
                    running = False

            screen.fill(BACKGROUND)
            pygame.draw.line(screen, LINE_COLOR, LINE_START, mouse)
            sprite.play_frame(0, 0, *FRAME_SIZE, frame)
            sprite.render(screen)
            frame = next_frame(frame)
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