"""Spin an image about its centre and highlight its overlap with the mouse box."""

from __future__ import annotations

import argparse
import sys
import time

import pygame

from sdltour.demos.scrolling import frame_delay_ms
from sdltour.demos.surface import _is_quit, _open_window

TITLE = "SDL2 20_RotateTexture"
FPS = 60
IMAGE = "images/test.bmp"
BACKGROUND = (0, 0, 0)
OUTLINE_COLOR = (255, 255, 255)
INTERSECTION_COLOR = (255, 0, 255)
HIT_COLOR = (255, 0, 0)


def rotated_blit(
    target: pygame.Surface, image: pygame.Surface, rect: pygame.Rect, angle: float
) -> pygame.Rect:
    """Stretch ``image`` into ``rect`` and draw it turned ``angle`` degrees clockwise.

    The image turns about the centre of ``rect``; corners uncovered by the
    rotation stay transparent. Returns the area the rotated image covers.
    """
    rect = pygame.Rect(rect)
    if rect.w <= 0 or rect.h <= 0:
        return pygame.Rect(rect.center, (0, 0))
    scaled = pygame.transform.scale(image, rect.size)
    canvas = pygame.Surface(rect.size, pygame.SRCALPHA)
    canvas.fill((0, 0, 0, 0))
    canvas.blit(scaled, (0, 0))
    rotated = pygame.transform.rotate(canvas, -angle)
    area = rotated.get_rect(center=rect.center)
    target.blit(rotated, area.topleft)
    return area


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Rotate an image.")
    parser.add_argument("image", nargs="?", default=IMAGE)
    args = parser.parse_args(argv)
    try:
        screen = _open_window(TITLE)
        image = pygame.image.load(args.image)
        rect = pygame.Rect(50, 50, 150, 150)
        mouse_rect = pygame.Rect(0, 0, 150, 150)
        angle = 0.0

        running = True
        while running:
            frame_start = time.perf_counter()
            mouse_rect.topleft = pygame.mouse.get_pos()
            for event in pygame.event.get():
                if _is_quit(event):
                    running = False

            screen.fill(BACKGROUND)
            pygame.draw.rect(screen, OUTLINE_COLOR, rect, 1)
            mouse_color = OUTLINE_COLOR
            intersection = rect.clip(mouse_rect)
            if intersection.w > 0 and intersection.h > 0:
                pygame.draw.rect(screen, INTERSECTION_COLOR, intersection, 1)
                mouse_color = HIT_COLOR
            pygame.draw.rect(screen, mouse_color, mouse_rect, 1)

            angle += 1
            rotated_blit(screen, image, rect, angle)
            pygame.display.flip()

            frame_time = int((time.perf_counter() - frame_start) * 1000)
            time.sleep(frame_delay_ms(FPS, frame_time) / 1000)
        return 0
    except (pygame.error, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    finally:
        pygame.quit()