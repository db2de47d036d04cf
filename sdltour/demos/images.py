"""Show a PNG or JPEG image stretched over the whole window."""

from __future__ import annotations

import pygame

from sdltour.demos.surface import _demo_main, _event_loop, _open_window
from sdltour.texture_rectangle import _blit_scaled

TITLE = "SDL2 08_Images"
FPS = 60
BACKGROUND = (0, 0, 0xFF)


def draw_frame(screen: pygame.Surface, image: pygame.Surface) -> None:
    """Clear to blue and stretch ``image`` over all of ``screen``."""
    screen.fill(BACKGROUND)
    _blit_scaled(screen, image, screen.get_rect())


def _show(image_path: str | None) -> None:
    screen = _open_window(TITLE)
    if not pygame.image.get_extended():
        raise pygame.error("PNG and JPEG loading is not available")
    image = pygame.image.load(image_path)
    _event_loop(lambda _mouse: draw_frame(screen, image), fps=FPS)


def main(argv: list[str] | None = None) -> int:
    return _demo_main(argv, "Show an image.", _show, "image", "images/mario.png")