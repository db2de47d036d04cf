"""Draw a bitmap with one colour made transparent."""

from __future__ import annotations

import os

import pygame

from sdltour.demos.surface import _demo_main, _open_window
from sdltour.demos.texture import _run
from sdltour.resources import get_resources

TITLE = "SDL2 04_ColorKey"
DEFAULT_KEY = (0xFF, 0x00, 0xFF)


def load_keyed_image(
    path: str | os.PathLike, key: tuple[int, int, int] = DEFAULT_KEY
) -> pygame.Surface:
    """Load an image and make every pixel of colour ``key`` transparent."""
    image = get_resources().surface(path).copy()
    image.set_colorkey(key)
    return image


def _show(image_path: str | None) -> None:
    screen = _open_window(TITLE)
    _run(load_keyed_image(image_path), screen)


def main(argv: list[str] | None = None) -> int:
    return _demo_main(
        argv, "Draw a colour-keyed bitmap.", _show, "image", "images/kong.bmp"
    )