"""Draw a colour-keyed image twice and switch blend modes with the mouse buttons."""

from __future__ import annotations

import enum

import pygame

from sdltour.demos.color_key import load_keyed_image
from sdltour.demos.render_draw import LINE_COLOR, LINE_START
from sdltour.demos.surface import Mouse, _demo_main, _event_loop, _open_window

TITLE = "SDL2 05_Blending"
BACKGROUND = (0, 0, 0xFF)


class BlendMode(enum.Enum):
    NONE = "none"
    BLEND = "blend"
    ADD = "add"
    MOD = "mod"


_BUTTON_MODES = {
    1: BlendMode.ADD,
    3: BlendMode.BLEND,
    2: BlendMode.MOD,
}


def blend_mode_for_button(button: int) -> BlendMode | None:
    """Left adds, right blends, middle modulates; other buttons change nothing."""
    return _BUTTON_MODES.get(button)


def blit_blended(
    target: pygame.Surface,
    image: pygame.Surface,
    position: pygame.Rect,
    mode: BlendMode,
) -> None:
    """Draw ``image`` stretched into ``position`` using ``mode``.

    NONE copies every pixel, colour key included; BLEND honours transparency;
    ADD adds the visible pixels to the target; MOD multiplies the target by
    the image.
    """
    rect = pygame.Rect(position)
    if rect.w <= 0 or rect.h <= 0:
        return
    key = image.get_colorkey()
    scaled = pygame.transform.scale(image, rect.size)
    scaled.set_colorkey(key)

    if mode is BlendMode.BLEND:
        target.blit(scaled, rect.topleft)
        return

    if mode is BlendMode.ADD:
        lit = pygame.Surface(rect.size)
        lit.fill((0, 0, 0))
        lit.blit(scaled, (0, 0))
        target.blit(lit, rect.topleft, special_flags=pygame.BLEND_RGB_ADD)
        return

    raw = scaled.copy()
    raw.set_colorkey(None)
    if mode is BlendMode.MOD:
        target.blit(raw, rect.topleft, special_flags=pygame.BLEND_RGB_MULT)
        return

    opaque = pygame.Surface(rect.size)
    opaque.fill((0, 0, 0))
    opaque.blit(raw, (0, 0), special_flags=pygame.BLEND_RGB_MAX)
    target.blit(opaque, rect.topleft)


def _show(image_path: str | None) -> None:
    screen = _open_window(TITLE)
    image = load_keyed_image(image_path)
    fixed = pygame.Rect(50, 50, 150, 150)
    moving = pygame.Rect(50, 50, 150, 150)
    mode = BlendMode.BLEND

    def on_event(event: pygame.event.Event, mouse: Mouse) -> None:
        nonlocal mode
        if event.type == pygame.MOUSEMOTION:
            moving.topleft = event.pos
        if event.type == pygame.MOUSEBUTTONDOWN:
            mode = blend_mode_for_button(event.button) or mode
        else:
            mode = BlendMode.NONE

    def draw(mouse: Mouse) -> None:
        screen.fill(BACKGROUND)
        pygame.draw.line(screen, LINE_COLOR, LINE_START, mouse)
        for rect in (fixed, moving):
            blit_blended(screen, image, rect, mode)

    _event_loop(draw, on_event)


def main(argv: list[str] | None = None) -> int:
    return _demo_main(argv, "Try out blend modes.", _show, "image", "images/kong.bmp")