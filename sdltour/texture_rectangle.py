"""An image drawn stretched into a destination rectangle."""

from __future__ import annotations

import os

import pygame

from sdltour.resources import get_resources


def _blit_scaled(
    target: pygame.Surface,
    image: pygame.Surface,
    dest: pygame.Rect,
    source: pygame.Rect | None = None,
) -> None:
    """Draw ``image`` (or its ``source`` part) stretched to fill ``dest``."""
    if source is not None:
        area = pygame.Rect(source)
        if area.w <= 0 or area.h <= 0:
            return
        area = area.clip(image.get_rect())
        if area.w <= 0 or area.h <= 0:
            return
        image = image.subsurface(area)
    dest = pygame.Rect(dest)
    if dest.w <= 0 or dest.h <= 0:
        return
    target.blit(pygame.transform.scale(image, dest.size), dest.topleft)


class TextureRectangle:
    """A texture copied from the shared image cache plus where to draw it."""

    def __init__(
        self,
        filepath: str | os.PathLike | None = None,
        color_key: tuple[int, int, int] | None = None,
    ) -> None:
        self.dest_rect = pygame.Rect(0, 0, 0, 0)
        self.texture: pygame.Surface | None = None
        if filepath is None:
            return
        surface = get_resources().surface(filepath)
        if color_key is not None:
            surface.set_colorkey(color_key)
        self.texture = surface.copy()

    @property
    def position(self) -> tuple[int, int]:
        return self.dest_rect.topleft

    def set_position(self, x: int, y: int) -> None:
        self.dest_rect.x = int(x)
        self.dest_rect.y = int(y)

    def set_dimensions(self, w: int, h: int) -> None:
        self.dest_rect.w = int(w)
        self.dest_rect.h = int(h)

    def render(self, target: pygame.Surface) -> None:
        """Draw the whole texture stretched into the destination rectangle."""
        if self.texture is None:
            raise RuntimeError("texture rectangle has no texture")
        _blit_scaled(target, self.texture, self.dest_rect)

    def is_colliding(self, other: TextureRectangle) -> bool:
        """True when the destination rectangles share at least one pixel."""
        a, b = self.dest_rect, other.dest_rect
        return not (
            b.x + b.w - 1 < a.x
            or b.x > a.x + a.w - 1
            or b.y + b.h - 1 < a.y
            or b.y > a.y + a.h - 1
        )