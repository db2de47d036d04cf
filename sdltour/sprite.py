"""A sprite sheet that shows one frame at a time."""

from __future__ import annotations

import os

import pygame

from sdltour.resources import get_resources
from sdltour.texture_rectangle import _blit_scaled


class AnimatedSprite:
    """Draws one cell of a horizontal strip of frames into a destination rect."""

    def __init__(self, filepath: str | os.PathLike) -> None:
        self.texture = get_resources().surface(filepath).copy()
        self.src_rect = pygame.Rect(0, 0, 0, 0)
        self.dst_rect = self.src_rect.copy()

    def draw(self, x: int, y: int, w: int, h: int) -> None:
        """Set where on the target the frame is drawn."""
        self.dst_rect.update(x, y, w, h)

    def play_frame(self, x: int, y: int, w: int, h: int, frame: int) -> None:
        """Select frame ``frame`` of a strip whose first cell is at (x, y)."""
        self.src_rect.update(x + w * frame, y, w, h)

    def render(self, target: pygame.Surface) -> None:
        """Copy the selected frame into the destination rect of ``target``."""
        _blit_scaled(target, self.texture, self.dst_rect, self.src_rect)