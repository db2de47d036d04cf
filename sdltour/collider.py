"""Axis-aligned collision boxes that follow a parent position."""

from __future__ import annotations

from dataclasses import dataclass, field

import pygame

COLLIDER_COLOR = (255, 255, 0)


def _empty_rect() -> pygame.Rect:
    return pygame.Rect(0, 0, 0, 0)


@dataclass(eq=False)
class Collider2D:
    """A box placed relative to its parent; call update() to refresh its rect."""

    parent_position: tuple[int, int] = (0, 0)
    rel_position: tuple[int, int] = (0, 0)
    rect: pygame.Rect = field(default_factory=_empty_rect)

    def is_colliding(self, other: Collider2D) -> bool:
        """True when both boxes are non-empty and overlap."""
        if self.rect.w <= 0 or self.rect.h <= 0:
            return False
        if other.rect.w <= 0 or other.rect.h <= 0:
            return False
        return bool(self.rect.colliderect(other.rect))

    def set_rel_position(self, x: int, y: int) -> None:
        """Set the offset of the box within its parent."""
        self.rel_position = (int(x), int(y))

    def set_dimensions(self, w: int, h: int) -> None:
        self.rect.w = int(w)
        self.rect.h = int(h)

    def set_parent_position(self, x: int, y: int) -> None:
        self.parent_position = (int(x), int(y))

    def update(self, delta_time: float) -> None:
        """Move the box to the parent position plus its offset."""
        self.rect.x = self.parent_position[0] + self.rel_position[0]
        self.rect.y = self.parent_position[1] + self.rel_position[1]

    def render(self, target: pygame.Surface) -> None:
        """Outline the box in yellow."""
        pygame.draw.rect(target, COLLIDER_COLOR, self.rect, 1)