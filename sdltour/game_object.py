"""A sprite with any number of collision boxes attached."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass, field

import pygame

from sdltour.collider import Collider2D
from sdltour.texture_rectangle import TextureRectangle


@dataclass(eq=False)
class GameObject:
    sprite: TextureRectangle = field(default_factory=TextureRectangle)
    colliders: list[Collider2D] = field(default_factory=list)

    def update(self, delta_time: float) -> None:
        for collider in self.colliders:
            collider.update(delta_time)

    def render(self, target: pygame.Surface) -> None:
        self.sprite.render(target)

    def set_texture_rect(
        self,
        sprite_path: str | os.PathLike,
        color_key: tuple[int, int, int] | None = None,
    ) -> None:
        """Replace the sprite with a new one loaded from ``sprite_path``."""
        self.sprite = TextureRectangle(sprite_path, color_key)

    def set_position(self, x: int, y: int) -> None:
        """Move the sprite and tell every collider about the new position."""
        self.sprite.set_position(x, y)
        for collider in self.colliders:
            collider.set_parent_position(x, y)

    def add_collider(self) -> int:
        """Attach a new empty collider and return its index."""
        self.colliders.append(Collider2D())
        return len(self.colliders) - 1

    def collider(self, index: int) -> Collider2D:
        if not 0 <= index < len(self.colliders):
            raise IndexError(f"no collider at index {index}")
        return self.colliders[index]

    def is_colliding(self, other_colliders: Iterable[Collider2D]) -> bool:
        """True when any own collider overlaps any of ``other_colliders``."""
        others = list(other_colliders)
        return any(mine.is_colliding(other) for mine in self.colliders for other in others)