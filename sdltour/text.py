"""Text that can be re-rendered whenever its content changes."""

from __future__ import annotations

import os
from pathlib import Path

import pygame

from sdltour.texture_rectangle import _blit_scaled


class DynamicText:
    """A font plus the most recently rendered text and where to draw it.

    ``filepath`` of None selects pygame's built-in font.
    """

    def __init__(self, filepath: str | os.PathLike | None, font_size: int) -> None:
        if not pygame.font.get_init():
            pygame.font.init()
        if filepath is not None:
            filepath = os.fspath(filepath)
            if not Path(filepath).is_file():
                raise FileNotFoundError(f"no font file {filepath!r}")
        self.font = pygame.font.Font(filepath, font_size)
        self.texture: pygame.Surface | None = None
        self.position = pygame.Rect(0, 0, 0, 0)

    def set_text(self, text: str, color) -> None:
        """Render ``text`` without anti-aliasing in ``color``."""
        self.texture = self.font.render(text, False, color)

    def set_position(self, position) -> None:
        """Set the rectangle the text is stretched into."""
        self.position = pygame.Rect(position)

    def render(self, target: pygame.Surface) -> None:
        if self.texture is None:
            raise RuntimeError("no text has been set")
        _blit_scaled(target, self.texture, self.position)