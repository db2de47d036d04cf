"""Sound effects and background music played through the shared mixer."""

from __future__ import annotations

import os
from pathlib import Path

import pygame

from sdltour.resources import get_resources


def _checked_path(filepath: str | os.PathLike) -> str:
    path = Path(filepath)
    if not path.is_file():
        raise FileNotFoundError(f"no audio file {os.fspath(filepath)!r}")
    return str(path)


def _open_mixer() -> None:
    get_resources()._ensure_mixer()


class Sound:
    """A short sound loaded fully into memory."""

    def __init__(self, filepath: str | os.PathLike) -> None:
        self.path = _checked_path(filepath)
        _open_mixer()
        self._sound = pygame.mixer.Sound(self.path)

    @property
    def length(self) -> float:
        """Duration in seconds."""
        return self._sound.get_length()

    def play(self) -> pygame.mixer.Channel | None:
        """Start playback and return the channel used, if one was free."""
        _open_mixer()
        return self._sound.play()

    def stop(self) -> None:
        self._sound.stop()


class Music:
    """A streamed music file."""

    def __init__(self, filepath: str | os.PathLike) -> None:
        self.path = _checked_path(filepath)

    def play(self, loops: int) -> None:
        """Play the music; ``loops`` of -1 repeats forever, 0 plays once."""
        _open_mixer()
        pygame.mixer.music.load(self.path)
        pygame.mixer.music.play(loops)