"""Process-wide cache of loaded images and the shared audio output."""

from __future__ import annotations

import os
from pathlib import Path

import pygame

MAX_VOLUME = 128
MIXER_FREQUENCY = 44100
MIXER_SIZE = -16
MIXER_CHANNELS = 2
MIXER_BUFFER = 4096


class ResourceManager:
    """Caches surfaces by path and owns the audio mixer.

    pygame offers a single audio output, so the mixer device and the device
    sounds are played on are one and the same; it is opened on first use.
    """

    def __init__(self) -> None:
        self._surfaces: dict[str, pygame.Surface] = {}
        self.mixer_device: str | None = None
        self.audio_device: str | None = None
        self._mixer_open = False
        self._open_device: str | None = None
        self._all_volume = MAX_VOLUME
        self._channel_volumes: dict[int, int] = {}
        self._music_volume = MAX_VOLUME

    def surface(self, filepath: str | os.PathLike) -> pygame.Surface:
        """Return the cached surface for ``filepath``, loading it on first request."""
        key = os.fspath(filepath)
        cached = self._surfaces.get(key)
        if cached is not None:
            return cached
        if not Path(key).is_file():
            raise FileNotFoundError(f"no image file {key!r}")
        loaded = pygame.image.load(key)
        self._surfaces[key] = loaded
        return loaded

    def _open_mixer(self, device: str | None) -> None:
        if pygame.mixer.get_init():
            pygame.mixer.quit()
        self._mixer_open = False
        pygame.mixer.init(
            frequency=MIXER_FREQUENCY,
            size=MIXER_SIZE,
            channels=MIXER_CHANNELS,
            buffer=MIXER_BUFFER,
            devicename=device,
            allowedchanges=pygame.AUDIO_ALLOW_ANY_CHANGE,
        )
        self._mixer_open = True
        self._open_device = device
        self._apply_volumes()

    def _ensure_mixer(self) -> None:
        if not self._mixer_open or not pygame.mixer.get_init():
            self._open_mixer(self.mixer_device)

    def _close_mixer(self) -> None:
        if self._mixer_open and pygame.mixer.get_init():
            pygame.mixer.quit()
        self._mixer_open = False

    def set_mixer_device(self, device: str | None) -> None:
        """Reopen the mixer on the named output device (None for the default)."""
        self.mixer_device = device
        self._open_mixer(device)

    def set_audio_device(self, device: str | None) -> None:
        """Select the output that sounds play on, reopening it if it differs."""
        self.audio_device = device
        if not self._mixer_open or self._open_device != device:
            self._open_mixer(device)

    def _apply_volumes(self) -> None:
        if not self._mixer_open:
            return
        for index in range(pygame.mixer.get_num_channels()):
            level = self._channel_volumes.get(index, self._all_volume)
            pygame.mixer.Channel(index).set_volume(level / MAX_VOLUME)
        pygame.mixer.music.set_volume(self._music_volume / MAX_VOLUME)

    def set_volume(self, channel: int, volume: int) -> int:
        """Set a channel's volume (0..128), or every channel's when ``channel`` is -1.

        Values above the maximum are clamped; a negative volume only queries.
        Returns the volume in effect before the call.
        """
        if channel < 0:
            previous = self._all_volume
        else:
            previous = self._channel_volumes.get(channel, self._all_volume)
        if volume < 0:
            return previous
        volume = min(int(volume), MAX_VOLUME)
        if channel < 0:
            self._all_volume = volume
            self._channel_volumes.clear()
        else:
            self._channel_volumes[channel] = volume
        self._apply_volumes()
        return previous

    def set_music_volume(self, volume: int) -> int:
        """Set the music volume (0..128); a negative value only queries."""
        previous = self._music_volume
        if volume < 0:
            return previous
        self._music_volume = min(int(volume), MAX_VOLUME)
        self._apply_volumes()
        return previous


_instance: ResourceManager | None = None


def get_resources() -> ResourceManager:
    """Return the shared resource manager, creating it if needed."""
    global _instance
    if _instance is None:
        _instance = ResourceManager()
    return _instance


def destroy_resources() -> None:
    """Drop the shared resource manager and close its mixer."""
    global _instance
    if _instance is not None:
        _instance._close_mixer()
    _instance = None