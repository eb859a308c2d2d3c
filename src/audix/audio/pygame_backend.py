"""Audio backend for cross-platform file playback using pygame."""

# ruff: noqa: E402
import os

# Suppress pygame's annoying welcome message BEFORE any pygame import
os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "1"

import warnings

# Suppress pygame's pkg_resources deprecation warning spam
warnings.filterwarnings("ignore", category=UserWarning, module="pygame.pkgdata")

import logging
from pathlib import Path

import pygame

from ..errors import PlaybackError, UnsupportedFormatError
from .backend import AudioBackend

logger = logging.getLogger(__name__)


class PygameBackend(AudioBackend):
    """Audio backend streaming a file through pygame.mixer.music.

    The mixer is initialized lazily in open() so that constructing the
    backend never touches the audio device.
    """

    def __init__(self) -> None:
        self._loaded = False
        self._started = False
        self._paused = False

    def _init_mixer(self) -> None:
        if pygame.mixer.get_init():
            return
        try:
            pygame.mixer.init()
        except pygame.error as e:
            raise PlaybackError(
                f"Failed to initialize pygame audio mixer: {e}", e
            ) from e

    def open(self, path: Path) -> None:
        """Load an audio file into the pygame music stream.

        Raises:
            UnsupportedFormatError: If pygame cannot decode the file.
            PlaybackError: If the mixer fails to initialize.
        """
        self._init_mixer()
        try:
            pygame.mixer.music.load(str(path))
        except pygame.error as e:
            raise UnsupportedFormatError(
                f"Unsupported or unreadable audio file: {path} ({e})", e
            ) from e
        self._loaded = True
        logger.debug(f"Loaded {path}")

    def play(self) -> None:
        if not self._loaded:
            raise PlaybackError("No audio file loaded")
        try:
            pygame.mixer.music.play()
        except pygame.error as e:
            raise PlaybackError(f"Failed to play audio: {e}", e) from e
        self._started = True
        self._paused = False

    def pause(self) -> None:
        try:
            pygame.mixer.music.pause()
        except pygame.error as e:
            raise PlaybackError(f"Failed to pause audio: {e}", e) from e
        self._paused = True

    def resume(self) -> None:
        try:
            pygame.mixer.music.unpause()
        except pygame.error as e:
            raise PlaybackError(f"Failed to resume audio: {e}", e) from e
        self._paused = False

    def stop(self) -> None:
        if self._loaded:
            try:
                pygame.mixer.music.stop()
            except pygame.error as e:
                raise PlaybackError(f"Failed to stop audio: {e}", e) from e
        self._paused = False
        self._started = False

    def is_finished(self) -> bool:
        # get_busy() is False while paused, so the pause flag has to be checked
        if not self._started or self._paused:
            return False
        try:
            return not pygame.mixer.music.get_busy()
        except pygame.error as e:
            raise PlaybackError(f"Lost audio device: {e}", e) from e

    def set_volume(self, level: float) -> None:
        if not self._loaded:
            return
        try:
            pygame.mixer.music.set_volume(level)
        except pygame.error as e:
            raise PlaybackError(f"Failed to set volume: {e}", e) from e

    def position(self) -> float:
        if not self._started:
            return 0.0
        try:
            millis = pygame.mixer.music.get_pos()
        except pygame.error as e:
            raise PlaybackError(f"Lost audio device: {e}", e) from e
        return max(millis, 0) / 1000.0

    def close(self) -> None:
        """Stop playback and shut the mixer down."""
        if not pygame.mixer.get_init():
            return
        if self._loaded:
            pygame.mixer.music.stop()
            pygame.mixer.music.unload()
            self._loaded = False
        pygame.mixer.quit()
        self._started = False
        self._paused = False
        logger.debug("Audio mixer closed")
