"""Playback session state for a single invocation of the player."""

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from .errors import ArgumentError, FileAccessError

MIN_VOLUME = 0.0
MAX_VOLUME = 1.0
DEFAULT_VOLUME = 0.7


class PlayerState(Enum):
    """Observable states of a playback session."""

    LOADING = "loading"
    PLAYING = "playing"
    PAUSED = "paused"
    TERMINATED = "terminated"


def clamp_volume(level: float) -> float:
    """Clamp a volume level to the range accepted by the backend."""
    return max(MIN_VOLUME, min(MAX_VOLUME, level))


def validate_audio_path(file_path: str | Path | None) -> Path:
    """Check that a path argument names a readable regular file.

    Args:
        file_path: Path given on the command line

    Returns:
        The path as a Path object

    Raises:
        ArgumentError: If no path was given
        FileAccessError: If the path is missing, not a file, or unreadable
    """
    if file_path is None or not str(file_path).strip():
        raise ArgumentError("No audio file provided")

    path = Path(file_path)

    if not path.exists():
        raise FileAccessError(f"File not found: {path}", path=str(path))
    if not path.is_file():
        raise FileAccessError(f"Not a regular file: {path}", path=str(path))
    if not os.access(path, os.R_OK):
        raise FileAccessError(
            f"Permission denied reading file: {path}", path=str(path)
        )

    return path


@dataclass
class PlaybackSession:
    """In-memory state for one playback of one file.

    Args:
        file_path: Audio file being played
        volume: Current output volume (0.0-1.0)
        is_paused: Whether playback is paused
        is_running: False once the session has terminated
        started: Whether the backend has started playing
    """

    file_path: Path
    volume: float = DEFAULT_VOLUME
    is_paused: bool = False
    is_running: bool = True
    started: bool = field(default=False, repr=False)

    def __post_init__(self) -> None:
        self.file_path = Path(self.file_path)
        self.volume = clamp_volume(self.volume)

    @property
    def state(self) -> PlayerState:
        if not self.is_running:
            return PlayerState.TERMINATED
        if not self.started:
            return PlayerState.LOADING
        if self.is_paused:
            return PlayerState.PAUSED
        return PlayerState.PLAYING

    def start(self) -> None:
        """Mark the transition from loading to playing."""
        self._ensure_running()
        self.started = True

    def toggle_pause(self) -> bool:
        """Invert the pause flag.

        Returns:
            The new value of is_paused

        Raises:
            RuntimeError: If the session has already terminated
        """
        self._ensure_running()
        self.is_paused = not self.is_paused
        return self.is_paused

    def adjust_volume(self, delta: float) -> float:
        """Change volume by delta, clamped to 0.0-1.0.

        Returns:
            The new volume
        """
        self._ensure_running()
        # Round to avoid drift like 0.7500000000000001 after repeated steps
        self.volume = round(clamp_volume(self.volume + delta), 4)
        return self.volume

    def terminate(self) -> None:
        """End the session. Safe to call more than once."""
        self.is_running = False

    def _ensure_running(self) -> None:
        if not self.is_running:
            raise RuntimeError("Playback session has terminated")
