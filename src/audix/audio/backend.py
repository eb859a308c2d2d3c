"""Abstract base class for audio backends.

This module defines the interface the playback controller drives, so the
controller can run against real audio output or a test double.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class AudioBackend(ABC):
    """Abstract base class for audio backends.

    A backend plays a single file at a time. The controller calls open()
    once, then play(), then any sequence of pause()/resume()/set_volume(),
    and finally stop() and/or close().
    """

    @abstractmethod
    def open(self, path: Path) -> None:
        """Load an audio file for playback.

        Args:
            path: Audio file to load

        Raises:
            UnsupportedFormatError: If the file cannot be decoded
            PlaybackError: If the output device cannot be initialized
        """
        pass

    @abstractmethod
    def play(self) -> None:
        """Start playback of the loaded file from the beginning."""
        pass

    @abstractmethod
    def pause(self) -> None:
        """Pause playback."""
        pass

    @abstractmethod
    def resume(self) -> None:
        """Resume paused playback."""
        pass

    @abstractmethod
    def stop(self) -> None:
        """Stop playback."""
        pass

    @abstractmethod
    def is_finished(self) -> bool:
        """Return True once the stream has played to its end.

        A paused stream is never finished.
        """
        pass

    def set_volume(self, level: float) -> None:
        """Set output volume (0.0-1.0). Backends without volume ignore this."""
        return None

    def position(self) -> float:
        """Return elapsed playback time in seconds."""
        return 0.0

    def close(self) -> None:
        """Release the output device. Must be safe to call more than once."""
        return None
