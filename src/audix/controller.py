"""Playback controller - drives one audio file from open to exit."""

import logging
from collections.abc import Callable
from enum import IntEnum
from pathlib import Path

import typer

from .audio.backend import AudioBackend
from .errors import AudixError
from .session import DEFAULT_VOLUME, PlaybackSession, validate_audio_path
from .terminal.display import StatusLine
from .terminal.keys import Key
from .terminal.reader import InputReader

logger = logging.getLogger(__name__)

DEFAULT_POLL_INTERVAL = 0.05
DEFAULT_VOLUME_STEP = 0.05


class ExitStatus(IntEnum):
    """Process exit codes returned by PlaybackController.run()."""

    SUCCESS = 0
    FAILURE = 1
    INTERRUPTED = 130


def report_error(error: AudixError) -> None:
    """Print a player error on stderr."""
    typer.echo(f"Error: {error}", err=True)


class PlaybackController:
    """Plays a single file and reacts to key presses until it ends.

    The backend and reader are injected so the loop can run against
    real audio and a real terminal, or against test doubles.

    Args:
        backend: Audio backend used to decode and play the file
        reader: Source of key presses
        display: Optional status line redrawn every loop iteration
        poll_interval: Seconds to wait for a key before checking end of stream
        volume_step: Volume change per volume key press
        on_error: Called with the error before run() returns a failure status
    """

    def __init__(
        self,
        backend: AudioBackend,
        reader: InputReader,
        display: StatusLine | None = None,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
        volume_step: float = DEFAULT_VOLUME_STEP,
        on_error: Callable[[AudixError], None] = report_error,
    ) -> None:
        self.backend = backend
        self.reader = reader
        self.display = display
        self.poll_interval = poll_interval
        self.volume_step = volume_step
        self.on_error = on_error

    def run(
        self, file_path: str | Path | None, volume: float = DEFAULT_VOLUME
    ) -> ExitStatus:
        """Play file_path to completion or until the user quits.

        Args:
            file_path: Audio file to play
            volume: Initial volume (0.0-1.0)

        Returns:
            ExitStatus.SUCCESS on natural end or quit, ExitStatus.FAILURE on
            any AudixError, ExitStatus.INTERRUPTED on Ctrl-C
        """
        try:
            path = validate_audio_path(file_path)
        except AudixError as e:
            logger.debug(f"Rejected file argument: {e}")
            self.on_error(e)
            return ExitStatus.FAILURE

        session = PlaybackSession(file_path=path, volume=volume)
        try:
            self.play(session)
        except AudixError as e:
            session.terminate()
            logger.debug(f"Playback failed: {e!r}")
            self.on_error(e)
            return ExitStatus.FAILURE
        except KeyboardInterrupt:
            session.terminate()
            logger.info("Interrupted by user")
            return ExitStatus.INTERRUPTED
        return ExitStatus.SUCCESS

    def play(self, session: PlaybackSession) -> None:
        """Open the session's file and run the event loop until it terminates.

        The backend is closed on every exit path, including errors raised
        while opening.

        Raises:
            UnsupportedFormatError: If the backend cannot decode the file
            PlaybackError: If the device fails while opening or playing
        """
        try:
            self.backend.open(session.file_path)
            self.backend.set_volume(session.volume)
            self.backend.play()
            session.start()
            logger.debug(f"Playing {session.file_path}")

            with self.reader:
                if self.display is not None:
                    self.display.show_controls()
                try:
                    self._loop(session)
                finally:
                    if self.display is not None:
                        self.display.close()
        finally:
            session.terminate()
            self.backend.close()

    def _loop(self, session: PlaybackSession) -> None:
        while session.is_running:
            key = self.reader.poll_key(self.poll_interval)
            if key is not None:
                self.handle_key(session, key)
                if not session.is_running:
                    break

            if self.backend.is_finished():
                logger.debug("End of stream")
                session.terminate()
                break

            if self.display is not None:
                self.display.render(session, self.backend.position())

    def handle_key(self, session: PlaybackSession, key: Key) -> None:
        """Apply one key press to the session and backend."""
        if not session.is_running:
            return

        if key is Key.SPACE:
            if session.toggle_pause():
                self.backend.pause()
                logger.debug("Paused")
            else:
                self.backend.resume()
                logger.debug("Resumed")
        elif key in (Key.Q, Key.ESC):
            session.terminate()
            self.backend.stop()
            logger.debug(f"Quit via {key.value}")
        elif key is Key.VOLUME_UP:
            self.backend.set_volume(session.adjust_volume(self.volume_step))
            logger.debug(f"Volume {session.volume:.2f}")
        elif key is Key.VOLUME_DOWN:
            self.backend.set_volume(session.adjust_volume(-self.volume_step))
            logger.debug(f"Volume {session.volume:.2f}")
