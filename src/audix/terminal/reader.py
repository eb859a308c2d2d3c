"""Raw keyboard input from the controlling terminal."""

import logging
import os
import select
import sys
import termios
import time
import tty
from abc import ABC, abstractmethod
from collections import deque
from typing import IO

from .keys import Key, decode_keys

logger = logging.getLogger(__name__)

# Enough for several keys typed in quick succession or a repeating arrow key
READ_SIZE = 64


class InputReader(ABC):
    """Source of key presses for the playback loop.

    Readers are context managers: terminal setup happens on enter and is
    undone on exit.
    """

    def __enter__(self) -> "InputReader":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # type: ignore[no-untyped-def]
        return None

    @abstractmethod
    def poll_key(self, timeout: float) -> Key | None:
        """Wait up to timeout seconds for a key press.

        Args:
            timeout: Maximum seconds to wait

        Returns:
            The key pressed, or None if no key arrived in time
        """
        pass


class TerminalInputReader(InputReader):
    """Reads single key presses from stdin in cbreak mode.

    When stdin is not a terminal (piped, redirected, or closed) no keys are
    ever reported and poll_key() simply waits out its timeout.
    """

    def __init__(self, stream: IO[str] | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdin
        self._fd: int | None = None
        self._old_settings: list | None = None
        self._pending: deque[Key] = deque()

    @property
    def interactive(self) -> bool:
        return self._fd is not None

    def __enter__(self) -> "TerminalInputReader":
        try:
            fd = self._stream.fileno()
        except (AttributeError, ValueError, OSError):
            fd = None

        if fd is not None and os.isatty(fd):
            self._old_settings = termios.tcgetattr(fd)
            tty.setcbreak(fd)
            self._fd = fd
            logger.debug("Terminal switched to cbreak mode")
        else:
            logger.debug("stdin is not a terminal; keyboard controls disabled")
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # type: ignore[no-untyped-def]
        if self._fd is not None and self._old_settings is not None:
            termios.tcsetattr(self._fd, termios.TCSADRAIN, self._old_settings)
            logger.debug("Terminal settings restored")
        self._fd = None
        self._old_settings = None
        self._pending.clear()

    def poll_key(self, timeout: float) -> Key | None:
        # Keys left over from a burst are served before reading again
        if self._pending:
            return self._pending.popleft()

        if self._fd is None:
            time.sleep(timeout)
            return None

        ready, _, _ = select.select([self._fd], [], [], timeout)
        if not ready:
            return None

        data = os.read(self._fd, READ_SIZE)
        keys = decode_keys(data)
        logger.debug(f"Read {data!r} -> {keys}")
        self._pending.extend(keys)
        return self._pending.popleft() if self._pending else None
