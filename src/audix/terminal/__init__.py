"""Terminal input and status display for audix."""

from .display import StatusLine
from .keys import Key, decode_keys
from .reader import InputReader, TerminalInputReader

__all__ = ["InputReader", "Key", "StatusLine", "TerminalInputReader", "decode_keys"]
