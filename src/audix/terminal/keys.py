"""Key codes understood by the player and decoding of raw terminal input."""

from enum import Enum


class Key(Enum):
    """Keys with defined behavior. Everything else decodes to OTHER."""

    SPACE = "space"
    Q = "q"
    ESC = "esc"
    VOLUME_UP = "volume_up"
    VOLUME_DOWN = "volume_down"
    OTHER = "other"


ESCAPE = b"\x1b"

_SEQUENCES = {
    b" ": Key.SPACE,
    b"q": Key.Q,
    b"Q": Key.Q,
    ESCAPE: Key.ESC,
    b"+": Key.VOLUME_UP,
    b"=": Key.VOLUME_UP,
    b"-": Key.VOLUME_DOWN,
    b"\x1b[A": Key.VOLUME_UP,  # Up arrow
    b"\x1bOA": Key.VOLUME_UP,  # Up arrow, application cursor mode
    b"\x1b[B": Key.VOLUME_DOWN,  # Down arrow
    b"\x1bOB": Key.VOLUME_DOWN,
}


def decode_keys(data: bytes) -> list[Key]:
    """Split one read from the terminal into the keys it contains.

    Keys typed quickly, or a held key repeating, can arrive in a single
    read. Known escape sequences are matched first; an ESC that does not
    start a CSI/SS3 sequence is the Escape key itself; unknown escape
    sequences are consumed whole and decode to OTHER.

    Args:
        data: Bytes returned by a single read of stdin

    Returns:
        Decoded keys in the order they were typed (empty if data is empty)
    """
    keys = []
    i = 0
    while i < len(data):
        sequence = data[i : i + 3]
        if len(sequence) == 3 and sequence in _SEQUENCES:
            keys.append(_SEQUENCES[sequence])
            i += 3
        elif data[i : i + 1] == ESCAPE and data[i + 1 : i + 2] in (b"[", b"O"):
            keys.append(Key.OTHER)
            i = _skip_escape_sequence(data, i)
        else:
            keys.append(_SEQUENCES.get(data[i : i + 1], Key.OTHER))
            i += 1
    return keys


def _skip_escape_sequence(data: bytes, start: int) -> int:
    """Return the index just past the escape sequence starting at start."""
    i = start + 2
    if data[start + 1 : start + 2] == b"O":
        return min(i + 1, len(data))
    # CSI parameters run until a final byte in the range 0x40-0x7e
    while i < len(data) and not 0x40 <= data[i] <= 0x7E:
        i += 1
    return min(i + 1, len(data))
