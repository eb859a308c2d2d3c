"""One-line status display redrawn in place while a track plays."""

import sys
from typing import IO

import typer

from ..session import PlaybackSession, PlayerState

VOLUME_BAR_WIDTH = 20
CLEAR_LINE = "\r\x1b[2K"


def is_terminal(stream: IO[str]) -> bool:
    """Return True if stream writes to a terminal that can redraw a line."""
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False


def format_duration(seconds: float) -> str:
    """Format seconds as MM:SS."""
    total = int(max(seconds, 0))
    minutes, secs = divmod(total, 60)
    return f"{minutes:02}:{secs:02}"


def draw_volume_bar(volume: float, width: int = VOLUME_BAR_WIDTH) -> str:
    filled = min(int(volume * width), width)
    return "█" * filled + "░" * (width - filled)


def render_status(session: PlaybackSession, elapsed: float) -> str:
    """Build the status line text for the current session state."""
    if session.state is PlayerState.PAUSED:
        status = typer.style("⏸ Paused ", fg=typer.colors.YELLOW)
    else:
        status = typer.style("▶ Playing", fg=typer.colors.GREEN)

    name = typer.style(session.file_path.name, fg=typer.colors.CYAN)
    volume = f"Vol {draw_volume_bar(session.volume)} {session.volume * 100:3.0f}%"
    return f"{status}  {name}  {format_duration(elapsed)}  {volume}"


class StatusLine:
    """Writes the status line to a stream, overwriting the previous one."""

    def __init__(self, stream: IO[str] | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdout
        self._drawn = False
        self._last = ""

    def show_controls(self) -> None:
        typer.echo(
            typer.style(
                "[Space] Play/Pause  [↑/↓] Volume  [q/Esc] Quit",
                fg=typer.colors.BRIGHT_BLACK,
            ),
            file=self._stream,
        )

    def render(self, session: PlaybackSession, elapsed: float) -> None:
        line = render_status(session, elapsed)
        if line == self._last:
            return
        typer.echo(CLEAR_LINE + line, file=self._stream, nl=False)
        self._last = line
        self._drawn = True

    def close(self) -> None:
        """Finish the status line and say goodbye."""
        if self._drawn:
            typer.echo("", file=self._stream)
        typer.echo("Goodbye!", file=self._stream)
        self._drawn = False
        self._last = ""
