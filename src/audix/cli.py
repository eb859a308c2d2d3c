"""Typer CLI definition for audix."""

import logging
import sys
from pathlib import Path

import typer

from .audio.pygame_backend import PygameBackend
from .config import CONFIG_PATH, generate_config, load_config
from .controller import ExitStatus, PlaybackController, report_error
from .errors import (
    ArgumentError,
    AudixError,
    FileAccessError,
    PlaybackError,
    UnsupportedFormatError,
)
from .session import clamp_volume
from .terminal.display import StatusLine, is_terminal
from .terminal.reader import TerminalInputReader

app = typer.Typer(help="Play an audio file from the command line")

_ERROR_KINDS = {
    ArgumentError: "Argument error",
    FileAccessError: "File access error",
    UnsupportedFormatError: "Unsupported format",
    PlaybackError: "Audio playback error",
}


def report_debug_error(error: AudixError) -> None:
    """Print the full error representation on stderr."""
    kind = _ERROR_KINDS.get(type(error), "Unexpected error")
    typer.echo(f"Debug - {kind}: {error!r}", err=True)
    if error.original_error is not None:
        typer.echo(f"Debug - Caused by: {error.original_error!r}", err=True)


@app.command()
def play(
    file: Path | None = typer.Argument(
        None, metavar="FILE", help="Audio file to play"
    ),
    volume: float | None = typer.Option(
        None, "-v", "--volume", help="Initial volume (0.0 to 1.0, from config if omitted)"
    ),
    no_status: bool = typer.Option(
        False, "--no-status", help="Do not draw the status line"
    ),
    debug: bool = typer.Option(
        False, "--debug", help="Show verbose error messages and playback activity"
    ),
    init_config: bool = typer.Option(
        False, "--init-config", help=f"Write a default config to {CONFIG_PATH} and exit"
    ),
) -> None:
    """Play an audio file. Space pauses/resumes, q or Esc quits."""
    # Configure logging for debug mode
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )

    if init_config:
        try:
            path = generate_config()
        except OSError as e:
            if debug:
                typer.echo(f"Debug - Config write failed: {e!r}", err=True)
            else:
                typer.echo(f"Error: Failed to write config: {e}", err=True)
            raise typer.Exit(1) from None
        typer.echo(f"Config written to {path}")
        raise typer.Exit(0)

    config = load_config()
    initial_volume = clamp_volume(
        volume if volume is not None else config.player.volume
    )
    # No in-place redraws on piped or redirected stdout
    show_status = (
        config.display.status and not no_status and is_terminal(sys.stdout)
    )

    controller = PlaybackController(
        backend=PygameBackend(),
        reader=TerminalInputReader(),
        display=StatusLine() if show_status else None,
        poll_interval=config.player.poll_interval,
        volume_step=config.player.volume_step,
        on_error=report_debug_error if debug else report_error,
    )

    status = controller.run(file, volume=initial_volume)
    if status is ExitStatus.INTERRUPTED:
        typer.echo("Interrupted", err=True)
    raise typer.Exit(int(status))
