"""Configuration management for audix.

Loads configuration from ~/.config/audix/config.toml.
Priority chain: CLI flags > env vars > config file > defaults.
"""

import os
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path

CONFIG_DIR = Path.home() / ".config" / "audix"
CONFIG_PATH = CONFIG_DIR / "config.toml"

DEFAULT_CONFIG = """\
# audix configuration

[player]
# Initial output volume (0.0-1.0)
volume = 0.7

# Volume change per Up/Down (or +/-) key press
volume_step = 0.05

# Seconds to wait for a key press before checking for end of track
poll_interval = 0.05

[display]
# Draw the one-line status display while playing
status = true

# Environment variables override this file:
#   AUDIX_VOLUME, AUDIX_VOLUME_STEP, AUDIX_POLL_INTERVAL
"""


@dataclass(frozen=True)
class PlayerConfig:
    """Playback configuration."""

    volume: float = 0.7
    volume_step: float = 0.05
    poll_interval: float = 0.05


@dataclass(frozen=True)
class DisplayConfig:
    """Status display configuration."""

    status: bool = True


@dataclass(frozen=True)
class AudixConfig:
    """Top-level audix configuration."""

    player: PlayerConfig
    display: DisplayConfig


_cached_config: AudixConfig | None = None


def generate_config(path: Path | None = None) -> Path:
    """Write the default config file and return its path."""
    path = path or CONFIG_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(DEFAULT_CONFIG)
    return path


def _read_float(name: str, env_var: str, section: dict, default: float) -> float:
    raw = os.getenv(env_var, section.get(name, default))
    try:
        return float(raw)
    except (TypeError, ValueError):
        print(
            f"Invalid config value for {name}: {raw!r} (expected a number)",
            file=sys.stderr,
        )
        raise SystemExit(1) from None


def load_config(path: Path | None = None) -> AudixConfig:
    """Load configuration from config file with env var overrides.

    A missing config file is not an error: built-in defaults apply.

    Args:
        path: Config file to read instead of ~/.config/audix/config.toml

    Returns:
        Loaded and validated AudixConfig.

    Raises:
        SystemExit: If the config file is unparseable or holds invalid values.
    """
    global _cached_config
    if path is None and _cached_config is not None:
        return _cached_config

    config_path = path or CONFIG_PATH
    data: dict = {}
    if config_path.exists():
        try:
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            print(f"Invalid config file {config_path}: {e}", file=sys.stderr)
            print(f"Edit {config_path} or delete it to regenerate.", file=sys.stderr)
            raise SystemExit(1) from None

    player = data.get("player", {})
    display = data.get("display", {})
    defaults = PlayerConfig()

    volume = _read_float("volume", "AUDIX_VOLUME", player, defaults.volume)
    volume_step = _read_float(
        "volume_step", "AUDIX_VOLUME_STEP", player, defaults.volume_step
    )
    poll_interval = _read_float(
        "poll_interval", "AUDIX_POLL_INTERVAL", player, defaults.poll_interval
    )

    invalid = []
    if not 0.0 <= volume <= 1.0:
        invalid.append("player.volume (0.0-1.0)")
    if not 0.0 < volume_step <= 1.0:
        invalid.append("player.volume_step (0.0-1.0, non-zero)")
    if poll_interval <= 0.0:
        invalid.append("player.poll_interval (> 0)")

    if invalid:
        print(f"Invalid config values: {', '.join(invalid)}", file=sys.stderr)
        print(f"Edit {config_path} or delete it to regenerate.", file=sys.stderr)
        raise SystemExit(1)

    config = AudixConfig(
        player=PlayerConfig(
            volume=volume,
            volume_step=volume_step,
            poll_interval=poll_interval,
        ),
        display=DisplayConfig(status=bool(display.get("status", True))),
    )

    if path is None:
        _cached_config = config
    return config
