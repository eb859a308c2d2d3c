"""Pytest configuration and fixtures for audix tests."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent))

from test_helpers import FakeBackend


@pytest.fixture(autouse=True)
def isolate_config(tmp_path, monkeypatch) -> Path:
    """Point config loading at a per-test path and clear the cached config."""
    config_path = tmp_path / "config" / "config.toml"
    monkeypatch.setattr("audix.config.CONFIG_PATH", config_path)
    monkeypatch.setattr("audix.config._cached_config", None)
    for var in ("AUDIX_VOLUME", "AUDIX_VOLUME_STEP", "AUDIX_POLL_INTERVAL"):
        monkeypatch.delenv(var, raising=False)
    return config_path


@pytest.fixture
def audio_file(tmp_path) -> Path:
    """An existing, readable file standing in for an audio track."""
    path = tmp_path / "song.wav"
    path.write_bytes(b"RIFF fake audio")
    return path


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()
