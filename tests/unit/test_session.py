"""Unit tests for playback session state and path validation."""

import os
import sys
from pathlib import Path

import pytest

# Add src to path for testing
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from audix.errors import ArgumentError, FileAccessError
from audix.session import (
    PlaybackSession,
    PlayerState,
    clamp_volume,
    validate_audio_path,
)


class TestPlaybackSessionState:
    """Test the session state machine."""

    def test_new_session_is_loading(self, audio_file) -> None:
        """Test initial flags and state."""
        session = PlaybackSession(file_path=audio_file)

        assert session.is_running
        assert not session.is_paused
        assert session.state is PlayerState.LOADING

    def test_start_moves_to_playing(self, audio_file) -> None:
        session = PlaybackSession(file_path=audio_file)
        session.start()

        assert session.state is PlayerState.PLAYING

    @pytest.mark.parametrize("presses", [0, 2, 4, 10])
    def test_even_number_of_toggles_restores_pause_flag(
        self, audio_file, presses
    ) -> None:
        """Test double-toggle leaves is_paused unchanged."""
        session = PlaybackSession(file_path=audio_file)
        session.start()

        for _ in range(presses):
            session.toggle_pause()

        assert session.is_paused is False
        assert session.state is PlayerState.PLAYING

    def test_toggle_pause_returns_new_value(self, audio_file) -> None:
        session = PlaybackSession(file_path=audio_file)
        session.start()

        assert session.toggle_pause() is True
        assert session.state is PlayerState.PAUSED
        assert session.toggle_pause() is False

    def test_terminate_is_final(self, audio_file) -> None:
        """Test a terminated session rejects further input."""
        session = PlaybackSession(file_path=audio_file)
        session.start()
        session.toggle_pause()
        session.terminate()
        session.terminate()

        assert session.state is PlayerState.TERMINATED
        with pytest.raises(RuntimeError, match="terminated"):
            session.toggle_pause()
        with pytest.raises(RuntimeError, match="terminated"):
            session.adjust_volume(0.1)

    def test_terminate_from_loading(self, audio_file) -> None:
        """Test an open failure goes straight to TERMINATED."""
        session = PlaybackSession(file_path=audio_file)
        session.terminate()

        assert session.state is PlayerState.TERMINATED

    def test_file_path_string_converted_to_path(self, audio_file) -> None:
        session = PlaybackSession(file_path=str(audio_file))

        assert session.file_path == audio_file


class TestVolume:
    """Test volume clamping."""

    @pytest.mark.parametrize(
        ("level", "expected"), [(-0.5, 0.0), (0.0, 0.0), (0.4, 0.4), (1.7, 1.0)]
    )
    def test_clamp_volume(self, level, expected) -> None:
        assert clamp_volume(level) == expected

    def test_initial_volume_clamped(self, audio_file) -> None:
        assert PlaybackSession(file_path=audio_file, volume=3.0).volume == 1.0

    def test_adjust_volume_steps_without_drift(self, audio_file) -> None:
        """Test repeated steps land on round values."""
        session = PlaybackSession(file_path=audio_file, volume=0.7)
        session.start()

        for _ in range(3):
            session.adjust_volume(0.05)

        assert session.volume == 0.85

    def test_adjust_volume_clamps(self, audio_file) -> None:
        session = PlaybackSession(file_path=audio_file, volume=0.95)
        session.start()

        assert session.adjust_volume(0.1) == 1.0
        assert session.adjust_volume(-5) == 0.0


class TestValidateAudioPath:
    """Test file argument validation."""

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_missing_argument(self, value) -> None:
        with pytest.raises(ArgumentError, match="No audio file provided"):
            validate_audio_path(value)

    def test_existing_file_returns_path(self, audio_file) -> None:
        assert validate_audio_path(str(audio_file)) == audio_file

    def test_nonexistent_file(self, tmp_path) -> None:
        missing = tmp_path / "nope.ogg"

        with pytest.raises(FileAccessError, match="File not found") as exc_info:
            validate_audio_path(missing)

        assert exc_info.value.path == str(missing)

    def test_directory_rejected(self, tmp_path) -> None:
        with pytest.raises(FileAccessError, match="Not a regular file"):
            validate_audio_path(tmp_path)

    @pytest.mark.skipif(
        hasattr(os, "geteuid") and os.geteuid() == 0,
        reason="root can read files regardless of mode",
    )
    def test_unreadable_file(self, audio_file) -> None:
        audio_file.chmod(0o000)
        try:
            with pytest.raises(FileAccessError, match="Permission denied"):
                validate_audio_path(audio_file)
        finally:
            audio_file.chmod(0o644)
