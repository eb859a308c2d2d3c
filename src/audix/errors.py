"""Custom audix exceptions."""


class AudixError(Exception):
    """Base exception for player errors."""

    def __init__(
        self, message: str, original_error: Exception | None = None
    ) -> None:
        super().__init__(message)
        self.original_error = original_error


class ArgumentError(AudixError):
    """Exception raised when no usable file path was given."""

    pass


class FileAccessError(AudixError):
    """Exception raised when the audio file cannot be accessed.

    This typically occurs when:
    - The path does not exist
    - The path is a directory or other non-regular file
    - The current user lacks read permission
    """

    def __init__(
        self,
        message: str,
        path: str | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message, original_error)
        self.path = path


class UnsupportedFormatError(AudixError):
    """Exception raised when the audio backend cannot decode the file."""

    pass


class PlaybackError(AudixError):
    """Exception raised for audio device or runtime playback failures.

    This typically occurs when:
    - No audio output device is available
    - The mixer fails to initialize
    - The device disappears during playback
    """

    pass
