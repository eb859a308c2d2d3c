"""audix - minimal command-line audio player."""

__version__ = "0.1.0"
__all__ = ["PlaybackController", "PlaybackSession"]


def __getattr__(name: str):  # type: ignore[no-untyped-def]
    if name == "PlaybackController":
        from .controller import PlaybackController

        return PlaybackController
    if name == "PlaybackSession":
        from .session import PlaybackSession

        return PlaybackSession
    raise AttributeError(f"module 'audix' has no attribute {name!r}")
