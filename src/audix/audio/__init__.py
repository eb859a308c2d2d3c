"""Audio playback package for audix.

This package defines the audio backend interface and a pygame implementation.
"""

from .backend import AudioBackend
from .pygame_backend import PygameBackend

__all__ = ["AudioBackend", "PygameBackend"]
