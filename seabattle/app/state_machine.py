"""Top-level application states."""

from enum import Enum, auto


class AppState(Enum):
    """Top-level application states."""

    PLACEMENT = auto()
    PLAY = auto()
