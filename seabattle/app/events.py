"""Application event model."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from seabattle.core.models import BoardSide, Coord


class Gesture(Enum):
    """Logical input action; the frontend chooses the physical gesture."""

    PRIMARY = auto()  # mark / place
    SECONDARY = auto()  # clear / remove


@dataclass(frozen=True, slots=True)
class ButtonPressed:
    """UI button pressed event."""

    button_id: str


@dataclass(frozen=True, slots=True)
class BoardCellPressed:
    """Board cell activation event."""

    side: BoardSide
    coord: Coord
    gesture: Gesture = Gesture.PRIMARY


@dataclass(frozen=True, slots=True)
class PointerPressed:
    """Pointer press in design coordinates."""

    x: float
    y: float
    gesture: Gesture = Gesture.PRIMARY


@dataclass(frozen=True, slots=True)
class KeyPressed:
    """Key down event."""

    key: str
