"""Core domain models used by game logic."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

BOARD_SIZE = 10

# One 4-decker, two 3-deckers, three 2-deckers, four 1-deckers; placed largest first.
FLEET_ROSTER: tuple[int, ...] = (4, 3, 3, 2, 2, 2, 1, 1, 1, 1)
FLEET_CELL_COUNT = sum(FLEET_ROSTER)

COLUMN_LABELS: tuple[str, ...] = ("А", "Б", "В", "Г", "Д", "Е", "Ж", "З", "И", "К")
ROW_LABELS: tuple[str, ...] = tuple(str(n) for n in range(1, BOARD_SIZE + 1))


class Orientation(StrEnum):
    """Ship orientation."""

    HORIZONTAL = "HORIZONTAL"
    VERTICAL = "VERTICAL"

    def rotated(self) -> Orientation:
        if self is Orientation.HORIZONTAL:
            return Orientation.VERTICAL
        return Orientation.HORIZONTAL


class Mark(StrEnum):
    """User-recorded shot result on a cell."""

    HIT = "hit"
    MISS = "miss"


class BoardSide(StrEnum):
    """Which of the two grids an action targets."""

    PLAYER = "PLAYER"
    OPPONENT = "OPPONENT"


class CellState(StrEnum):
    """Display state of a single cell for the rendering layer."""

    EMPTY = "EMPTY"
    SHIP = "SHIP"
    HIT = "HIT"
    MISS = "MISS"


@dataclass(frozen=True, slots=True)
class Coord:
    """Board coordinate."""

    row: int
    col: int


@dataclass(frozen=True, slots=True)
class ShipPlacement:
    """Placement of a single ship by its bow cell."""

    size: int
    bow: Coord
    orientation: Orientation


def cells_for_placement(placement: ShipPlacement) -> list[Coord]:
    """Compute occupied cells for a ship placement."""
    result: list[Coord] = []
    for i in range(placement.size):
        if placement.orientation is Orientation.HORIZONTAL:
            result.append(Coord(placement.bow.row, placement.bow.col + i))
        else:
            result.append(Coord(placement.bow.row + i, placement.bow.col))
    return result


def neighbours(coord: Coord, size: int = BOARD_SIZE) -> list[Coord]:
    """Return the in-bounds 8-connected neighbours of a coordinate."""
    result: list[Coord] = []
    for dr in (-1, 0, 1):
        for dc in (-1, 0, 1):
            if dr == 0 and dc == 0:
                continue
            rr = coord.row + dr
            cc = coord.col + dc
            if 0 <= rr < size and 0 <= cc < size:
                result.append(Coord(rr, cc))
    return result


def format_coord(coord: Coord) -> str:
    """Render a coordinate with board labels, e.g. ``А1``."""
    if 0 <= coord.col < len(COLUMN_LABELS) and 0 <= coord.row < len(ROW_LABELS):
        return f"{COLUMN_LABELS[coord.col]}{ROW_LABELS[coord.row]}"
    return f"({coord.row}, {coord.col})"
