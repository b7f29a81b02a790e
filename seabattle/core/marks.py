"""Per-grid hit/miss bookkeeping."""

from __future__ import annotations

from collections.abc import Iterator

from seabattle.core.errors import InvalidCoordinate
from seabattle.core.models import BOARD_SIZE, Coord, Mark


class MarkTracker:
    """Sparse mapping from coordinate to mark; absence means unset.

    The first mark recorded on a cell wins until it is cleared.
    """

    def __init__(self, size: int = BOARD_SIZE) -> None:
        self._size = size
        self._marks: dict[Coord, Mark] = {}

    def set_if_absent(self, coord: Coord, mark: Mark) -> bool:
        """Record ``mark`` unless the cell already has one. Returns whether it was inserted."""
        self._check(coord)
        if coord in self._marks:
            return False
        self._marks[coord] = mark
        return True

    def clear(self, coord: Coord) -> bool:
        """Remove the mark at ``coord``. Returns whether one was removed."""
        self._check(coord)
        return self._marks.pop(coord, None) is not None

    def get(self, coord: Coord) -> Mark | None:
        self._check(coord)
        return self._marks.get(coord)

    def count(self, mark: Mark) -> int:
        """Return how many cells carry ``mark``."""
        return sum(1 for value in self._marks.values() if value is mark)

    def items(self) -> list[tuple[Coord, Mark]]:
        return list(self._marks.items())

    def reset(self) -> None:
        self._marks.clear()

    def __contains__(self, coord: object) -> bool:
        return coord in self._marks

    def __len__(self) -> int:
        return len(self._marks)

    def __iter__(self) -> Iterator[Coord]:
        return iter(list(self._marks))

    def _check(self, coord: Coord) -> None:
        if not (0 <= coord.row < self._size and 0 <= coord.col < self._size):
            raise InvalidCoordinate(coord, self._size)
