"""Grid state representation and mutation helpers."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from seabattle.core.errors import InvalidCoordinate, InvalidPlacement
from seabattle.core.models import BOARD_SIZE, Coord, ShipPlacement, cells_for_placement, neighbours


@dataclass(slots=True, eq=False)
class Grid:
    """Numpy-backed occupancy grid.

    Ships are not tracked as objects once placed; they exist only as occupied
    cells. Because placement forbids touching ships, every 8-connected group of
    occupied cells is exactly one ship.
    """

    size: int = BOARD_SIZE
    cells: np.ndarray = field(default_factory=lambda: np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.bool_))

    def __post_init__(self) -> None:
        if self.cells.shape != (self.size, self.size):
            self.cells = np.zeros((self.size, self.size), dtype=np.bool_)

    def in_bounds(self, coord: Coord) -> bool:
        """Return whether the coordinate is in board bounds."""
        return 0 <= coord.row < self.size and 0 <= coord.col < self.size

    def require_in_bounds(self, coord: Coord) -> None:
        """Raise ``InvalidCoordinate`` for out-of-range coordinates."""
        if not self.in_bounds(coord):
            raise InvalidCoordinate(coord, self.size)

    def is_occupied(self, coord: Coord) -> bool:
        """Return whether a ship occupies the cell."""
        self.require_in_bounds(coord)
        return bool(self.cells[coord.row, coord.col])

    def occupied_cells(self) -> list[Coord]:
        """Return all ship cells in row-major order."""
        rows, cols = np.nonzero(self.cells)
        return [Coord(int(r), int(c)) for r, c in zip(rows, cols)]

    def ship_cell_count(self) -> int:
        return int(np.count_nonzero(self.cells))

    def placement_error(self, placement: ShipPlacement) -> str | None:
        """Return why a placement is invalid, or ``None`` when it is allowed."""
        if placement.size < 1:
            return "Ship size must be positive."
        run = cells_for_placement(placement)
        for cell in run:
            if not self.in_bounds(cell):
                return "Ship does not fit on the board."
            if self.cells[cell.row, cell.col]:
                return "Ship overlaps another ship."
        for cell in run:
            for near in neighbours(cell, self.size):
                if self.cells[near.row, near.col]:
                    return "Ship touches another ship."
        return None

    def can_place(self, placement: ShipPlacement) -> bool:
        """Return whether a placement is in bounds, free, and not touching any ship."""
        return self.placement_error(placement) is None

    def place_ship(self, placement: ShipPlacement) -> None:
        """Place a ship on the grid."""
        reason = self.placement_error(placement)
        if reason is not None:
            raise InvalidPlacement(reason)
        for cell in cells_for_placement(placement):
            self.cells[cell.row, cell.col] = True

    def ship_groups(self) -> list[list[Coord]]:
        """Split occupied cells into 8-connected groups, each sorted row-major."""
        seen: set[Coord] = set()
        groups: list[list[Coord]] = []
        for start in self.occupied_cells():
            if start in seen:
                continue
            group = self._collect_group(start)
            seen.update(group)
            groups.append(group)
        return groups

    def ship_at(self, coord: Coord) -> list[Coord]:
        """Return the cells of the ship covering ``coord`` (empty when none)."""
        if not self.is_occupied(coord):
            return []
        return self._collect_group(coord)

    def remove_ship_at(self, coord: Coord) -> int:
        """Remove the ship covering ``coord`` and return its size."""
        group = self.ship_at(coord)
        for cell in group:
            self.cells[cell.row, cell.col] = False
        return len(group)

    def clear(self) -> None:
        self.cells[:, :] = False

    def copy(self) -> Grid:
        return Grid(size=self.size, cells=self.cells.copy())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.size == other.size and bool(np.array_equal(self.cells, other.cells))

    __hash__ = None  # type: ignore[assignment]

    def _collect_group(self, start: Coord) -> list[Coord]:
        group: set[Coord] = {start}
        stack = [start]
        while stack:
            current = stack.pop()
            for near in neighbours(current, self.size):
                if near not in group and self.cells[near.row, near.col]:
                    group.add(near)
                    stack.append(near)
        return sorted(group, key=lambda c: (c.row, c.col))


def is_straight_run(cells: list[Coord]) -> bool:
    """Return whether cells form one contiguous horizontal or vertical line."""
    if not cells:
        return False
    rows = {cell.row for cell in cells}
    cols = {cell.col for cell in cells}
    if len(rows) == 1:
        ordered = sorted(cell.col for cell in cells)
    elif len(cols) == 1:
        ordered = sorted(cell.row for cell in cells)
    else:
        return False
    return ordered == list(range(ordered[0], ordered[0] + len(ordered)))
