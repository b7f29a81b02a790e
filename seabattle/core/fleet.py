"""Random fleet generation and fleet validation."""

from __future__ import annotations

import logging
import random
from collections import Counter

from seabattle.core.errors import PlacementExhausted
from seabattle.core.grid import Grid, is_straight_run
from seabattle.core.models import (
    BOARD_SIZE,
    FLEET_ROSTER,
    Coord,
    Orientation,
    ShipPlacement,
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS_PER_SHIP = 500
DEFAULT_MAX_RESTARTS = 50

# Known-valid layout used when every randomized pass fails.
FALLBACK_LAYOUT: tuple[ShipPlacement, ...] = (
    ShipPlacement(4, Coord(0, 0), Orientation.HORIZONTAL),
    ShipPlacement(3, Coord(0, 5), Orientation.HORIZONTAL),
    ShipPlacement(3, Coord(2, 0), Orientation.HORIZONTAL),
    ShipPlacement(2, Coord(2, 4), Orientation.HORIZONTAL),
    ShipPlacement(2, Coord(2, 7), Orientation.HORIZONTAL),
    ShipPlacement(2, Coord(4, 0), Orientation.HORIZONTAL),
    ShipPlacement(1, Coord(4, 3), Orientation.HORIZONTAL),
    ShipPlacement(1, Coord(4, 5), Orientation.HORIZONTAL),
    ShipPlacement(1, Coord(4, 7), Orientation.HORIZONTAL),
    ShipPlacement(1, Coord(4, 9), Orientation.HORIZONTAL),
)


class FleetGenerator:
    """Places the full roster at random with bounded retries."""

    def __init__(
        self,
        rng: random.Random | None = None,
        *,
        max_attempts_per_ship: int = DEFAULT_MAX_ATTEMPTS_PER_SHIP,
        max_restarts: int = DEFAULT_MAX_RESTARTS,
        roster: tuple[int, ...] = FLEET_ROSTER,
        size: int = BOARD_SIZE,
    ) -> None:
        if max_attempts_per_ship < 1:
            raise ValueError("max_attempts_per_ship must be at least 1.")
        if max_restarts < 1:
            raise ValueError("max_restarts must be at least 1.")
        self._rng = rng if rng is not None else random.Random()
        self._max_attempts_per_ship = max_attempts_per_ship
        self._max_restarts = max_restarts
        self._roster = roster
        self._size = size

    def generate(self) -> Grid:
        """Return a fresh grid holding the whole fleet; never a partial one."""
        for attempt in range(1, self._max_restarts + 1):
            try:
                grid = self._place_all()
            except PlacementExhausted as exc:
                logger.debug("fleet_restart attempt=%d reason=%s", attempt, exc)
                continue
            logger.debug("fleet_generated passes=%d", attempt)
            return grid
        logger.warning("fleet_fallback_layout restarts=%d", self._max_restarts)
        return fallback_grid(self._size)

    def _place_all(self) -> Grid:
        grid = Grid(size=self._size)
        for ship_size in self._roster:
            grid.place_ship(self._random_spot(grid, ship_size))
        return grid

    def _random_spot(self, grid: Grid, ship_size: int) -> ShipPlacement:
        for _ in range(self._max_attempts_per_ship):
            orientation = self._rng.choice((Orientation.HORIZONTAL, Orientation.VERTICAL))
            bow = Coord(self._rng.randrange(self._size), self._rng.randrange(self._size))
            placement = ShipPlacement(size=ship_size, bow=bow, orientation=orientation)
            if grid.can_place(placement):
                return placement
        raise PlacementExhausted(ship_size, self._max_attempts_per_ship)


def fallback_grid(size: int = BOARD_SIZE) -> Grid:
    """Build the fixed fallback layout."""
    grid = Grid(size=size)
    for placement in FALLBACK_LAYOUT:
        grid.place_ship(placement)
    return grid


def validate_fleet(grid: Grid, roster: tuple[int, ...] = FLEET_ROSTER) -> tuple[bool, str]:
    """Validate that a grid holds exactly the roster as non-touching straight ships."""
    expected_cells = sum(roster)
    count = grid.ship_cell_count()
    if count != expected_cells:
        return False, f"Fleet must occupy exactly {expected_cells} cells, found {count}."

    sizes: list[int] = []
    for group in grid.ship_groups():
        if not is_straight_run(group):
            return False, "Ships must be straight and must not touch each other."
        sizes.append(len(group))

    if Counter(sizes) != Counter(roster):
        return False, "Fleet does not match the roster."
    return True, ""


def remaining_roster(grid: Grid, roster: tuple[int, ...] = FLEET_ROSTER) -> list[int]:
    """Return roster sizes not yet placed on the grid, largest first."""
    placed = Counter(len(group) for group in grid.ship_groups())
    missing = Counter(roster) - placed
    return sorted(missing.elements(), reverse=True)


def next_ship_size(grid: Grid, roster: tuple[int, ...] = FLEET_ROSTER) -> int | None:
    """Return the size of the next ship to place manually, if any remain."""
    remaining = remaining_roster(grid, roster)
    return remaining[0] if remaining else None


def is_fleet_complete(grid: Grid, roster: tuple[int, ...] = FLEET_ROSTER) -> bool:
    return validate_fleet(grid, roster)[0]
