"""Domain exceptions raised by the core."""

from __future__ import annotations

from seabattle.core.models import Coord


class SeaBattleError(Exception):
    """Base class for Sea Battle domain errors."""


class InvalidCoordinate(SeaBattleError, ValueError):
    """Coordinate outside the board; always a caller bug."""

    def __init__(self, coord: Coord, size: int) -> None:
        super().__init__(f"Coordinate ({coord.row}, {coord.col}) is outside the {size}x{size} board.")
        self.coord = coord
        self.size = size


class InvalidPlacement(SeaBattleError, ValueError):
    """A ship placement violates the placement rules."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class PlacementExhausted(SeaBattleError):
    """A ship could not be placed within the attempt cap."""

    def __init__(self, ship_size: int, attempts: int) -> None:
        super().__init__(f"No spot for a {ship_size}-cell ship after {attempts} attempts.")
        self.ship_size = ship_size
        self.attempts = attempts
