"""Board layout and hit-testing helpers in design coordinates."""

from __future__ import annotations

from dataclasses import dataclass

from seabattle.core.models import BOARD_SIZE, BoardSide, Coord

DESIGN_W = 1000.0
DESIGN_H = 640.0


@dataclass(frozen=True, slots=True)
class Rect:
    """Simple axis-aligned rectangle."""

    x: float
    y: float
    w: float
    h: float

    def contains(self, px: float, py: float) -> bool:
        """Return whether a point is inside the rectangle."""
        return self.x <= px <= self.x + self.w and self.y <= py <= self.y + self.h


@dataclass(frozen=True, slots=True)
class BoardLayout:
    """Positions of the two boards side by side."""

    player_origin_x: float = 70.0
    opponent_origin_x: float = 550.0
    origin_y: float = 150.0
    cell_size: float = 38.0
    board_size: int = BOARD_SIZE

    def origin_x(self, side: BoardSide) -> float:
        return self.opponent_origin_x if side is BoardSide.OPPONENT else self.player_origin_x

    def board_rect(self, side: BoardSide) -> Rect:
        """Return board rect for the given side."""
        size_px = self.board_size * self.cell_size
        return Rect(self.origin_x(side), self.origin_y, size_px, size_px)

    def cell_rect(self, side: BoardSide, coord: Coord) -> Rect:
        """Return pixel rectangle for a board cell."""
        return Rect(
            x=self.origin_x(side) + coord.col * self.cell_size,
            y=self.origin_y + coord.row * self.cell_size,
            w=self.cell_size,
            h=self.cell_size,
        )

    def screen_to_cell(self, side: BoardSide, px: float, py: float) -> Coord | None:
        """Convert a design-space point to a board coordinate."""
        rect = self.board_rect(side)
        if not rect.contains(px, py):
            return None
        col = int((px - rect.x) // self.cell_size)
        row = int((py - rect.y) // self.cell_size)
        if not (0 <= row < self.board_size and 0 <= col < self.board_size):
            return None
        return Coord(row=row, col=col)

    def hit_test(self, px: float, py: float) -> tuple[BoardSide, Coord] | None:
        """Return the board and cell under a point, if any."""
        for side in (BoardSide.PLAYER, BoardSide.OPPONENT):
            coord = self.screen_to_cell(side, px, py)
            if coord is not None:
                return side, coord
        return None
