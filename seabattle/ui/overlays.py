"""Top bar buttons and status bar geometry."""

from __future__ import annotations

from dataclasses import dataclass

from seabattle.app.state_machine import AppState
from seabattle.ui.board_layout import DESIGN_W, Rect

_BUTTON_LABELS = {
    "new_game": "New Game",
    "randomize": "Random Ships",
    "manual_placement": "Place Manually",
    "rotate": "Rotate",
    "finish_placement": "Done",
    "pending_hit": "Hit",
    "pending_miss": "Miss",
    "quit": "Quit",
}


@dataclass(frozen=True, slots=True)
class Button:
    """Clickable rectangular button."""

    id: str
    x: float
    y: float
    w: float
    h: float
    visible: bool = True
    enabled: bool = True
    active: bool = False

    def contains(self, px: float, py: float) -> bool:
        """Return whether this button contains the point."""
        return self.visible and self.x <= px <= self.x + self.w and self.y <= py <= self.y + self.h


def top_bar_rect() -> Rect:
    return Rect(20.0, 16.0, DESIGN_W - 40.0, 56.0)


def status_rect() -> Rect:
    return Rect(20.0, 570.0, DESIGN_W - 40.0, 40.0)


def buttons_for_state(
    state: AppState,
    *,
    placement_ready: bool,
    pending_hit: bool,
) -> list[Button]:
    """Build buttons for the current app state."""
    top_bar = top_bar_rect()
    y = top_bar.y + 6.0
    x = top_bar.x + 10.0
    gap = 12.0
    bw = 132.0
    bh = 44.0
    small = 72.0

    buttons: list[Button] = [
        Button("new_game", x, y, bw, bh),
        Button("randomize", x + (bw + gap), y, bw, bh),
    ]
    if state is AppState.PLACEMENT:
        buttons.append(Button("rotate", x + 2 * (bw + gap), y, bw, bh))
        buttons.append(Button("finish_placement", x + 3 * (bw + gap), y, bw, bh, enabled=placement_ready))
    else:
        buttons.append(Button("manual_placement", x + 2 * (bw + gap), y, bw + 20.0, bh))

    toggle_x = top_bar.x + top_bar.w - 3 * small - 2 * gap - 10.0
    buttons.append(Button("pending_hit", toggle_x, y, small, bh, active=pending_hit))
    buttons.append(Button("pending_miss", toggle_x + small + gap, y, small, bh, active=not pending_hit))
    buttons.append(Button("quit", toggle_x + 2 * (small + gap), y, small, bh))
    return buttons


def button_label(button_id: str) -> str:
    """Map button id to visible label."""
    return _BUTTON_LABELS.get(button_id, button_id)
