import logging
import random

import numpy as np
import pytest

from seabattle.core.errors import PlacementExhausted
from seabattle.core.fleet import (
    FALLBACK_LAYOUT,
    FleetGenerator,
    fallback_grid,
    is_fleet_complete,
    next_ship_size,
    remaining_roster,
    validate_fleet,
)
from seabattle.core.grid import Grid, is_straight_run
from seabattle.core.models import FLEET_ROSTER, Coord, Orientation, ShipPlacement, neighbours


class _AlwaysCornerRandom(random.Random):
    """Offers only the bottom-right corner, where a long ship never fits."""

    def choice(self, seq):
        return seq[0]

    def randrange(self, *args, **kwargs):
        return 9


@pytest.mark.parametrize("seed", range(25))
def test_generated_grid_satisfies_placement_rules(seed: int) -> None:
    grid = FleetGenerator(random.Random(seed)).generate()

    assert grid.ship_cell_count() == 20
    groups = grid.ship_groups()
    assert sorted(len(group) for group in groups) == sorted(FLEET_ROSTER)
    for group in groups:
        assert is_straight_run(group)
        members = set(group)
        for cell in group:
            for near in neighbours(cell):
                assert near in members or not grid.is_occupied(near)
    assert validate_fleet(grid) == (True, "")


def test_generate_replaces_layout_each_call(generator: FleetGenerator) -> None:
    first = generator.generate()
    second = generator.generate()
    assert first is not second
    assert validate_fleet(first)[0]
    assert validate_fleet(second)[0]


def test_same_seed_gives_same_layout() -> None:
    a = FleetGenerator(random.Random(42)).generate()
    b = FleetGenerator(random.Random(42)).generate()
    assert np.array_equal(a.cells, b.cells)


def test_fallback_layout_is_valid() -> None:
    grid = fallback_grid()
    assert validate_fleet(grid) == (True, "")
    assert sorted(p.size for p in FALLBACK_LAYOUT) == sorted(FLEET_ROSTER)


def test_exhausted_generator_returns_fallback(caplog) -> None:
    generator = FleetGenerator(_AlwaysCornerRandom(), max_attempts_per_ship=3, max_restarts=2)
    with caplog.at_level(logging.DEBUG, logger="seabattle.core.fleet"):
        grid = generator.generate()

    assert np.array_equal(grid.cells, fallback_grid().cells)
    messages = [record.getMessage() for record in caplog.records]
    assert sum("fleet_restart" in message for message in messages) == 2
    assert any("fleet_fallback_layout" in message for message in messages)


def test_exhausted_pass_restarts_from_empty_grid(monkeypatch, caplog) -> None:
    generator = FleetGenerator(random.Random(5))
    original = FleetGenerator._place_all
    calls = {"count": 0}

    def flaky(self):
        calls["count"] += 1
        if calls["count"] == 1:
            raise PlacementExhausted(4, 500)
        return original(self)

    monkeypatch.setattr(FleetGenerator, "_place_all", flaky)
    with caplog.at_level(logging.DEBUG, logger="seabattle.core.fleet"):
        grid = generator.generate()

    assert calls["count"] == 2
    assert validate_fleet(grid)[0]
    assert any("fleet_restart attempt=1" in record.getMessage() for record in caplog.records)


def test_random_spot_raises_after_cap() -> None:
    generator = FleetGenerator(_AlwaysCornerRandom(), max_attempts_per_ship=4)
    with pytest.raises(PlacementExhausted) as exc_info:
        generator._random_spot(Grid(), 4)
    assert exc_info.value.attempts == 4


def test_generator_rejects_non_positive_caps() -> None:
    with pytest.raises(ValueError):
        FleetGenerator(max_attempts_per_ship=0)
    with pytest.raises(ValueError):
        FleetGenerator(max_restarts=0)


def test_validate_fleet_rejects_wrong_cell_count() -> None:
    grid = Grid()
    grid.place_ship(ShipPlacement(4, Coord(0, 0), Orientation.HORIZONTAL))
    valid, reason = validate_fleet(grid)
    assert not valid
    assert "exactly 20 cells" in reason


def test_validate_fleet_rejects_touching_ships() -> None:
    grid = fallback_grid()
    grid.cells[0, 4] = True
    grid.cells[4, 9] = False
    valid, reason = validate_fleet(grid)
    assert not valid


def test_validate_fleet_rejects_diagonal_contact() -> None:
    grid = fallback_grid()
    grid.cells[4, 9] = False
    grid.cells[1, 8] = True
    valid, reason = validate_fleet(grid)
    assert not valid
    assert "touch" in reason


def test_validate_fleet_rejects_wrong_roster() -> None:
    grid = Grid()
    for row in (0, 2, 4, 6, 8):
        grid.place_ship(ShipPlacement(4, Coord(row, 0), Orientation.HORIZONTAL))
    valid, reason = validate_fleet(grid)
    assert not valid
    assert "roster" in reason


def test_remaining_roster_tracks_manual_placement() -> None:
    grid = Grid()
    assert remaining_roster(grid) == list(FLEET_ROSTER)
    assert next_ship_size(grid) == 4

    grid.place_ship(ShipPlacement(4, Coord(0, 0), Orientation.HORIZONTAL))
    grid.place_ship(ShipPlacement(1, Coord(9, 9), Orientation.HORIZONTAL))
    assert remaining_roster(grid) == [3, 3, 2, 2, 2, 1, 1, 1]
    assert next_ship_size(grid) == 3
    assert not is_fleet_complete(grid)

    assert next_ship_size(fallback_grid()) is None
    assert is_fleet_complete(fallback_grid())
