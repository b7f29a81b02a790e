from __future__ import annotations

import logging
import random

import pytest

from seabattle.app.controller import GameController
from seabattle.core.fleet import FleetGenerator
from seabattle.core.session import GameSession, new_session


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1337)


@pytest.fixture
def generator(seeded_rng: random.Random) -> FleetGenerator:
    return FleetGenerator(seeded_rng)


@pytest.fixture
def session(generator: FleetGenerator) -> GameSession:
    return new_session(generator)


@pytest.fixture
def controller_factory():
    def _make(seed: int = 1337) -> GameController:
        return GameController(FleetGenerator(random.Random(seed)))

    return _make


@pytest.fixture
def restore_root_logging():
    from seabattle.infra.logging import shutdown_logging

    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    shutdown_logging()
    root.handlers[:] = handlers
    root.setLevel(level)
