"""Application entry point."""

from __future__ import annotations

import logging
import sys

from seabattle.app.controller import GameController
from seabattle.core.fleet import FleetGenerator
from seabattle.infra.app_data import ensure_app_data_dirs
from seabattle.infra.config import AppConfig, WindowMode, load_default_env_files
from seabattle.infra.logging import setup_logging, shutdown_logging

logger = logging.getLogger(__name__)

_WINDOW_SIZE = (1100, 720)


def main() -> int:
    """Run the Sea Battle companion."""
    load_default_env_files()
    config = AppConfig.from_env()
    paths = ensure_app_data_dirs()
    setup_logging(config)
    logger.info("app_data_paths root=%s logs=%s", paths["root"], paths["logs"])

    generator = FleetGenerator(
        max_attempts_per_ship=config.max_attempts_per_ship,
        max_restarts=config.max_restarts,
    )
    controller = GameController(generator)

    from seabattle.qt.bootstrap import create_qt_frontend

    frontend = create_qt_frontend(controller)
    if config.window_mode is WindowMode.FULLSCREEN:
        frontend.window.show_fullscreen()
    elif config.window_mode is WindowMode.MAXIMIZED:
        frontend.window.show_maximized()
    else:
        frontend.window.show_windowed(*_WINDOW_SIZE)
    frontend.window.sync_ui()
    try:
        return frontend.run_event_loop()
    finally:
        shutdown_logging()


if __name__ == "__main__":
    sys.exit(main())
