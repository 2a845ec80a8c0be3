"""Desktop entrypoint.

Configures logging once and starts the pyglet window. The log level comes
from ``ASTEROIDS_LOG_LEVEL`` (default INFO).
"""

from __future__ import annotations

import logging

import config


def _configure_logging() -> None:
    level = getattr(logging, config.LOG_LEVEL, logging.INFO)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
    )


def main() -> None:
    _configure_logging()
    from game import main as game_main

    game_main()


if __name__ == "__main__":
    main()
