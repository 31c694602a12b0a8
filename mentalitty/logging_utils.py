from __future__ import annotations

import logging

from .config import LOG_LEVEL_ENV

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(*, level: str | None = None) -> None:
    """Configure root logging for the runtime.

    ``level`` falls back to WARNING; ``GameConfig.from_env`` resolves it from
    the environment before it gets here.
    """

    level = (level or "WARNING").upper()
    if logging.getLevelName(level) == f"Level {level}":
        raise ValueError(f"{LOG_LEVEL_ENV} must be a logging level name, got {level!r}")

    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig(level=level, format=_FORMAT)
    root_logger.setLevel(level)
