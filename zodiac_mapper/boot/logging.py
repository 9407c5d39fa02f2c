"""Console logging for the zodiac-mapper command line.

Only the ``zodiac_mapper`` logger namespace is touched; the root logger and
any handlers installed by a host application are left alone.
"""

from __future__ import annotations

import logging
import os
from typing import IO

__all__ = ["LOG_LEVEL_ENV_VAR", "PACKAGE_LOGGER", "configure_logging", "resolve_level"]

LOG_LEVEL_ENV_VAR = "LOG_LEVEL"
PACKAGE_LOGGER = "zodiac_mapper"

_HANDLER_NAME = "zodiac-mapper-console"
_FORMAT = "%(levelname)s [%(name)s] %(message)s"


def resolve_level(value: str | int | None) -> int:
    """Return the logging level named by ``value``.

    Unknown or empty names resolve to ``WARNING``.
    """

    if isinstance(value, int):
        return value
    name = (value or "").strip().upper()
    return logging.getLevelNamesMapping().get(name, logging.WARNING)


def configure_logging(level: str | int | None = None, *, stream: IO[str] | None = None) -> int:
    """Attach a console handler to the ``zodiac_mapper`` logger.

    ``level`` falls back to ``$LOG_LEVEL``. Calling again replaces the handler
    installed by the previous call. Returns the level applied.
    """

    effective = resolve_level(os.environ.get(LOG_LEVEL_ENV_VAR) if level is None else level)
    logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(logger.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logger.removeHandler(existing)

    handler = logging.StreamHandler(stream)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(effective)
    return effective
