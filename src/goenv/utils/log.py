"""Logging setup for the goenv CLI."""

from __future__ import annotations

import logging
import os

from goenv.utils.constants import LOG_LEVEL_ENV_VAR

LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def resolve_log_level(value: str | None) -> int:
    """Map a level name such as ``"debug"`` to its :mod:`logging` value.

    Missing or unknown names resolve to ``logging.WARNING``.
    """
    if not value:
        return logging.WARNING
    level = logging.getLevelName(value.strip().upper())
    if isinstance(level, int):
        return level
    return logging.WARNING


def configure_logging() -> None:
    """Configure root logging from ``GOENV_LOG_LEVEL``.

    Records go to stderr so stdout stays reserved for the usage text.
    """
    logging.basicConfig(
        format=LOG_FORMAT,
        level=resolve_log_level(os.environ.get(LOG_LEVEL_ENV_VAR)),
    )
