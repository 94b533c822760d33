"""Filesystem layout and permission constants for a goenv environment."""

from __future__ import annotations

BIN_DIR_NAME: str = "bin"
"""Directory inside the environment that is prepended to ``PATH``."""

ACTIVATE_SCRIPT_NAME: str = "activate"
"""File name of the generated script inside :data:`BIN_DIR_NAME`."""

DIR_MODE: int = 0o755
"""Mode for the environment directory and its ``bin`` directory."""

SCRIPT_MODE: int = 0o744
"""Mode for the activation script: owner read/write/execute, others read."""

LOG_LEVEL_ENV_VAR: str = "GOENV_LOG_LEVEL"
"""Environment variable naming the logging level (``DEBUG``, ``INFO``…)."""
