"""Exit-code constants used by the CLI layer.

Every failure, including a usage error, exits with :data:`GENERAL_ERROR`;
callers cannot tell error kinds apart by status.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Environment created."""

GENERAL_ERROR: int = 1
"""Usage shown, or provisioning failed and ``error: …`` was printed."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""
