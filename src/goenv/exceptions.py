"""Custom exception hierarchy for goenv.

Every failure that reaches the CLI boundary must be a subclass of
:class:`GoenvError`.  Raw ``OSError`` instances are caught in the
infrastructure layer and re-raised as :class:`FilesystemError` with the
operating-system message preserved.

Hierarchy
---------
GoenvError
├── PathExistsError
├── FilesystemError
└── TemplateError
"""

from __future__ import annotations


class GoenvError(Exception):
    """Base exception for all goenv errors.

    The CLI error boundary renders ``str(exc)`` as a single
    ``error: <message>`` line, so messages must not contain newlines.
    """


class PathExistsError(GoenvError):
    """Raised when the target environment path is already occupied."""


class FilesystemError(GoenvError):
    """Raised when a directory, working-directory or file operation fails."""

    @classmethod
    def from_os_error(cls, exc: OSError) -> FilesystemError:
        """Wrap *exc*, keeping the message the OS produced."""
        return cls(str(exc))


class TemplateError(GoenvError):
    """Raised when the activation script template cannot be rendered."""
