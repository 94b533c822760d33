"""Domain models for goenv.

Frozen dataclasses only: immutable value objects with no I/O.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ActivationParams:
    """Values substituted into the activation script template."""

    project_name: str
    """Base name of the project directory; exported as ``GOENV``."""

    project_path: str
    """Absolute path of the project directory; the symlink target."""

    go_path: str
    """Absolute path of the environment directory; exported as ``GOPATH``."""

    import_path: str
    """Import path the project is linked under, below ``$GOPATH/src``."""

    def template_fields(self) -> dict[str, str]:
        """Return the values keyed by their template placeholder names."""
        return {
            "ProjectName": self.project_name,
            "ProjectPath": self.project_path,
            "GoPath": self.go_path,
            "ImportPath": self.import_path,
        }
