"""Shared pytest fixtures and configuration for the goenv test suite.

Guidelines
----------
* Every filesystem effect happens below ``tmp_path``.
* The working directory is switched with ``monkeypatch.chdir`` only.
* Tests must not depend on the developer's shell environment.
"""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A project directory that is also the current working directory."""
    project = tmp_path / "proj"
    project.mkdir()
    monkeypatch.chdir(project)
    return project


@pytest.fixture
def env_path(tmp_path: Path) -> Path:
    """A not-yet-existing environment path."""
    return tmp_path / "env"
