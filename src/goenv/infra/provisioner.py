"""Infrastructure: create a goenv environment on disk.

:func:`init_env` performs the provisioning sequence and :func:`rollback`
removes a half-created environment.  The two are deliberately separate
steps; a crash between them leaves partial state behind.

Two invocations racing on the same path are not serialised: both may
pass the existence check, and the later writer overwrites the script.
"""

from __future__ import annotations

import logging
import os
import shutil

from goenv.core.activate_script import render_activate_script
from goenv.core.models import ActivationParams
from goenv.exceptions import FilesystemError, PathExistsError
from goenv.utils.constants import (
    ACTIVATE_SCRIPT_NAME,
    BIN_DIR_NAME,
    DIR_MODE,
    SCRIPT_MODE,
)

logger = logging.getLogger(__name__)

PATH_EXISTS_MESSAGE: str = "unable to initialize new environment, path exists"


def init_env(env_path: str, import_path: str) -> ActivationParams:
    """Create the environment at *env_path* for the project in the cwd.

    Parameters
    ----------
    env_path:
        Directory to create.  Must not exist in any form.
    import_path:
        Import path the project is linked under.  Used verbatim.

    Returns
    -------
    ActivationParams
        The values rendered into ``bin/activate``.

    Raises
    ------
    PathExistsError
        When *env_path* already exists.  Nothing is created.
    FilesystemError
        When a directory, the cwd lookup, or the script write fails.
    TemplateError
        When the activation template cannot be rendered.
    """
    if os.path.lexists(env_path):
        logger.debug("Refusing to initialize %s: path exists", env_path)
        raise PathExistsError(PATH_EXISTS_MESSAGE)

    bin_dir = os.path.join(env_path, BIN_DIR_NAME)
    _make_dir(env_path)
    _make_dir(bin_dir)

    try:
        project_path = os.getcwd()
        go_path = os.path.abspath(env_path)
    except OSError as exc:
        raise FilesystemError.from_os_error(exc) from exc
    logger.debug("Project %s, GOPATH %s", project_path, go_path)

    params = ActivationParams(
        project_name=os.path.basename(project_path),
        project_path=project_path,
        go_path=go_path,
        import_path=import_path,
    )
    script = render_activate_script(params)
    logger.debug("Rendered activation script for import path %s", import_path)

    script_path = os.path.join(bin_dir, ACTIVATE_SCRIPT_NAME)
    try:
        with open(script_path, "w", encoding="utf-8", newline="\n") as fh:
            fh.write(script)
        os.chmod(script_path, SCRIPT_MODE)
    except OSError as exc:
        raise FilesystemError.from_os_error(exc) from exc

    logger.debug("Wrote %s for project %s", script_path, project_path)
    return params


def rollback(env_path: str) -> bool:
    """Remove *env_path* if it exists, ignoring removal errors.

    Returns ``True`` when something was found at *env_path*.
    """
    if not os.path.lexists(env_path):
        return False

    logger.debug("Rolling back %s", env_path)
    if os.path.isdir(env_path) and not os.path.islink(env_path):
        shutil.rmtree(env_path, ignore_errors=True)
    else:
        try:
            os.remove(env_path)
        except OSError as exc:
            logger.debug("Rollback of %s failed: %s", env_path, exc)
    return True


def _make_dir(path: str) -> None:
    """Create *path* and any missing parents, each with :data:`DIR_MODE`."""
    try:
        current = os.path.abspath(path)
    except OSError as exc:
        raise FilesystemError.from_os_error(exc) from exc

    missing: list[str] = []
    while not os.path.isdir(current):
        missing.append(current)
        parent = os.path.dirname(current)
        if parent == current:
            break
        current = parent

    for directory in reversed(missing):
        try:
            os.mkdir(directory, DIR_MODE)
        except FileExistsError as exc:
            # Lost a race with another creator; only a directory will do.
            if os.path.isdir(directory):
                continue
            raise FilesystemError.from_os_error(exc) from exc
        except OSError as exc:
            raise FilesystemError.from_os_error(exc) from exc
        logger.debug("Created directory %s", directory)
