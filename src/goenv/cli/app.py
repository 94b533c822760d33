"""CLI application entry point for goenv.

This module is the **sole error boundary** for the entire application.
It catches :class:`~goenv.exceptions.GoenvError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, prints a single ``error: …`` line and
returns a well-defined exit code.

Argument handling is a positional count check only: anything other than
exactly ``ENVPATH IMPORT`` prints the usage text to stdout and exits
with status 1, ``--help`` included.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from goenv.cli import exit_codes
from goenv.cli.console import console
from goenv.exceptions import GoenvError, PathExistsError
from goenv.infra.provisioner import init_env, rollback
from goenv.utils.log import configure_logging
from goenv.version import __version__

logger = logging.getLogger(__name__)

USAGE: str = f"""usage: goenv ENVPATH IMPORT

Create a new isolated development environment for Go.

Version: {__version__}

Arguments:

    ENVPATH     Path where a new Go environment should be initialized. This
                value will be set to the GOPATH variable.

    IMPORT      Project import path. Example: github.com/author/projectname

Options:

    --help      Print this message and exit.
"""


def _is_help_required(args: Sequence[str]) -> bool:
    """Return ``True`` unless exactly ``ENVPATH IMPORT`` was given.

    A lone ``--help`` is one argument, so it lands here as well.
    """
    return len(args) != 2


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: Sequence[str] | None = None) -> int:
    """Run the goenv CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    GoenvError
        When provisioning fails.  A partially created environment has
        already been removed; a pre-existing path is left untouched.
    """
    args = list(sys.argv[1:] if argv is None else argv)

    if _is_help_required(args):
        print(USAGE)
        return exit_codes.GENERAL_ERROR

    env_path, import_path = args
    try:
        init_env(env_path, import_path)
    except PathExistsError:
        raise
    except BaseException:
        if rollback(env_path):
            logger.info("Removed partially initialized environment %s", env_path)
        raise

    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    configure_logging()
    try:
        code = main()
        sys.exit(code)
    except GoenvError as exc:
        console.error(str(exc))
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.notice("Aborted by user.")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        logger.debug("Unexpected error", exc_info=True)
        console.error(str(exc))
        sys.exit(exit_codes.GENERAL_ERROR)
