"""goenv — isolated GOPATH workspaces for Go projects.

Creates an environment directory holding a ``bin/activate`` script that,
once sourced, points ``GOPATH`` at the environment and links the current
project into it under its import path.
"""

from goenv.version import __version__

__all__: list[str] = ["__version__"]
