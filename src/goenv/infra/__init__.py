"""Infrastructure layer — filesystem side effects.

Every ``OSError`` raised here is re-raised as
:class:`~goenv.exceptions.FilesystemError`.

Rules
-----
* No imports from ``cli``.
* No user-facing output; diagnostics go through :mod:`logging`.
"""

from goenv.infra.provisioner import init_env, rollback

__all__: list[str] = [
    "init_env",
    "rollback",
]
