"""Core layer — pure data and text transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem I/O.
* No imports from ``cli`` or ``infra``.
"""

from goenv.core.activate_script import ACTIVATE_TEMPLATE, render_activate_script
from goenv.core.models import ActivationParams

__all__: list[str] = [
    "ACTIVATE_TEMPLATE",
    "ActivationParams",
    "render_activate_script",
]
