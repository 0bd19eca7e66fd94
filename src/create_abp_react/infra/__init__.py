"""Infrastructure layer — external system integration.

This layer wraps all interaction with ``git``, ``pnpm``, and the host
file system.  Every raw ``OSError`` must be caught here and re-raised as
a :class:`~create_abp_react.exceptions.CreateAbpReactError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from create_abp_react.infra.tool_runner import SubprocessToolRunner
from create_abp_react.infra.workspace import LocalWorkspace

__all__: list[str] = [
    "LocalWorkspace",
    "SubprocessToolRunner",
]
