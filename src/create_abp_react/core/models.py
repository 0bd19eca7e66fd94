"""Domain models for create-abp-react.

All models are **frozen** dataclasses — immutable value objects created
once per run and discarded at process exit.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path


# ---------------------------------------------------------------------------
# Invocation context
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class InvocationContext:
    """Everything a single run needs to know about its arguments."""

    folder_name: str
    """Folder name exactly as given on the command line (or the default)."""

    target_path: Path
    """Absolute path the project is materialised at."""

    help_requested: bool = False

    version_requested: bool = False


# ---------------------------------------------------------------------------
# Workflow step descriptor
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class WorkflowStep:
    """One stage of the scaffolding workflow.

    The orchestrator treats every step the same way; the only difference
    between a fatal and a best-effort step is :attr:`abort_on_failure`.
    """

    name: str
    """Short identifier (``"fetch"``, ``"install"``, …)."""

    action: Callable[[InvocationContext], None]

    start_message: str

    success_message: str

    abort_on_failure: bool = True
    """When ``False`` a failure is reported as a warning and the run goes on."""

    failure_message: str | None = None
    """Prefix used to wrap a fatal failure.

    ``None`` means errors raised by :attr:`action` propagate unchanged.
    """

    warning_message: str | None = None
    """Text shown when a best-effort step fails."""
