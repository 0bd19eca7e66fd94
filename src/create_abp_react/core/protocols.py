"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — so the whole workflow can run against test doubles
without touching the network, the file system, or child processes.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from create_abp_react.core.models import WorkflowStep


class ToolRunner(Protocol):
    """Contract for the external executables the workflow shells out to.

    Implementations must map every backend-specific failure to a
    :class:`~create_abp_react.exceptions.CreateAbpReactError` subclass,
    except :meth:`probe`, which reports availability as a plain boolean.
    """

    def probe(self) -> bool:
        """Return ``True`` when the package manager is present and runnable."""
        ...  # pragma: no cover

    def clone(self, url: str, dest: Path) -> None:
        """Clone *url* into *dest*.

        Raises
        ------
        ToolInvocationError
            When the clone exits non-zero or cannot be started.
        """
        ...  # pragma: no cover

    def install(self, cwd: Path) -> None:
        """Install the project's dependencies with *cwd* as working directory.

        Raises
        ------
        ToolInvocationError
            When the install exits non-zero or cannot be started.
        """
        ...  # pragma: no cover

    def init(self, cwd: Path) -> None:
        """Create an empty repository in *cwd*.

        Raises
        ------
        ToolInvocationError
            When the init exits non-zero or cannot be started.
        """
        ...  # pragma: no cover


class Workspace(Protocol):
    """Contract for the file-system operations the workflow performs."""

    def exists(self, path: Path) -> bool:
        """Return ``True`` when *path* is present (file or directory)."""
        ...  # pragma: no cover

    def strip_vcs_metadata(self, path: Path) -> None:
        """Remove the version-control metadata directory below *path*."""
        ...  # pragma: no cover


class WorkflowReporter(Protocol):
    """Receives progress notifications from the workflow orchestrator."""

    def step_started(self, step: WorkflowStep) -> None:
        ...  # pragma: no cover

    def step_succeeded(self, step: WorkflowStep) -> None:
        ...  # pragma: no cover

    def step_warned(self, step: WorkflowStep, error: Exception) -> None:
        """Called when a best-effort step fails and the run continues."""
        ...  # pragma: no cover
