"""Custom exception hierarchy for create-abp-react.

All exceptions that cross layer boundaries must inherit from
:class:`CreateAbpReactError`.  Raw ``OSError`` and ``subprocess``
exceptions must NEVER propagate beyond the infrastructure layer — they
are caught there and re-raised as :class:`ToolInvocationError`.

Hierarchy
---------
CreateAbpReactError
├── InvalidFolderNameError
├── TargetExistsError
├── PackageManagerNotFoundError
├── ToolInvocationError
└── WorkflowStepError
    ├── TemplateFetchError
    ├── DependencyInstallError
    └── RepositoryInitError
"""

from __future__ import annotations

from collections.abc import Iterable


class CreateAbpReactError(Exception):
    """Base exception for all create-abp-react errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Validation ------------------------------------------------------------

class InvalidFolderNameError(CreateAbpReactError):
    """Raised when the requested folder name is empty or illegal."""


class TargetExistsError(CreateAbpReactError):
    """Raised when the target path is already present on disk."""


# --- Tooling ---------------------------------------------------------------

class PackageManagerNotFoundError(CreateAbpReactError):
    """Raised when the package manager cannot be run."""


class ToolInvocationError(CreateAbpReactError):
    """Raised when an external executable fails or cannot be started."""

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        returncode: int | None = None,
        output: str = "",
    ) -> None:
        super().__init__(message, hint=hint)
        self.returncode: int | None = returncode
        self.output: str = output
        """Captured output of the child process, when it was captured."""


# --- Workflow steps --------------------------------------------------------

class WorkflowStepError(CreateAbpReactError):
    """Raised when a workflow step fails."""


class TemplateFetchError(WorkflowStepError):
    """Raised when the template cannot be cloned or cleaned up."""


class DependencyInstallError(WorkflowStepError):
    """Raised when the package manager fails to install dependencies."""


class RepositoryInitError(WorkflowStepError):
    """Raised when ``git init`` fails.  Never fatal."""


def build_install_hint(tool: str, commands: Iterable[str]) -> str:
    """Render remediation text listing *commands* for installing *tool*."""
    lines = [f"Please install {tool} using one of the following methods:"]
    lines.extend(f"    {cmd}" for cmd in commands)
    lines.append(f"After installing {tool}, please run this command again.")
    return "\n".join(lines)
