"""Scaffolding workflow — validation, probing, and the ordered step list.

This service is the central orchestrator consumed by the CLI layer.  It
depends on a :class:`~create_abp_react.core.protocols.ToolRunner` and a
:class:`~create_abp_react.core.protocols.Workspace` injected at
construction time, keeping the core free of subprocess and file-system
imports.

Guarantees
----------
* Steps run strictly in order; each one finishes before the next starts.
* A failing step with ``abort_on_failure=True`` stops the run and is
  re-raised as the step's :class:`~create_abp_react.exceptions.WorkflowStepError`.
* A failing step with ``abort_on_failure=False`` is reported to the
  reporter and the run continues.
"""

from __future__ import annotations

from create_abp_react.constants import PACKAGE_MANAGER, PACKAGE_MANAGER_INSTALL_COMMANDS, TEMPLATE_REPO
from create_abp_react.core.models import InvocationContext, WorkflowStep
from create_abp_react.core.protocols import ToolRunner, WorkflowReporter, Workspace
from create_abp_react.core.validation import ensure_target_available, validate_folder_name
from create_abp_react.exceptions import (
    CreateAbpReactError,
    DependencyInstallError,
    PackageManagerNotFoundError,
    RepositoryInitError,
    TemplateFetchError,
    WorkflowStepError,
    build_install_hint,
)

# Wrapping error type per fatal step.
_STEP_ERRORS: dict[str, type[WorkflowStepError]] = {
    "fetch": TemplateFetchError,
    "install": DependencyInstallError,
    "init": RepositoryInitError,
}


class ScaffoldWorkflow:
    """Drives a single scaffolding run from validation to repository init.

    Parameters
    ----------
    runner:
        Any object satisfying the :class:`ToolRunner` protocol.
    workspace:
        Any object satisfying the :class:`Workspace` protocol.
    reporter:
        Receives step progress notifications.
    template_url:
        Repository cloned into the target folder.
    """

    def __init__(
        self,
        runner: ToolRunner,
        workspace: Workspace,
        reporter: WorkflowReporter,
        *,
        template_url: str = TEMPLATE_REPO,
    ) -> None:
        self._runner: ToolRunner = runner
        self._workspace: Workspace = workspace
        self._reporter: WorkflowReporter = reporter
        self._template_url: str = template_url

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def validate(self, context: InvocationContext) -> None:
        """Run the folder-name and target-path checks.

        Raises
        ------
        InvalidFolderNameError
            If the folder name is empty or contains illegal characters.
        TargetExistsError
            If the target path is already present.
        """
        validate_folder_name(context.folder_name)
        ensure_target_available(context.target_path, self._workspace)

    def steps(self) -> tuple[WorkflowStep, ...]:
        """Return the ordered steps executed after validation."""
        return (
            WorkflowStep(
                name="probe",
                action=self._require_package_manager,
                start_message=f"🔍 Checking for {PACKAGE_MANAGER}...",
                success_message=f"✓ {PACKAGE_MANAGER} is available\n",
            ),
            WorkflowStep(
                name="fetch",
                action=self._fetch_template,
                start_message="📦 Fetching template from GitHub...",
                success_message="✓ Template fetched successfully",
                failure_message="Failed to fetch template",
            ),
            WorkflowStep(
                name="install",
                action=self._install_dependencies,
                start_message="📥 Installing dependencies...",
                success_message="✓ Dependencies installed successfully",
                failure_message="Failed to install dependencies",
            ),
            WorkflowStep(
                name="init",
                action=self._init_repository,
                start_message="🔧 Initializing git repository...",
                success_message="✓ Git repository initialized",
                abort_on_failure=False,
                failure_message="Failed to initialize git repository",
                warning_message=(
                    "⚠ Failed to initialize git repository (this is not critical)"
                ),
            ),
        )

    def run(self, context: InvocationContext) -> None:
        """Validate *context* and execute every step in order.

        Raises
        ------
        CreateAbpReactError
            On the first fatal failure; later steps do not run.
        """
        self.validate(context)
        for step in self.steps():
            self._run_step(step, context)

    # ------------------------------------------------------------------
    # Step evaluation
    # ------------------------------------------------------------------

    def _run_step(self, step: WorkflowStep, context: InvocationContext) -> None:
        self._reporter.step_started(step)
        try:
            step.action(context)
        except Exception as exc:
            error = self._wrap(step, exc)
            if step.abort_on_failure:
                if error is exc:
                    raise
                raise error from exc
            self._reporter.step_warned(step, error)
            return
        self._reporter.step_succeeded(step)

    @staticmethod
    def _wrap(step: WorkflowStep, exc: Exception) -> CreateAbpReactError:
        """Translate *exc* into the error reported for *step*."""
        if step.failure_message is None:
            if isinstance(exc, CreateAbpReactError):
                return exc
            return CreateAbpReactError(f"Unexpected error during {step.name}: {exc}")
        error_type = _STEP_ERRORS.get(step.name, WorkflowStepError)
        hint = exc.hint if isinstance(exc, CreateAbpReactError) else None
        wrapped = error_type(f"{step.failure_message}: {exc}", hint=hint)
        wrapped.__cause__ = exc
        return wrapped

    # ------------------------------------------------------------------
    # Step actions
    # ------------------------------------------------------------------

    def _require_package_manager(self, context: InvocationContext) -> None:
        if not self._runner.probe():
            raise PackageManagerNotFoundError(
                f"{PACKAGE_MANAGER} is required but not found.",
                hint=build_install_hint(PACKAGE_MANAGER, PACKAGE_MANAGER_INSTALL_COMMANDS),
            )

    def _fetch_template(self, context: InvocationContext) -> None:
        self._runner.clone(self._template_url, context.target_path)
        self._workspace.strip_vcs_metadata(context.target_path)

    def _install_dependencies(self, context: InvocationContext) -> None:
        self._runner.install(context.target_path)

    def _init_repository(self, context: InvocationContext) -> None:
        self._runner.init(context.target_path)
