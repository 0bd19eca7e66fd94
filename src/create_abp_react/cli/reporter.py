"""Console rendering for create-abp-react.

This module owns every user-visible line the tool prints: usage text,
step progress markers, the success banner, and error messages.  It is
used by the CLI layer only — core notifies it through the
:class:`~create_abp_react.core.protocols.WorkflowReporter` protocol.
"""

from __future__ import annotations

from rich.markup import escape

from create_abp_react.cli.console import console, error_console
from create_abp_react.constants import (
    DEFAULT_FOLDER_NAME,
    DOCS_URL,
    PACKAGE_MANAGER,
    PACKAGE_MANAGER_INSTALL_COMMANDS,
    PROGRAM_NAME,
)
from create_abp_react.core.models import WorkflowStep
from create_abp_react.exceptions import CreateAbpReactError, ToolInvocationError


class RichReporter:
    """Rich-backed :class:`WorkflowReporter` plus one-off result rendering."""

    # ------------------------------------------------------------------
    # WorkflowReporter protocol
    # ------------------------------------------------------------------

    def step_started(self, step: WorkflowStep) -> None:
        console.print(f"[blue]{step.start_message}[/blue]")

    def step_succeeded(self, step: WorkflowStep) -> None:
        console.print(f"[green]{step.success_message}[/green]")

    def step_warned(self, step: WorkflowStep, error: Exception) -> None:
        message = step.warning_message or f"⚠ {escape(str(error))}"
        console.print(f"[yellow]{message}[/yellow]")
        cause = error.__cause__
        if isinstance(cause, ToolInvocationError) and cause.output:
            console.print(f"[dim]{escape(cause.output)}[/dim]")

    # ------------------------------------------------------------------
    # Run results
    # ------------------------------------------------------------------

    def success(self, folder_name: str) -> None:
        """Print the final banner with next-step instructions."""
        console.print("\n[green]✓ Project created successfully![/green]\n")
        console.print("[bold]Next steps:[/bold]")
        console.print(f"[cyan]  cd {escape(folder_name)}[/cyan]")
        console.print(f"[cyan]  {PACKAGE_MANAGER} dev[/cyan]\n")
        console.print(f"[dim]For more information, visit: {DOCS_URL}[/dim]\n")

    def error(self, exc: BaseException) -> None:
        """Print a single ``✗ Error:`` line, followed by the hint if any."""
        error_console.print(f"\n[bold red]✗ Error:[/bold red] {escape(str(exc))}")
        hint = exc.hint if isinstance(exc, CreateAbpReactError) else None
        if hint:
            error_console.print(f"[yellow]{escape(hint)}[/yellow]")
        error_console.print()

    def interrupted(self) -> None:
        error_console.print("\n[yellow]Aborted by user.[/yellow]")


# ---------------------------------------------------------------------------
# Help / version
# ---------------------------------------------------------------------------

def print_help() -> None:
    """Print usage text: arguments, examples, requirements, docs link."""
    usage = escape("[folder-name] [--help|-h] [--version|-v]")
    install_hint = " or ".join(PACKAGE_MANAGER_INSTALL_COMMANDS)
    console.print(
        f"\n[bold]{PROGRAM_NAME}[/bold] - Create a new ABP React application\n"
        "\n[bold]Usage:[/bold]\n"
        f"  {PROGRAM_NAME} {usage}\n"
        "\n[bold]Arguments:[/bold]\n"
        f"  folder-name    Name of the folder to create (default: {DEFAULT_FOLDER_NAME})\n"
        "\n[bold]Options:[/bold]\n"
        "  -h, --help     Show this message and exit\n"
        "  -v, --version  Show the version and exit\n"
        "\n[bold]Examples:[/bold]\n"
        f"  {PROGRAM_NAME}\n"
        f"  {PROGRAM_NAME} my-app\n"
        f"  {PROGRAM_NAME} ./my-project\n"
        "\n[bold]Requirements:[/bold]\n"
        "  - git\n"
        f"  - {PACKAGE_MANAGER} (install with: {install_hint})\n"
        "\n[bold]Documentation:[/bold]\n"
        f"  {DOCS_URL}\n",
    )


def print_version(version: str) -> None:
    """Print exactly *version*."""
    console.print(version, markup=False)
