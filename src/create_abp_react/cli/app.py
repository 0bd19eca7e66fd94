"""CLI application entry point for create-abp-react.

This module is the **sole error boundary** for the entire application.
It catches :class:`~create_abp_react.exceptions.CreateAbpReactError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering a
uniform ``✗ Error:`` line and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — validation and the step sequence are
  delegated to :class:`~create_abp_react.core.workflow.ScaffoldWorkflow`.
* Parsing is permissive: unknown flags and extra positionals are ignored.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Sequence
from pathlib import Path

from create_abp_react.cli import exit_codes
from create_abp_react.cli.reporter import RichReporter, print_help, print_version
from create_abp_react.constants import DEFAULT_FOLDER_NAME, PROGRAM_NAME
from create_abp_react.core.models import InvocationContext
from create_abp_react.core.workflow import ScaffoldWorkflow
from create_abp_react.exceptions import CreateAbpReactError
from create_abp_react.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the argument parser.

    ``--help`` and ``--version`` are plain boolean flags so that both can be
    detected before any validation runs; rendering is done by the reporter.
    """
    parser = argparse.ArgumentParser(
        prog=PROGRAM_NAME,
        description="Create a new ABP React application.",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument("-h", "--help", action="store_true", dest="help")
    parser.add_argument("-v", "--version", action="store_true", dest="version")
    parser.add_argument("folder_name", nargs="?", default=None)
    return parser


_HELP_FLAGS: frozenset[str] = frozenset({"-h", "--help"})
_VERSION_FLAGS: frozenset[str] = frozenset({"-v", "--version"})
_KNOWN_FLAGS: frozenset[str] = _HELP_FLAGS | _VERSION_FLAGS


def _normalize_argv(argv: Sequence[str]) -> list[str]:
    """Reduce *argv* to the tokens the parser is allowed to see.

    Only exact flag spellings survive, and the first token not starting
    with ``-`` is passed after ``--`` so it can never be read as an option.
    Unknown or malformed flags and extra positionals are dropped, so the
    parser never sees a token it would reject.
    """
    flags = [token for token in argv if token in _KNOWN_FLAGS]
    folder = next((token for token in argv if not token.startswith("-")), None)
    if folder is None:
        return flags
    return [*flags, "--", folder]


def parse_arguments(
    argv: Sequence[str],
    *,
    cwd: Path | None = None,
) -> InvocationContext:
    """Turn the raw argument list into an :class:`InvocationContext`.

    The first argument not starting with ``-`` is the folder name; when
    none is given :data:`~create_abp_react.constants.DEFAULT_FOLDER_NAME`
    is used.  The target path is resolved against *cwd* (default: the
    process working directory) without touching the file system.
    """
    args = _build_parser().parse_args(_normalize_argv(argv))

    folder_name: str = DEFAULT_FOLDER_NAME if args.folder_name is None else args.folder_name
    base = cwd if cwd is not None else Path.cwd()
    target_path = Path(os.path.abspath(base / folder_name))

    return InvocationContext(
        folder_name=folder_name,
        target_path=target_path,
        help_requested=args.help,
        version_requested=args.version,
    )


# ---------------------------------------------------------------------------
# Workflow wiring
# ---------------------------------------------------------------------------

def _build_workflow(reporter: RichReporter) -> ScaffoldWorkflow:
    """Instantiate infra adapters and the core workflow."""
    from create_abp_react.infra.tool_runner import SubprocessToolRunner
    from create_abp_react.infra.workspace import LocalWorkspace

    return ScaffoldWorkflow(SubprocessToolRunner(), LocalWorkspace(), reporter)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: Sequence[str] | None = None) -> int:
    """Run the create-abp-react CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    CreateAbpReactError
        On validation failure, a missing package manager, or a failed
        fatal step.  :func:`cli` turns it into exit code 1.
    """
    context = parse_arguments(sys.argv[1:] if argv is None else argv)

    if context.help_requested:
        print_help()
        return exit_codes.SUCCESS

    if context.version_requested:
        print_version(__version__)
        return exit_codes.SUCCESS

    reporter = RichReporter()
    workflow = _build_workflow(reporter)
    workflow.run(context)
    reporter.success(context.folder_name)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def run(argv: Sequence[str] | None = None) -> int:
    """Call :func:`main` and map every failure to an exit code."""
    reporter = RichReporter()
    try:
        return main(argv)
    except CreateAbpReactError as exc:
        reporter.error(exc)
        return exit_codes.GENERAL_ERROR
    except KeyboardInterrupt:
        reporter.interrupted()
        return exit_codes.KEYBOARD_INTERRUPT
    except Exception as exc:  # noqa: BLE001
        reporter.error(exc)
        return exit_codes.GENERAL_ERROR


def cli() -> None:
    """Top-level entry point invoked by the console script.

    Guarantees the process never exits with a raw stack trace during
    normal usage.
    """
    sys.exit(run())
