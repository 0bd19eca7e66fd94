"""Shared pytest fixtures and configuration for the create-abp-react test suite.

Guidelines
----------
* No internet access in any test.
* ``git`` and ``pnpm`` are never executed — subprocess is mocked at the
  infra boundary, and the workflow runs against the doubles below.
* Core tests must be pure — no side effects.
* Tests that touch the file system use ``tmp_path``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import pytest

from create_abp_react.constants import VCS_METADATA_DIR
from create_abp_react.core.models import WorkflowStep
from create_abp_react.exceptions import ToolInvocationError


# ---------------------------------------------------------------------------
# Test doubles
# ---------------------------------------------------------------------------

@dataclass
class RecordingToolRunner:
    """:class:`ToolRunner` double that records calls and returns canned results.

    Set ``available=False`` to simulate a missing package manager, or put
    an exception into ``failures[<method>]`` to make that call raise.
    When ``materialize`` is true, ``clone`` creates the destination with a
    ``.git`` directory and ``init`` recreates ``.git``, so tests can drive
    a real :class:`LocalWorkspace`.
    """

    available: bool = True
    materialize: bool = False
    failures: dict[str, Exception] = field(default_factory=dict)
    calls: list[tuple[str, ...]] = field(default_factory=list)

    def _record(self, *call: str) -> None:
        self.calls.append(call)
        failure = self.failures.get(call[0])
        if failure is not None:
            raise failure

    def probe(self) -> bool:
        self.calls.append(("probe",))
        return self.available

    def clone(self, url: str, dest: Path) -> None:
        self._record("clone", url, str(dest))
        if self.materialize:
            (dest / VCS_METADATA_DIR).mkdir(parents=True)
            (dest / "package.json").write_text('{"name": "template"}\n')

    def install(self, cwd: Path) -> None:
        self._record("install", str(cwd))
        if self.materialize:
            (cwd / "node_modules").mkdir()

    def init(self, cwd: Path) -> None:
        self._record("init", str(cwd))
        if self.materialize:
            (cwd / VCS_METADATA_DIR).mkdir()

    @property
    def names(self) -> list[str]:
        return [call[0] for call in self.calls]


@dataclass
class InMemoryWorkspace:
    """:class:`Workspace` double backed by a set of existing paths."""

    existing: set[Path] = field(default_factory=set)
    stripped: list[Path] = field(default_factory=list)
    strip_error: Exception | None = None

    def exists(self, path: Path) -> bool:
        return path in self.existing

    def strip_vcs_metadata(self, path: Path) -> None:
        if self.strip_error is not None:
            raise self.strip_error
        self.stripped.append(path)


@dataclass
class RecordingReporter:
    """:class:`WorkflowReporter` double collecting ``(event, step)`` pairs."""

    events: list[tuple[str, str]] = field(default_factory=list)
    warnings: list[Exception] = field(default_factory=list)

    def step_started(self, step: WorkflowStep) -> None:
        self.events.append(("started", step.name))

    def step_succeeded(self, step: WorkflowStep) -> None:
        self.events.append(("succeeded", step.name))

    def step_warned(self, step: WorkflowStep, error: Exception) -> None:
        self.events.append(("warned", step.name))
        self.warnings.append(error)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def runner() -> RecordingToolRunner:
    return RecordingToolRunner()


@pytest.fixture
def workspace() -> InMemoryWorkspace:
    return InMemoryWorkspace()


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def init_failure() -> ToolInvocationError:
    return ToolInvocationError(
        "Command failed with exit code 128: git init",
        returncode=128,
        output="fatal: cannot create repository",
    )
