"""Subprocess-backed implementation of :class:`~create_abp_react.core.protocols.ToolRunner`.

This module is the **only** place in the codebase that starts child
processes.  Every ``OSError`` and non-zero exit is caught here and
re-raised as :class:`~create_abp_react.exceptions.ToolInvocationError`.

Rules
-----
* Executables are located via :func:`shutil.which` so Windows ``.cmd``
  shims resolve without ``shell=True``.
* Only the availability probe is time-bounded; every other call waits
  for the tool to finish.
* No ``print()`` — streamed calls inherit the parent's stdio.
"""

from __future__ import annotations

import shutil
import subprocess
from collections.abc import Sequence
from pathlib import Path

from create_abp_react.constants import PACKAGE_MANAGER, PROBE_TIMEOUT_SECONDS, VCS_CLIENT
from create_abp_react.exceptions import ToolInvocationError


class SubprocessToolRunner:
    """Concrete :class:`ToolRunner` that shells out to ``git`` and ``pnpm``.

    This class satisfies the :class:`~create_abp_react.core.protocols.ToolRunner`
    protocol structurally — no explicit inheritance required.
    """

    def __init__(
        self,
        *,
        vcs_client: str = VCS_CLIENT,
        package_manager: str = PACKAGE_MANAGER,
        probe_timeout: float = PROBE_TIMEOUT_SECONDS,
    ) -> None:
        self._vcs_client: str = vcs_client
        self._package_manager: str = package_manager
        self._probe_timeout: float = probe_timeout

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def probe(self) -> bool:
        """Run ``<package-manager> --version`` and report whether it succeeded.

        Non-zero exit, timeout, and a missing executable all count as
        unavailable.
        """
        command = [_resolve(self._package_manager), "--version"]
        try:
            completed = subprocess.run(
                command,
                capture_output=True,
                text=True,
                timeout=self._probe_timeout,
                check=False,
            )
        except (OSError, subprocess.TimeoutExpired):
            return False
        return completed.returncode == 0

    def clone(self, url: str, dest: Path) -> None:
        """Run ``git clone <url> <dest>`` with output streamed to the console."""
        self._run([self._vcs_client, "clone", url, str(dest)])

    def install(self, cwd: Path) -> None:
        """Run ``pnpm install`` inside *cwd* with output streamed."""
        self._run([self._package_manager, "install"], cwd=cwd)

    def init(self, cwd: Path) -> None:
        """Run ``git init`` inside *cwd* with output captured."""
        self._run([self._vcs_client, "init"], cwd=cwd, capture=True)

    # ------------------------------------------------------------------
    # Process execution
    # ------------------------------------------------------------------

    @staticmethod
    def _run(
        args: Sequence[str],
        *,
        cwd: Path | None = None,
        capture: bool = False,
    ) -> None:
        """Run *args* to completion, raising on any failure.

        Raises
        ------
        ToolInvocationError
            When the executable cannot be started or exits non-zero.
        """
        display = " ".join(args)
        command = [_resolve(args[0]), *args[1:]]
        try:
            completed = subprocess.run(
                command,
                cwd=cwd,
                capture_output=capture,
                text=True,
                check=False,
            )
        except OSError as exc:
            raise ToolInvocationError(
                f"Could not run '{display}': {exc}",
                hint=f"Make sure {args[0]} is installed and on PATH.",
            ) from exc

        if completed.returncode != 0:
            output = ""
            if capture:
                output = "\n".join(
                    part.strip() for part in (completed.stdout, completed.stderr) if part
                )
            raise ToolInvocationError(
                f"Command failed with exit code {completed.returncode}: {display}",
                returncode=completed.returncode,
                output=output,
            )


def _resolve(executable: str) -> str:
    """Return the absolute path of *executable* on PATH, or the bare name."""
    return shutil.which(executable) or executable
