"""Tests for the subprocess-backed tool runner (infra/tool_runner.py).

All tests mock :func:`subprocess.run` and :func:`shutil.which` — neither
git nor pnpm is ever executed.

Coverage:
* Probe success, non-zero exit, timeout, missing executable.
* Probe is time-bounded; other calls are not.
* Clone/install stream output; init captures it.
* Non-zero exits and ``OSError`` map to ``ToolInvocationError``.
"""

from __future__ import annotations

import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from create_abp_react.constants import PROBE_TIMEOUT_SECONDS
from create_abp_react.exceptions import ToolInvocationError
from create_abp_react.infra.tool_runner import SubprocessToolRunner, _resolve


def _completed(returncode: int = 0, stdout: str = "", stderr: str = "") -> subprocess.CompletedProcess[str]:
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr=stderr)


# ---------------------------------------------------------------------------
# Executable resolution
# ---------------------------------------------------------------------------

class TestResolve:
    @patch("create_abp_react.infra.tool_runner.shutil.which", return_value="/usr/bin/git")
    def test_found(self, _mock_which: MagicMock) -> None:
        assert _resolve("git") == "/usr/bin/git"

    @patch("create_abp_react.infra.tool_runner.shutil.which", return_value=None)
    def test_missing_keeps_bare_name(self, _mock_which: MagicMock) -> None:
        assert _resolve("pnpm") == "pnpm"


# ---------------------------------------------------------------------------
# probe
# ---------------------------------------------------------------------------

@patch("create_abp_react.infra.tool_runner.shutil.which", return_value=None)
class TestProbe:
    @patch("create_abp_react.infra.tool_runner.subprocess.run")
    def test_available(self, mock_run: MagicMock, _mock_which: MagicMock) -> None:
        mock_run.return_value = _completed(0, stdout="9.1.0\n")
        assert SubprocessToolRunner().probe() is True

        args, kwargs = mock_run.call_args
        assert args[0] == ["pnpm", "--version"]
        assert kwargs["timeout"] == PROBE_TIMEOUT_SECONDS
        assert kwargs["capture_output"] is True

    @patch("create_abp_react.infra.tool_runner.subprocess.run")
    def test_non_zero_exit(self, mock_run: MagicMock, _mock_which: MagicMock) -> None:
        mock_run.return_value = _completed(1)
        assert SubprocessToolRunner().probe() is False

    @patch("create_abp_react.infra.tool_runner.subprocess.run")
    def test_timeout(self, mock_run: MagicMock, _mock_which: MagicMock) -> None:
        mock_run.side_effect = subprocess.TimeoutExpired(cmd="pnpm", timeout=5)
        assert SubprocessToolRunner().probe() is False

    @patch("create_abp_react.infra.tool_runner.subprocess.run")
    def test_executable_missing(self, mock_run: MagicMock, _mock_which: MagicMock) -> None:
        mock_run.side_effect = FileNotFoundError("pnpm")
        assert SubprocessToolRunner().probe() is False

    @patch("create_abp_react.infra.tool_runner.subprocess.run")
    def test_custom_timeout(self, mock_run: MagicMock, _mock_which: MagicMock) -> None:
        mock_run.return_value = _completed(0)
        SubprocessToolRunner(probe_timeout=1.5).probe()
        assert mock_run.call_args.kwargs["timeout"] == 1.5


# ---------------------------------------------------------------------------
# clone / install / init
# ---------------------------------------------------------------------------

@patch("create_abp_react.infra.tool_runner.shutil.which", return_value=None)
class TestCommands:
    @patch("create_abp_react.infra.tool_runner.subprocess.run")
    def test_clone_streams_output(self, mock_run: MagicMock, _mock_which: MagicMock) -> None:
        mock_run.return_value = _completed(0)
        dest = Path("/work/my-app")

        SubprocessToolRunner().clone("https://example.com/t.git", dest)

        args, kwargs = mock_run.call_args
        assert args[0] == ["git", "clone", "https://example.com/t.git", str(dest)]
        assert kwargs["capture_output"] is False
        assert "timeout" not in kwargs

    @patch("create_abp_react.infra.tool_runner.subprocess.run")
    def test_install_runs_in_target(self, mock_run: MagicMock, _mock_which: MagicMock) -> None:
        mock_run.return_value = _completed(0)
        cwd = Path("/work/my-app")

        SubprocessToolRunner().install(cwd)

        args, kwargs = mock_run.call_args
        assert args[0] == ["pnpm", "install"]
        assert kwargs["cwd"] == cwd
        assert kwargs["capture_output"] is False

    @patch("create_abp_react.infra.tool_runner.subprocess.run")
    def test_init_captures_output(self, mock_run: MagicMock, _mock_which: MagicMock) -> None:
        mock_run.return_value = _completed(0, stdout="Initialized empty Git repository")
        cwd = Path("/work/my-app")

        SubprocessToolRunner().init(cwd)

        args, kwargs = mock_run.call_args
        assert args[0] == ["git", "init"]
        assert kwargs["cwd"] == cwd
        assert kwargs["capture_output"] is True

    @patch("create_abp_react.infra.tool_runner.subprocess.run")
    def test_non_zero_exit_raises(self, mock_run: MagicMock, _mock_which: MagicMock) -> None:
        mock_run.return_value = _completed(128)

        with pytest.raises(ToolInvocationError, match="exit code 128: git clone") as exc_info:
            SubprocessToolRunner().clone("https://example.com/t.git", Path("/work/x"))
        assert exc_info.value.returncode == 128
        assert exc_info.value.output == ""

    @patch("create_abp_react.infra.tool_runner.subprocess.run")
    def test_captured_output_kept_on_failure(
        self, mock_run: MagicMock, _mock_which: MagicMock,
    ) -> None:
        mock_run.return_value = _completed(1, stderr="fatal: permission denied\n")

        with pytest.raises(ToolInvocationError) as exc_info:
            SubprocessToolRunner().init(Path("/work/x"))
        assert exc_info.value.output == "fatal: permission denied"

    @patch("create_abp_react.infra.tool_runner.subprocess.run")
    def test_os_error_wrapped(self, mock_run: MagicMock, _mock_which: MagicMock) -> None:
        original = FileNotFoundError(2, "No such file or directory", "git")
        mock_run.side_effect = original

        with pytest.raises(ToolInvocationError, match="Could not run 'git init'") as exc_info:
            SubprocessToolRunner().init(Path("/work/x"))
        assert exc_info.value.__cause__ is original
        assert exc_info.value.hint is not None
        assert "git" in exc_info.value.hint

    @patch("create_abp_react.infra.tool_runner.subprocess.run")
    def test_resolved_path_is_used(self, mock_run: MagicMock, _mock_which: MagicMock) -> None:
        _mock_which.return_value = "C:\\tools\\pnpm.cmd"
        mock_run.return_value = _completed(0)

        SubprocessToolRunner().install(Path("/work/x"))

        assert mock_run.call_args.args[0] == ["C:\\tools\\pnpm.cmd", "install"]
