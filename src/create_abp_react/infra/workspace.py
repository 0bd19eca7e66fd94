"""Local file-system implementation of :class:`~create_abp_react.core.protocols.Workspace`."""

from __future__ import annotations

import shutil
from pathlib import Path

from create_abp_react.constants import VCS_METADATA_DIR
from create_abp_react.exceptions import ToolInvocationError


class LocalWorkspace:
    """Concrete :class:`Workspace` operating on the host file system."""

    def exists(self, path: Path) -> bool:
        """Return ``True`` when *path* exists.

        An ``OSError`` raised by the check itself (e.g. permission denied)
        is reported as ``False``; cloning into that path fails later with
        the real cause.
        """
        try:
            return path.exists()
        except OSError:
            return False

    def strip_vcs_metadata(self, path: Path) -> None:
        """Delete ``<path>/.git`` if present."""
        metadata_dir = path / VCS_METADATA_DIR
        if not metadata_dir.exists():
            return
        try:
            if metadata_dir.is_dir() and not metadata_dir.is_symlink():
                shutil.rmtree(metadata_dir)
            else:
                metadata_dir.unlink()
        except OSError as exc:
            raise ToolInvocationError(
                f"Could not remove {metadata_dir}: {exc}",
            ) from exc
