"""Folder-name and target-path validation.

Both checks run before any external tool is invoked.  The folder-name
check is a pure function; the target check consults the injected
:class:`~create_abp_react.core.protocols.Workspace`.
"""

from __future__ import annotations

from pathlib import Path

from create_abp_react.constants import INVALID_FOLDER_CHARS
from create_abp_react.core.protocols import Workspace
from create_abp_react.exceptions import InvalidFolderNameError, TargetExistsError


def validate_folder_name(folder_name: str) -> None:
    """Raise :class:`InvalidFolderNameError` if *folder_name* is unusable.

    A name is rejected when it is empty, whitespace-only, or contains any
    of ``< > : " | ? *`` or an ASCII control character.
    """
    if not folder_name or not folder_name.strip():
        raise InvalidFolderNameError("Folder name cannot be empty")

    if any(char in INVALID_FOLDER_CHARS for char in folder_name):
        raise InvalidFolderNameError(
            f"Folder name contains invalid characters: {folder_name}",
            hint='Avoid < > : " | ? * and control characters.',
        )


def ensure_target_available(target_path: Path, workspace: Workspace) -> None:
    """Raise :class:`TargetExistsError` if *target_path* already exists.

    The workspace answers ``False`` when the existence test itself fails
    (e.g. permission denied); such errors are left for the fetch step to
    surface.
    """
    if workspace.exists(target_path):
        raise TargetExistsError(
            f'Folder "{target_path}" already exists. Please choose a '
            "different name or remove the existing folder."
        )
