"""Fixed configuration values for create-abp-react.

There is no configuration file and no environment override: every run
scaffolds from the same template with the same toolchain.
"""

from __future__ import annotations

PROGRAM_NAME: str = "create-abp-react"

TEMPLATE_REPO: str = "https://github.com/abpjs/abp-react-template-basic.git"
"""Remote repository whose contents seed every new project."""

DEFAULT_FOLDER_NAME: str = "abp-react-app"

DOCS_URL: str = "https://docs.abpjs.io/docs/"

PACKAGE_MANAGER: str = "pnpm"

VCS_CLIENT: str = "git"

VCS_METADATA_DIR: str = ".git"

PROBE_TIMEOUT_SECONDS: float = 5.0
"""Upper bound on the package-manager availability probe."""

PACKAGE_MANAGER_INSTALL_COMMANDS: tuple[str, ...] = (
    "npm install -g pnpm",
    "corepack enable pnpm",
)

INVALID_FOLDER_CHARS: frozenset[str] = frozenset(
    '<>:"|?*' + "".join(chr(code) for code in range(0x20))
)
"""Characters rejected in folder names on at least one common platform."""
