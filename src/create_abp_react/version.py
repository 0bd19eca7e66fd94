"""Version of the installed ``create-abp-react`` distribution.

The value is read from packaging metadata at import time so that
``pyproject.toml`` remains the single source of truth.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

DISTRIBUTION_NAME: str = "create-abp-react"


def _read_version() -> str:
    """Return the declared version, or ``"0.0.0"`` for an uninstalled tree."""
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return "0.0.0"


__version__: str = _read_version()
