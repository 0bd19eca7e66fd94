"""create-abp-react — scaffold a new ABP React application.

Clones the ABP React template, installs its dependencies with pnpm and
initialises a fresh git repository.
"""

from create_abp_react.version import __version__

__all__: list[str] = ["__version__"]
