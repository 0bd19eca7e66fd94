"""Allow ``python -m create_abp_react`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m create_abp_react`` behaves identically to the
``create-abp-react`` console script.
"""

from __future__ import annotations

from create_abp_react.cli.app import cli

if __name__ == "__main__":
    cli()
