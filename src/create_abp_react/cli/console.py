"""Shared Rich consoles for the CLI layer.

Progress and results go to stdout; errors go to stderr.  Both consoles
resolve ``sys.stdout``/``sys.stderr`` lazily, so output captured by a
test harness is routed correctly.
"""

from __future__ import annotations

from rich.console import Console

console = Console(highlight=False, emoji=False, soft_wrap=True)

error_console = Console(stderr=True, highlight=False, emoji=False, soft_wrap=True)
