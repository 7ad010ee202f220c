"""Shared Rich consoles and logging setup.

stdout carries the converted post; log records go to a separate stderr
console through RichHandler so they never end up mixed into the output.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from core.config import AppSettings

console = Console()
err_console = Console(stderr=True)


def configure_logging(settings: AppSettings, *, verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.getLevelName(settings.log_level)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False, rich_tracebacks=True)],
        force=True,
    )
