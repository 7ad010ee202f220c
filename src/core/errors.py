"""Error types.

The formatting core never raises: every failure is I/O at the edges
(reading the Markdown file, writing the clean copy).
"""

from __future__ import annotations

from pathlib import Path


class Md2MediumError(Exception):
    """Base class for errors surfaced to the CLI."""


class ConversionIOError(Md2MediumError):
    """Reading a source file or writing an output file failed."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"IO error: {path}: {reason}")
