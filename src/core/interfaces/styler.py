"""Styling contract for formatted output.

Why Protocol:
- Structural contract (duck typing) without inheritance.
- The formatter stays pure and testable: tests can pass a plain styler,
  the CLI passes one that emits terminal escape codes.
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol, runtime_checkable


class StyleRole(str, Enum):
    """Parts of the header that get decorated."""

    TITLE = "title"
    TAGS = "tags"
    SEPARATOR = "separator"


@runtime_checkable
class Styler(Protocol):
    """Renders a piece of text for a given role."""

    def style(self, text: str, role: StyleRole) -> str:
        """Return `text` decorated for `role`."""

        ...
