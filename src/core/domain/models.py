"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict, self-documenting fields (Field) without coupling the core to I/O.
- The CLI and the service layer share one description of a conversion.

Note:
- These models describe *what* a conversion produced, not *how*.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from core.formatter import strip_styling


class OutputMethod(str, Enum):
    """Where the formatted post goes."""

    SAVE = "save"
    DISPLAY = "display"

    def label(self) -> str:
        """Human readable label for prompts."""

        return "Display in terminal" if self is OutputMethod.DISPLAY else "Save to file"


class NextAction(str, Enum):
    """Choices offered once a file has been processed."""

    SAVE_AS_WELL = "save_as_well"
    PROCESS_ANOTHER = "process_another"
    EXIT = "exit"

    def label(self) -> str:
        return {
            NextAction.SAVE_AS_WELL: "Save to file as well",
            NextAction.PROCESS_ANOTHER: "Process another markdown file",
            NextAction.EXIT: "Exit the application",
        }[self]

    @classmethod
    def after(cls, method: OutputMethod) -> list["NextAction"]:
        """Actions available after a file was handled with `method`."""

        if method is OutputMethod.DISPLAY:
            return [cls.SAVE_AS_WELL, cls.PROCESS_ANOTHER, cls.EXIT]
        return [cls.PROCESS_ANOTHER, cls.EXIT]


class FormattedPost(BaseModel):
    """One Markdown file converted for Medium.

    Why it exists:
    - Keeps the styled text together with the title/tags it was built from,
      so the CLI can display it and later save the clean copy without
      re-reading the source file.
    """

    model_config = ConfigDict(frozen=True)

    source_path: Path = Field(
        ...,
        description="Markdown file the post was read from.",
    )
    title: str = Field(
        ...,
        description="Extracted title, or the configured fallback.",
    )
    tags: list[str] = Field(
        default_factory=list,
        description="Tags shown in the header, in input order.",
    )
    styled: str = Field(
        ...,
        description="Formatted output including terminal styling codes.",
    )

    @property
    def clean(self) -> str:
        """The styled output with every escape sequence removed."""

        return strip_styling(self.styled)
