"""Title and tag extraction from raw Markdown text.

Prefix matching only: there is no Markdown parser behind these helpers.
"""

from __future__ import annotations

from core.domain.markers import TITLE_MARKER


def split_lines(text: str) -> list[str]:
    """Split on newlines, dropping one trailing empty line and any `\\r`.

    A trailing newline does not produce an empty last line; a blank line in
    the middle of the text does.
    """

    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def extract_title(document_text: str) -> str | None:
    """Return the text of the first line starting with '# ', or None.

    Only the first two characters are checked, so "## Subtitle" never
    matches. Repeated leading markers ("# # Title") are all removed.
    """

    for line in split_lines(document_text):
        if line.startswith(TITLE_MARKER):
            while line.startswith(TITLE_MARKER):
                line = line[len(TITLE_MARKER):]
            return line
    return None


def parse_tags(tags: str) -> list[str]:
    """Parse "python, cli ,  medium" into ["python", "cli", "medium"].

    Blank entries are dropped, so an empty string yields no tags.
    """

    return [tag.strip() for tag in tags.split(",") if tag.strip()]
