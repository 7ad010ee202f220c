"""Markdown to Medium text formatting.

The whole transformation is a sequence of literal substring rewrites over
in-memory text. Steps run in a fixed order because later steps see the
output of earlier ones:

1. header (title, optional tags, separator)
2. heading markers -> glyphs, longest marker first
3. "- " and leading "* " bullets -> bullet glyph
4. ordered lists renumbered per run of consecutive items
"""

from __future__ import annotations

from typing import Sequence

from core.domain.markers import (
    BOLD_MARKER,
    BULLET_GLYPH,
    DASH_BULLET,
    HEADING_GLYPHS,
    ORDERED_PREFIXES,
    SEPARATOR_GLYPH,
    SEPARATOR_WIDTH,
    STAR_BULLET,
    TAG_LABEL,
)
from core.interfaces.styler import Styler, StyleRole
from core.markdown import split_lines

ESCAPE = "\x1b"
SGR_END = "m"


def format_for_medium(
    document_text: str,
    title: str,
    tags: Sequence[str],
    *,
    styler: Styler,
) -> str:
    """Build the styled post: header block followed by the converted body.

    `styler` decorates the header; the terminal one emits ANSI escape codes,
    a plain one leaves the text untouched.
    """

    return build_header(title, tags, styler) + convert_markdown_to_medium_format(document_text)


def build_header(title: str, tags: Sequence[str], styler: Styler) -> str:
    header = f"{styler.style(title, StyleRole.TITLE)}\n\n"
    if tags:
        header += f"{TAG_LABEL}{styler.style(', '.join(tags), StyleRole.TAGS)}\n\n"
    header += f"{styler.style(SEPARATOR_GLYPH * SEPARATOR_WIDTH, StyleRole.SEPARATOR)}\n\n"
    return header


def convert_markdown_to_medium_format(content: str) -> str:
    result = rewrite_headings(content)
    result = rewrite_bullets(result)
    return renumber_ordered_lists(result)


def rewrite_headings(content: str) -> str:
    """Replace every heading marker with its glyph.

    "### " is replaced before "## " and "# ", so "### Deep" becomes a
    diamond and "#### Deeper" keeps one leading '#'.
    """

    for marker, glyph in HEADING_GLYPHS:
        content = content.replace(marker, glyph)
    return content


def rewrite_bullets(content: str) -> str:
    # "- " is replaced anywhere in the text, not only at line starts.
    content = content.replace(DASH_BULLET, BULLET_GLYPH)

    lines = []
    for line in split_lines(content):
        stripped = line.strip()
        if stripped.startswith(STAR_BULLET) and not stripped.startswith(BOLD_MARKER):
            line = line.replace(STAR_BULLET, BULLET_GLYPH)
        lines.append(line)
    return "\n".join(lines)


def renumber_ordered_lists(content: str) -> str:
    """Renumber each run of consecutive "N. " lines from 1.

    Only single-digit prefixes are list items; "10. x" ends a run.
    """

    lines = []
    counter = 1
    for line in split_lines(content):
        stripped = line.strip()
        if stripped.startswith(ORDERED_PREFIXES):
            lines.append(f"{counter}. {stripped[3:]}")
            counter += 1
        else:
            lines.append(line)
            counter = 1
    return "\n".join(lines)


def strip_styling(text: str) -> str:
    """Remove terminal escape sequences (ESC up to the next 'm') line by line.

    An unterminated sequence leaves the rest of its line untouched.
    """

    return "\n".join(_strip_line(line) for line in split_lines(text))


def _strip_line(line: str) -> str:
    while True:
        start = line.find(ESCAPE)
        if start == -1:
            return line
        end = line.find(SGR_END, start)
        if end == -1:
            return line
        line = line[:start] + line[end + 1:]
