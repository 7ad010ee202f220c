"""Literal Markdown markers and the glyphs they are rewritten to.

Matching is purely textual: these are substrings, not syntax.
"""

from __future__ import annotations

TITLE_MARKER = "# "

# Longest first. A "### " line also contains "## " and "# ".
HEADING_GLYPHS: tuple[tuple[str, str], ...] = (
    ("### ", "\U0001F538 "),  # small orange diamond
    ("## ", "\U0001F4CC "),  # pushpin
    ("# ", "\U0001F4DD "),  # memo
)

DASH_BULLET = "- "
STAR_BULLET = "* "
BOLD_MARKER = "**"
BULLET_GLYPH = "• "

ORDERED_PREFIXES: tuple[str, ...] = tuple(f"{n}. " for n in range(1, 10))

TAG_LABEL = "\U0001F3F7\ufe0f  Tags: "
SEPARATOR_GLYPH = "─"
SEPARATOR_WIDTH = 50
