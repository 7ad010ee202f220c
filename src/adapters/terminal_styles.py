"""Terminal styling (Rich).

Why in adapters:
- ANSI escape codes are a presentation detail; the core only knows `Styler`.
- Rich renders a `Style` to SGR codes without needing a live console, so the
  styled text can be built once and either printed or stripped.
"""

from __future__ import annotations

from rich.color import ColorSystem
from rich.style import Style

from core.interfaces.styler import StyleRole


DEFAULT_STYLES: dict[StyleRole, Style] = {
    StyleRole.TITLE: Style(color="bright_cyan", bold=True),
    StyleRole.TAGS: Style(color="bright_blue"),
    StyleRole.SEPARATOR: Style(color="bright_white"),
}


class AnsiStyler:
    """Wraps text in ANSI SGR sequences, e.g. ESC[1;96m ... ESC[0m."""

    def __init__(
        self,
        styles: dict[StyleRole, Style] | None = None,
        *,
        color_system: ColorSystem = ColorSystem.STANDARD,
    ) -> None:
        self._styles = {**DEFAULT_STYLES, **(styles or {})}
        self._color_system = color_system

    def style(self, text: str, role: StyleRole) -> str:
        style = self._styles.get(role)
        if style is None or not text:
            return text
        return style.render(text, color_system=self._color_system)


class PlainStyler:
    """No decoration at all."""

    def style(self, text: str, role: StyleRole) -> str:
        return text
