"""UI components for the CLI (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- The interactive loop and the one-shot `convert` command share them.
"""

from __future__ import annotations

from pathlib import Path

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.rule import Rule
from rich.text import Text

from core.domain.models import FormattedPost, OutputMethod
from core.markdown import split_lines

MEDIUM_NEW_STORY_URL = "https://medium.com/new-story"


def print_banner(console: Console) -> None:
    """Print the welcome banner."""

    title = Text("MD2MEDIUM", style="bold bright_cyan")
    subtitle = Text("📝 Markdown to Medium Converter 📝", style="bright_cyan")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="bright_cyan", padding=(1, 4)))
    console.print(Text("Welcome to md2medium - your Markdown to Medium converter!", style="bold bright_yellow"))
    console.print()


def build_post_panel(post: FormattedPost) -> Panel:
    """Panel wrapping the styled post, colors included."""

    return Panel(
        Text.from_ansi(post.styled),
        title=Text("📄 Formatted Content for Medium:", style="bold bright_green"),
        title_align="left",
        border_style="dim",
    )


def print_saved(console: Console, output_path: Path, clean: str, *, preview_lines: int, heading: str) -> None:
    """Confirm a save and preview the first lines of the clean file."""

    console.print()
    console.print(Text(heading, style="bold bright_green"))
    console.print(Text(f"📄 Output saved to: {output_path}", style="bright_cyan"))
    console.print()
    console.print(Text("📋 Preview of saved content (clean version without colors):", style="bold bright_yellow"))
    console.print(Rule(style="bright_white"))
    lines = split_lines(clean)
    for line in lines[:preview_lines]:
        console.print(Text(line, style="bright_white"))
    if len(lines) > preview_lines:
        console.print(Text("... (content continues in file)", style="italic bright_white"))
    console.print(Rule(style="bright_white"))


def print_next_steps(console: Console, method: OutputMethod) -> None:
    console.print()
    console.print(Text("📋 Next steps:", style="bold bright_yellow"))
    if method is OutputMethod.DISPLAY:
        first = "1. Copy the formatted content above (with colors)"
    else:
        first = "1. Open the saved file and copy its clean content"
    for line in (
        first,
        f"2. Go to {MEDIUM_NEW_STORY_URL}",
        "3. Paste the content into Medium's editor",
        "4. Add tags manually in Medium's tag section",
        "5. Publish as draft or public",
    ):
        console.print(Text(line, style="bright_white"))


def print_goodbye(console: Console) -> None:
    console.print()
    console.print(Text("👋 Thank you for using md2medium!", style="bold bright_cyan"))
    console.print(Text("Happy writing!", style="bright_yellow"))
