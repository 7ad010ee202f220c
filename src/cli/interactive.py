"""Interactive mode.

Prompt loop around the conversion service: pick a file, pick where the
output goes, show or save it, then offer the next action. Typer prompts
read input, Rich prints everything else.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Sequence, TypeVar

import typer
from rich.console import Console
from rich.rule import Rule
from rich.text import Text

from cli.ui_components import (
    build_post_panel,
    print_banner,
    print_goodbye,
    print_next_steps,
    print_saved,
)
from core.config import AppSettings
from core.domain.models import FormattedPost, NextAction, OutputMethod
from core.markdown import parse_tags
from core.services.conversion import convert_file, is_markdown_path, save_post

_logger = logging.getLogger(__name__)

Choice = TypeVar("Choice", OutputMethod, NextAction)


def select(console: Console, prompt: str, options: Sequence[Choice]) -> Choice:
    """Numbered menu; re-prompts until a listed number is entered."""

    for index, option in enumerate(options, start=1):
        console.print(f"  [cyan]{index}[/cyan]) {option.label()}")
    while True:
        picked = typer.prompt(prompt, default=1, type=int)
        if 1 <= picked <= len(options):
            return options[picked - 1]
        console.print(f"[red]Please pick a number between 1 and {len(options)}.[/red]")


def ask_file_path(console: Console, settings: AppSettings) -> Path:
    console.print(Text("📝 Select your markdown file", style="bold bright_blue"))
    while True:
        raw = typer.prompt("Enter the path to your markdown file").strip()
        path = Path(raw).expanduser()
        if not path.is_file():
            console.print("[red]❌ File not found. Please try again.[/red]")
            continue
        if is_markdown_path(path, settings):
            console.print(Text(f"✅ Found markdown file: {path}", style="green"))
            return path
        console.print("[yellow]⚠️  Warning: File doesn't have .md or .markdown extension[/yellow]")
        if typer.confirm("Continue anyway?", default=False):
            return path


def ask_tags() -> list[str]:
    raw = typer.prompt("Tags (comma-separated, leave blank for none)", default="", show_default=False)
    return parse_tags(raw)


def choose_output_method(console: Console) -> OutputMethod:
    console.print()
    console.print(Text("📤 Choose output method", style="bold bright_blue"))
    return select(
        console,
        "How would you like to view the formatted content?",
        [OutputMethod.SAVE, OutputMethod.DISPLAY],
    )


def process_file(
    console: Console,
    path: Path,
    method: OutputMethod,
    settings: AppSettings,
    *,
    tags: Sequence[str] = (),
) -> FormattedPost:
    """Convert `path`, then display or save it, and print the next steps."""

    console.print()
    console.print(Text("⚙️  Processing your markdown file", style="bold bright_blue"))
    with console.status("Reading and formatting markdown...", spinner="dots"):
        post = convert_file(path, tags=tags, settings=settings)
        if settings.processing_delay_seconds:
            time.sleep(settings.processing_delay_seconds)
    console.print("[green]✅ Formatting complete![/green]")

    if method is OutputMethod.DISPLAY:
        console.print()
        console.print(build_post_panel(post))
    else:
        save_and_preview(console, post, settings)
    print_next_steps(console, method)
    return post


def save_and_preview(
    console: Console,
    post: FormattedPost,
    settings: AppSettings,
    *,
    heading: str = "✅ Successfully converted markdown to Medium format!",
) -> Path:
    output_path = save_post(post, settings=settings)
    print_saved(console, output_path, post.clean, preview_lines=settings.preview_lines, heading=heading)
    return output_path


def interactive_mode(settings: AppSettings, console: Console) -> None:
    print_banner(console)

    while True:
        path = ask_file_path(console, settings)
        tags = ask_tags()
        method = choose_output_method(console)
        post = process_file(console, path, method, settings, tags=tags)

        console.print()
        console.print(Text("🎉 File processed successfully!", style="bold bright_green"))
        action = select(console, "What would you like to do next?", NextAction.after(method))

        if action is NextAction.SAVE_AS_WELL:
            save_and_preview(console, post, settings, heading="✅ Also saved to file!")
            action = select(
                console,
                "What would you like to do next?",
                [NextAction.PROCESS_ANOTHER, NextAction.EXIT],
            )

        if action is NextAction.EXIT:
            print_goodbye(console)
            return

        _logger.debug("Starting another conversion")
        console.print()
        console.print(Rule(style="bright_white"))
        console.print()
