"""md2medium command line.

Without a sub-command the interactive mode starts; `convert` and `title`
are one-shot commands for scripts.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.text import Text

from cli.console import configure_logging, console
from cli.interactive import interactive_mode, save_and_preview
from cli.ui_components import build_post_panel
from core.config import AppSettings
from core.errors import Md2MediumError
from core.markdown import extract_title, parse_tags
from core.services.conversion import convert_file, read_markdown

app = typer.Typer(help="Convert Markdown files into text ready to paste into Medium.")


def _settings(ctx: typer.Context) -> AppSettings:
    return ctx.obj if isinstance(ctx.obj, AppSettings) else AppSettings()


def _fail(exc: Md2MediumError) -> typer.Exit:
    console.print(Text(f"❌ {exc}", style="red"))
    return typer.Exit(code=1)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    settings = AppSettings()
    configure_logging(settings, verbose=verbose)
    ctx.obj = settings
    if ctx.invoked_subcommand is None:
        interactive(ctx)


@app.command()
def interactive(ctx: typer.Context) -> None:
    """Guided mode: choose files and outputs from prompts."""

    try:
        interactive_mode(_settings(ctx), console)
    except Md2MediumError as exc:
        raise _fail(exc) from exc


@app.command()
def convert(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="Markdown file to convert."),
    tags: str = typer.Option("", "--tags", "-t", help="Comma-separated tags for the header."),
    display: bool = typer.Option(False, "--display", help="Print to the terminal instead of saving."),
    output_dir: Optional[Path] = typer.Option(None, "--output-dir", "-o", help="Directory for the saved file."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Convert one Markdown file."""

    settings = _settings(ctx)
    if verbose:
        configure_logging(settings, verbose=True)
    if output_dir is not None:
        settings = settings.model_copy(update={"output_dir": output_dir})

    try:
        post = convert_file(path, tags=parse_tags(tags), settings=settings)
        if display:
            console.print(build_post_panel(post))
        else:
            save_and_preview(console, post, settings)
    except Md2MediumError as exc:
        raise _fail(exc) from exc


@app.command()
def title(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="Markdown file to inspect."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Print the title a conversion would use."""

    settings = _settings(ctx)
    if verbose:
        configure_logging(settings, verbose=True)
    try:
        text = read_markdown(path)
    except Md2MediumError as exc:
        raise _fail(exc) from exc
    typer.echo(extract_title(text) or settings.default_title)


def run() -> None:
    app()
