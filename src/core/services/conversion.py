"""Conversion orchestration.

This module holds the file-level flow the CLI delegates to: read a Markdown
file, pick a title, format it, and persist the clean copy. Printing,
prompting and spinners stay in the CLI so the flow can be reused from tests
or other entry points.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from adapters.terminal_styles import AnsiStyler
from adapters.text_exporter import export_clean_text
from core.config import AppSettings
from core.domain.models import FormattedPost
from core.errors import ConversionIOError
from core.formatter import format_for_medium
from core.interfaces.styler import Styler
from core.markdown import extract_title

_logger = logging.getLogger(__name__)


def read_markdown(path: Path) -> str:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ConversionIOError(path, "file not found") from exc
    except UnicodeDecodeError as exc:
        raise ConversionIOError(path, "file is not valid UTF-8") from exc
    except OSError as exc:
        raise ConversionIOError(path, exc.strerror or str(exc)) from exc
    _logger.debug("Read %d characters from %s", len(text), path)
    return text


def is_markdown_path(path: Path, settings: AppSettings | None = None) -> bool:
    settings = settings or AppSettings()
    extensions = {ext.lower() for ext in settings.markdown_extensions}
    return path.suffix.lower() in extensions


def convert_text(
    document_text: str,
    *,
    source_path: Path,
    tags: Sequence[str] = (),
    settings: AppSettings | None = None,
    styler: Styler | None = None,
) -> FormattedPost:
    """Format already-read Markdown text, falling back to the default title.

    Without a `styler` the header gets ANSI terminal styling.
    """

    settings = settings or AppSettings()
    title = extract_title(document_text)
    if title is None:
        _logger.info("No '# ' heading in %s, using %r", source_path, settings.default_title)
        title = settings.default_title
    styled = format_for_medium(document_text, title, list(tags), styler=styler or AnsiStyler())
    return FormattedPost(source_path=source_path, title=title, tags=list(tags), styled=styled)


def convert_file(
    path: Path,
    *,
    tags: Sequence[str] = (),
    settings: AppSettings | None = None,
    styler: Styler | None = None,
) -> FormattedPost:
    """Read `path` and format it for Medium.

    Raises:
    - ConversionIOError if the file cannot be read.
    """

    _logger.debug("Converting %s (tags=%s)", path, list(tags))
    text = read_markdown(path)
    return convert_text(text, source_path=path, tags=tags, settings=settings, styler=styler)


def output_path_for(source_path: Path, settings: AppSettings | None = None) -> Path:
    """`<stem><suffix><ext>` inside the configured output dir (cwd by default)."""

    settings = settings or AppSettings()
    name = f"{source_path.stem}{settings.output_suffix}{settings.output_extension}"
    base = settings.output_dir if settings.output_dir is not None else Path.cwd()
    return base / name


def save_post(post: FormattedPost, *, settings: AppSettings | None = None, output_path: Path | None = None) -> Path:
    """Write the clean variant of `post` and return where it went."""

    target = output_path or output_path_for(post.source_path, settings)
    export_clean_text(content=post.styled, output_path=target)
    _logger.info("Saved %s -> %s", post.source_path, target)
    return target
