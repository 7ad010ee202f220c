"""Plain-text export of a formatted post.

Why plain text:
- Medium's editor takes pasted text; colors only make sense in a terminal.
- The file holds the clean variant and nothing else (no framing).
"""

from __future__ import annotations

import logging
from pathlib import Path

from core.errors import ConversionIOError
from core.formatter import strip_styling

_logger = logging.getLogger(__name__)


def export_clean_text(*, content: str, output_path: Path) -> Path:
    """Strip styling from `content` and write it as UTF-8 to `output_path`."""

    clean = strip_styling(content)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(clean, encoding="utf-8")
    except OSError as exc:
        raise ConversionIOError(output_path, exc.strerror or str(exc)) from exc
    _logger.debug("Wrote %d characters to %s", len(clean), output_path)
    return output_path
