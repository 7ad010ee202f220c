"""Run md2medium from a source checkout: `python -m main [command] ...`.

The packages live under `src/`; this puts that directory on `sys.path`
so no install is needed. An installed copy uses the `md2medium` script.
"""

from __future__ import annotations

import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parent / "src"


def _use_utf8_streams() -> None:
    # Emoji glyphs in the output need UTF-8; Windows consoles default to cp1252.
    if sys.platform == "win32":
        sys.stdout.reconfigure(encoding="utf-8")
        sys.stderr.reconfigure(encoding="utf-8")


def main() -> None:
    if str(SRC_DIR) not in sys.path:
        sys.path.insert(0, str(SRC_DIR))
    _use_utf8_streams()

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
