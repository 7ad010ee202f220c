"""Shared fixtures."""

from __future__ import annotations

import os
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run every test from an empty directory with no MD2MEDIUM_* overrides."""

    for key in list(os.environ):
        if key.upper().startswith("MD2MEDIUM_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def sample_markdown(tmp_path: Path) -> Path:
    path = tmp_path / "post.md"
    path.write_text(
        "# My Post\n"
        "\n"
        "## Section\n"
        "- first\n"
        "* second\n"
        "**bold** text\n"
        "\n"
        "5. a\n"
        "9. b\n",
        encoding="utf-8",
    )
    return path
