"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without leaking into the CLI.
- Lets the service layer and the CLI read the same defaults.

Settings are read-only: nothing in the application writes them back.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Central application settings.

    Why pydantic-settings:
    - Typed, validated values at the edge (env vars / `.env`).
    - A single configuration contract for the CLI and the services.
    """

    model_config = SettingsConfigDict(
        env_prefix="MD2MEDIUM_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    default_title: str = Field(
        default="Untitled Post",
        min_length=1,
        description="Title used when the document has no '# ' heading.",
    )
    output_suffix: str = Field(
        default="_medium",
        description="Appended to the input file stem to name the output file.",
    )
    output_extension: str = Field(
        default=".txt",
        min_length=1,
        description="Extension of the persisted clean copy.",
    )
    output_dir: Path | None = Field(
        default=None,
        description="Directory for saved files (defaults to the working directory).",
    )
    preview_lines: int = Field(
        default=10,
        ge=0,
        le=1000,
        description="Number of clean lines previewed after saving.",
    )
    processing_delay_seconds: float = Field(
        default=0.0,
        ge=0,
        le=30,
        description="Artificial delay while the spinner is shown (seconds).",
    )
    markdown_extensions: tuple[str, ...] = Field(
        default=(".md", ".markdown"),
        description="Extensions accepted without asking for confirmation.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Root log level (DEBUG, INFO, WARNING, ERROR).",
    )

    @field_validator("output_extension")
    @classmethod
    def _dotted_extension(cls, value: str) -> str:
        return value if value.startswith(".") else f".{value}"

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.strip().upper()
