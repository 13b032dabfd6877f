"""Environment-driven application settings.

All values are loaded from environment variables (prefix ``PIXELGRID_``) or
a ``.env`` file in the working directory.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Rendering and input options for the display CLI."""

    model_config = SettingsConfigDict(
        env_prefix="PIXELGRID_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    render_style: Literal["plain", "color"] = "plain"
    """``plain`` prints colour codes; ``color`` prints coloured blocks via Rich."""
    cell_symbol: str = Field(default="██", min_length=1)
    """Glyph drawn for each cell in ``color`` style."""
    show_prompts: bool = True
    """Print input prompts when reading from an interactive terminal."""
    max_dimension: int = Field(default=1024, ge=1)
    """Largest accepted display width or height."""


# Module-level singleton — import and use directly.
settings = Settings()


def get_settings() -> Settings:
    """Return the module-level Settings singleton."""
    return settings
