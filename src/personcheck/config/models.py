"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, personcheck.toml only contains
overrides. No file at all is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    width: int = Field(default=120, gt=0)
    no_color: bool = False
