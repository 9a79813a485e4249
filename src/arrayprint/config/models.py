"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, arrayprint.toml only contains
overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    json_indent: int = Field(default=2, ge=0)
    table_width: int = Field(default=80, gt=0)
