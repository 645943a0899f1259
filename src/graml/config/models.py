"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, graml.toml only contains overrides.
An absent graml.toml is equivalent to an empty one.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class InjectionConfig(BaseModel):
    """[injection] section."""

    model_config = {"frozen": True}

    vertex_cache_size: int = Field(default=100, ge=1)
    url_timeout: float = Field(default=30.0, gt=0)


class ExportConfig(BaseModel):
    """[export] section."""

    model_config = {"frozen": True}

    indent: int | None = Field(default=2, ge=0)
