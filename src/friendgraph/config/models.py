"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, friendgraph.toml only
contains overrides. A project needs no config file at all.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class NetworkConfig(BaseModel):
    """[network] section."""

    model_config = {"frozen": True}

    file: str = "EdgeList.txt"
    # Extra directories tried, in order, when a load source is not found as given.
    search_dirs: list[str] = Field(default_factory=list)
    save_suffix: str = ".txt"


class RecommendConfig(BaseModel):
    """[recommend] section."""

    model_config = {"frozen": True}

    default_top: int = 5

    @field_validator("default_top")
    @classmethod
    def _non_negative(cls, value: int) -> int:
        if value < 0:
            msg = "default_top must be >= 0"
            raise ValueError(msg)
        return value

