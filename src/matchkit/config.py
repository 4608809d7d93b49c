from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, field_validator


class MatchkitConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    max_repr_length: int | None = 200
    indent: str = "  "

    @field_validator("max_repr_length")
    @classmethod
    def repr_length_must_fit_ellipsis(cls, v: int | None) -> int | None:
        if v is not None and v < 8:
            raise ValueError("max_repr_length must be at least 8 (or null to disable)")
        return v


_active = MatchkitConfig()


def get_config() -> MatchkitConfig:
    return _active


def configure(**overrides: Any) -> MatchkitConfig:
    """Replace the active config with a copy carrying *overrides*.

    The overrides are validated, so ``configure(max_repr_length=2)`` raises
    ``pydantic.ValidationError`` and leaves the active config untouched.
    """
    global _active
    merged = {**_active.model_dump(), **overrides}
    _active = MatchkitConfig(**merged)
    return _active


def reset_config() -> MatchkitConfig:
    global _active
    _active = MatchkitConfig()
    return _active


def load_config(path: Path) -> MatchkitConfig:
    """Load a config from a YAML file and make it the active one.

    Both a bare mapping and a mapping nested under a ``matchkit:`` key are
    accepted, so the settings can share a file with other tools.
    """
    global _active

    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"Config file {path} must contain a mapping")
    if "matchkit" in raw:
        raw = raw["matchkit"] or {}

    _active = MatchkitConfig(**raw)
    return _active
