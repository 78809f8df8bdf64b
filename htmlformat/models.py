"""Pydantic models for formatter configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .render import DEFAULT_INDENT


class FormatOptions(BaseModel):
    """Settings for a formatting run."""

    indent: str = Field(
        DEFAULT_INDENT,
        description="Indentation unit written once per nesting level (e.g. two spaces or a tab).",
    )

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("indent")
    @classmethod
    def _indent_is_blank(cls, value: str) -> str:
        if value.strip(" \t"):
            raise ValueError("indent may only contain spaces and tabs")
        return value


def load_options(path: Path) -> FormatOptions:
    """Load options from a YAML mapping such as ``indent: "\\t"``."""

    try:
        data: Any = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except FileNotFoundError as exc:
        raise SystemExit(f"Config file not found: {path}") from exc
    except yaml.YAMLError as exc:
        raise SystemExit(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise SystemExit(f"{path} must contain a mapping of options.")
    try:
        return FormatOptions.model_validate(data)
    except ValidationError as exc:
        raise SystemExit(f"Invalid options in {path}: {exc}") from exc


__all__ = ["FormatOptions", "load_options"]
