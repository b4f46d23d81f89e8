"""
Sorter configuration.

Settings live under a top-level ``sorter:`` key in a YAML file.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import BaseModel, Field, field_validator

from .errors import MalformedExpressionError


class SorterConfig(BaseModel):
    """Configuration for RecordSorter."""

    default_expression: Optional[str] = None
    warn_on_unknown_direction: bool = True
    decorate_workers: int = Field(default=0, ge=0)

    @field_validator("default_expression")
    @classmethod
    def validate_default_expression(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        from .logic.parser import ExpressionParser
        try:
            ExpressionParser(warn_on_unknown_direction=False).parse(v)
        except MalformedExpressionError as e:
            raise ValueError(f"invalid default_expression: {e.reason}") from e
        return v

    @classmethod
    def from_yaml(cls, yaml_content: str) -> "SorterConfig":
        """Load configuration from YAML content."""
        data = yaml.safe_load(yaml_content) or {}
        return cls(**(data.get("sorter") or {}))


def load_config(path: Union[str, Path]) -> SorterConfig:
    """
    Load configuration from a YAML file.

    A missing file yields the default configuration.
    """
    config_path = Path(path)
    if not config_path.exists():
        return SorterConfig()

    with open(config_path, "r", encoding="utf-8") as f:
        return SorterConfig.from_yaml(f.read())
