"""
Pydantic models for parsed sort expressions.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict, field_validator


class SortDirection(str, Enum):
    """Direction applied to a single sort key."""

    ASC = "ASC"
    DESC = "DESC"

    @classmethod
    def from_token(cls, token: str) -> "SortDirection":
        """Map a direction token to a direction; only DESC is recognised, anything else is ASC."""
        return cls.DESC if token.upper() == cls.DESC.value else cls.ASC


class SortKey(BaseModel):
    """A single field to sort by and the direction to sort it in."""

    model_config = ConfigDict(frozen=True)

    field: str
    direction: SortDirection = SortDirection.ASC

    @field_validator("field")
    @classmethod
    def validate_field(cls, v: str) -> str:
        if not v:
            raise ValueError("field name must not be empty")
        if re.search(r"[\s,]", v):
            raise ValueError("field name must not contain whitespace or commas")
        return v

    @property
    def descending(self) -> bool:
        return self.direction is SortDirection.DESC

    def __str__(self) -> str:
        return f"{self.field} {self.direction.value}"


class ParsedExpression(BaseModel):
    """
    Ordered sort keys parsed from a sort expression.

    The first key is the primary key; later keys only break ties left by
    the keys before them.
    """

    model_config = ConfigDict(frozen=True)

    expression: str
    keys: Tuple[SortKey, ...]

    @field_validator("keys")
    @classmethod
    def validate_keys(cls, v: Tuple[SortKey, ...]) -> Tuple[SortKey, ...]:
        if not v:
            raise ValueError("at least one sort key is required")
        return v

    @property
    def fields(self) -> Tuple[str, ...]:
        return tuple(k.field for k in self.keys)

    @property
    def directions(self) -> Tuple[SortDirection, ...]:
        return tuple(k.direction for k in self.keys)

    def to_string(self) -> str:
        """Render the keys in canonical form, e.g. ``"size DESC, color ASC"``."""
        return ", ".join(str(k) for k in self.keys)

    def __len__(self) -> int:
        return len(self.keys)
