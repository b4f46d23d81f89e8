"""
Field accessors.

Resolves a field name to a callable that reads that field off a record.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Dict, Optional

Accessor = Callable[[Any], Any]


def _read_field(field_name: str) -> Accessor:
    def read(record: Any) -> Any:
        if isinstance(record, Mapping):
            return record[field_name]
        return getattr(record, field_name)

    read.__name__ = f"read_{field_name}"
    return read


def resolve_accessor(
    field_name: str,
    extractors: Optional[Mapping[str, Accessor]] = None,
) -> Accessor:
    """
    Resolve the accessor for a field.

    An explicit extractor registered under the field name wins. Otherwise
    records are read by key when they are mappings and by attribute
    otherwise. Missing fields raise KeyError or AttributeError on access.
    """
    if extractors and field_name in extractors:
        return extractors[field_name]
    return _read_field(field_name)


def resolve_accessors(
    fields,
    extractors: Optional[Mapping[str, Accessor]] = None,
) -> Dict[str, Accessor]:
    """Resolve accessors for several fields, keyed by field name."""
    return {f: resolve_accessor(f, extractors) for f in fields}
