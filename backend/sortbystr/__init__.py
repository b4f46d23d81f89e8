"""
sort-by-str: sort records by SQL-style sort expressions.

This package parses expressions such as ``"year DESC, month ASC, day"``
and sorts sequences of records by them with a stable multi-key sort.
"""

from .errors import MalformedExpressionError
from .models import ParsedExpression, SortDirection, SortKey
from .config import SorterConfig, load_config
from .logic import (
    ExpressionParser,
    ExpressionSorter,
    RecordSorter,
    SortableList,
    parse_expression,
    sort_by_str,
)

__version__ = "1.0.0"
__all__ = [
    "MalformedExpressionError",
    "ParsedExpression",
    "SortDirection",
    "SortKey",
    "SorterConfig",
    "load_config",
    "ExpressionParser",
    "ExpressionSorter",
    "RecordSorter",
    "SortableList",
    "parse_expression",
    "sort_by_str",
]
