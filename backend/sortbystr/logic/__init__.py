"""
Sort logic for sort-by-str.

Provides sort expression parsing and the multi-key sort driver.
"""

from .parser import ExpressionParser, parse_expression
from .sorter import ExpressionSorter, RecordSorter, SortableList, sort_by_str

__all__ = [
    "ExpressionParser",
    "parse_expression",
    "ExpressionSorter",
    "RecordSorter",
    "SortableList",
    "sort_by_str",
]
