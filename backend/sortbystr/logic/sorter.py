"""
Sort driver for sort expressions.

Sorts records by a parsed sort expression using decorate-sort-undecorate:
every field value is read once per record, the decorated records are sorted
with a stable multi-key comparator, and the original records are returned
in their new order.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from functools import cmp_to_key
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from ..config import SorterConfig
from ..errors import MalformedExpressionError
from ..models import ParsedExpression, SortDirection
from .accessors import Accessor, resolve_accessors
from .parser import ExpressionParser

logger = logging.getLogger(__name__)

Expression = Union[str, ParsedExpression]
DecoratedRecord = Tuple[Any, Tuple[Any, ...]]


def compare_values(a: Any, b: Any) -> int:
    """Three-way compare using only ``<`` and ``>``."""
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def compare_keys(
    a_keys: Sequence[Any],
    b_keys: Sequence[Any],
    directions: Sequence[SortDirection],
) -> int:
    """
    Compare two key tuples position by position.

    DESC swaps the operands at its own position only. The first non-zero
    comparison decides; 0 means the records tie on every key.
    """
    for direction, a_val, b_val in zip(directions, a_keys, b_keys):
        if direction is SortDirection.DESC:
            cmp = compare_values(b_val, a_val)
        else:
            cmp = compare_values(a_val, b_val)
        if cmp != 0:
            return cmp
    return 0


class ExpressionSorter:
    """
    Sorter for records using parsed sort expressions.

    Field values are computed once per record per sort, so expensive or
    side-effecting accessors are never called more than once for a record.
    """

    def __init__(
        self,
        parser: Optional[ExpressionParser] = None,
        decorate_workers: int = 0,
    ):
        self.parser = parser or ExpressionParser()
        self.decorate_workers = decorate_workers

    def sort(
        self,
        records: Iterable[Any],
        expression: Expression,
        extractors: Optional[Mapping[str, Accessor]] = None,
    ) -> List[Any]:
        """
        Sort records by a sort expression.

        Args:
            records: The records to sort. Not modified.
            expression: A sort expression string or an already parsed one.
            extractors: Optional field name to extractor mapping.

        Returns:
            A new list with the same records in sorted order.

        Raises:
            MalformedExpressionError: If the expression cannot be parsed.
        """
        parsed = self._ensure_parsed(expression)
        decorated = self._decorate(list(records), parsed, extractors)

        directions = parsed.directions
        decorated.sort(
            key=cmp_to_key(lambda a, b: compare_keys(a[1], b[1], directions))
        )

        logger.debug("Sorted %d records by %r", len(decorated), parsed.to_string())
        return [record for record, _ in decorated]

    def _ensure_parsed(self, expression: Expression) -> ParsedExpression:
        if isinstance(expression, ParsedExpression):
            return expression
        return self.parser.parse(expression)

    def _decorate(
        self,
        records: List[Any],
        parsed: ParsedExpression,
        extractors: Optional[Mapping[str, Accessor]],
    ) -> List[DecoratedRecord]:
        """Pair each record with its key values, reading each distinct field once."""
        fields = parsed.fields
        accessors = resolve_accessors(dict.fromkeys(fields), extractors)

        def decorate(record: Any) -> DecoratedRecord:
            values = {name: accessor(record) for name, accessor in accessors.items()}
            return record, tuple(values[f] for f in fields)

        if self.decorate_workers > 1 and len(records) > 1:
            with ThreadPoolExecutor(max_workers=self.decorate_workers) as pool:
                return list(pool.map(decorate, records))
        return [decorate(record) for record in records]


class RecordSorter:
    """
    High-level sorter bound to a configuration.

    Provides a default expression and the parser and decoration settings
    from a SorterConfig.
    """

    def __init__(self, config: Optional[SorterConfig] = None):
        """
        Initialize the record sorter.

        Args:
            config: Sorter configuration. Defaults are used if omitted.
        """
        self.config = config or SorterConfig()
        self.parser = ExpressionParser(
            warn_on_unknown_direction=self.config.warn_on_unknown_direction
        )
        self.sorter = ExpressionSorter(
            parser=self.parser,
            decorate_workers=self.config.decorate_workers,
        )

    def parse(self, expression: str) -> ParsedExpression:
        return self.parser.parse(expression)

    def sort(
        self,
        records: Iterable[Any],
        expression: Optional[Expression] = None,
        extractors: Optional[Mapping[str, Accessor]] = None,
    ) -> List[Any]:
        """
        Sort records, falling back to the configured default expression.

        Raises:
            MalformedExpressionError: If no expression is given and none is
                configured, or if the expression cannot be parsed.
        """
        if expression is None:
            expression = self.config.default_expression
        if expression is None:
            raise MalformedExpressionError(
                expression, "no expression given and no default_expression configured"
            )
        return self.sorter.sort(records, expression, extractors)


class SortableList(list):
    """List that can sort itself by a sort expression."""

    def sort_by_str(
        self,
        expression: Expression,
        extractors: Optional[Mapping[str, Accessor]] = None,
    ) -> "SortableList":
        """Return a new SortableList sorted by the expression."""
        return SortableList(sort_by_str(self, expression, extractors))


def sort_by_str(
    records: Iterable[Any],
    expression: Expression,
    extractors: Optional[Mapping[str, Accessor]] = None,
) -> List[Any]:
    """
    Sort records by a SQL-style sort expression.

    The expression is a comma separated list of fields, each optionally
    followed by ASC or DESC, e.g. ``"year DESC, month ASC, day"``. Fields
    without a direction sort ascending. Records tied on every field keep
    their input order.
    """
    return ExpressionSorter().sort(records, expression, extractors)
