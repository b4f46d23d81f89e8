"""
Expression Parser for sort expressions.

Parses SQL-style sort expressions into ordered sort keys.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from ..errors import MalformedExpressionError
from ..models import ParsedExpression, SortDirection, SortKey

logger = logging.getLogger(__name__)


class ExpressionParser:
    """
    Parser for sort expressions.

    Converts expressions like:
        "size"
        "year DESC, month ASC, day"

    Into ordered sort keys:
        [SortKey(field="size", direction=ASC)]
        [SortKey(field="year", direction=DESC),
         SortKey(field="month", direction=ASC),
         SortKey(field="day", direction=ASC)]

    A direction token other than DESC (in any case) is read as ASC.
    """

    GROUP_SEPARATOR = ","
    MAX_TOKENS = 2

    def __init__(self, warn_on_unknown_direction: bool = True):
        self.warn_on_unknown_direction = warn_on_unknown_direction

    def parse(self, expression: str) -> ParsedExpression:
        """
        Parse a sort expression.

        Args:
            expression: The expression to parse.

        Returns:
            The parsed expression, primary key first.

        Raises:
            MalformedExpressionError: If the expression is empty, has an
                empty group or has a group with more than two tokens.
        """
        if not isinstance(expression, str):
            raise MalformedExpressionError(
                expression, f"expected string expression, got {type(expression).__name__}"
            )

        groups = self._split_groups(expression)
        keys = [self._parse_group(expression, tokens) for tokens in groups]

        parsed = ParsedExpression(expression=expression, keys=tuple(keys))
        logger.debug("Parsed sort expression %r as %r", expression, parsed.to_string())
        return parsed

    def _split_groups(self, expression: str) -> List[List[str]]:
        """Split an expression into per-field token lists."""
        if not expression.strip():
            raise MalformedExpressionError(expression, "no fields supplied")

        groups = [part.split() for part in expression.split(self.GROUP_SEPARATOR)]

        for position, tokens in enumerate(groups, start=1):
            if not tokens:
                raise MalformedExpressionError(expression, f"group {position} is empty")
            if len(tokens) > self.MAX_TOKENS:
                raise MalformedExpressionError(
                    expression,
                    f"group {position} has {len(tokens)} tokens, expected a field and an optional direction",
                )

        return groups

    def _parse_group(self, expression: str, tokens: List[str]) -> SortKey:
        """Build a sort key from a field token and an optional direction token."""
        field_name = tokens[0]
        if len(tokens) == 1:
            return SortKey(field=field_name)

        token = tokens[1]
        direction = SortDirection.from_token(token)
        if (
            self.warn_on_unknown_direction
            and token.upper() not in SortDirection.__members__
        ):
            logger.warning(
                "Unrecognised sort direction %r for field %r in %r, sorting ascending",
                token, field_name, expression,
            )
        return SortKey(field=field_name, direction=direction)

    def validate(self, expression: str) -> Tuple[bool, Optional[str]]:
        """
        Validate an expression without raising.

        Returns:
            Tuple of (is_valid, error_message).
        """
        try:
            self.parse(expression)
            return True, None
        except MalformedExpressionError as e:
            return False, str(e)


def parse_expression(expression: str) -> ParsedExpression:
    """Parse a sort expression with default parser settings."""
    return ExpressionParser().parse(expression)
