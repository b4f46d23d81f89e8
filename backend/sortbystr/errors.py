"""
Errors raised by sort expression handling.
"""

from __future__ import annotations


class MalformedExpressionError(ValueError):
    """Raised when a sort expression cannot be parsed."""

    def __init__(self, expression: object, reason: str):
        self.expression = expression
        self.reason = reason
        super().__init__(f"'{expression}' doesn't appear correctly formatted: {reason}")
