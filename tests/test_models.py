"""
Tests for sort expression Pydantic models.
"""

import pytest
from pydantic import ValidationError

from backend.sortbystr.models import ParsedExpression, SortDirection, SortKey


class TestSortDirection:
    """Tests for SortDirection."""

    @pytest.mark.parametrize("token", ["DESC", "desc", "Desc", "dEsC"])
    def test_desc_tokens(self, token):
        """Test DESC matches in any case."""
        assert SortDirection.from_token(token) is SortDirection.DESC

    @pytest.mark.parametrize("token", ["ASC", "asc", "FOO", "descending", ""])
    def test_other_tokens_are_asc(self, token):
        """Test anything but DESC is ascending."""
        assert SortDirection.from_token(token) is SortDirection.ASC


class TestSortKey:
    """Tests for SortKey model."""

    def test_defaults_to_ascending(self):
        """Test direction defaults to ASC."""
        key = SortKey(field="size")
        assert key.direction is SortDirection.ASC
        assert key.descending is False

    def test_empty_field(self):
        """Test an empty field name is rejected."""
        with pytest.raises(ValidationError) as exc_info:
            SortKey(field="")
        assert "must not be empty" in str(exc_info.value)

    def test_field_with_whitespace(self):
        """Test field names cannot contain whitespace."""
        with pytest.raises(ValidationError):
            SortKey(field="two words")

    def test_frozen(self):
        """Test sort keys are immutable."""
        key = SortKey(field="size")
        with pytest.raises(ValidationError):
            key.field = "color"

    def test_str(self):
        """Test string rendering."""
        assert str(SortKey(field="size", direction=SortDirection.DESC)) == "size DESC"


class TestParsedExpression:
    """Tests for ParsedExpression model."""

    def test_requires_keys(self):
        """Test at least one key is required."""
        with pytest.raises(ValidationError):
            ParsedExpression(expression="", keys=())

    def test_views(self):
        """Test fields and directions views."""
        parsed = ParsedExpression(
            expression="a DESC, b",
            keys=(
                SortKey(field="a", direction=SortDirection.DESC),
                SortKey(field="b"),
            ),
        )
        assert parsed.fields == ("a", "b")
        assert parsed.directions == (SortDirection.DESC, SortDirection.ASC)
        assert len(parsed) == 2
