"""Tests for resolve() query variants."""

import re

import pytest

from mimereg.models.mime_type import MimeType
from mimereg.models.query import ByName, ByPattern, ByType, as_query


class TestAsQuery:
    """Tests for as_query()."""

    def test_string(self) -> None:
        """Strings become name lookups."""
        assert as_query("text/plain") == ByName("text/plain")

    def test_pattern(self) -> None:
        """Compiled patterns become pattern lookups."""
        pattern = re.compile(r"^image/")
        assert as_query(pattern) == ByPattern(pattern)

    def test_mime_type(self) -> None:
        """MimeType objects resolve to themselves."""
        mime_type = MimeType("text/plain")
        query = as_query(mime_type)
        assert isinstance(query, ByType)
        assert query.mime_type is mime_type

    @pytest.mark.parametrize(
        "query", [ByName("text/plain"), ByPattern(re.compile("x")), ByType(MimeType("a/b"))]
    )
    def test_queries_pass_through(self, query: ByName | ByPattern | ByType) -> None:
        """Explicit queries are returned unchanged."""
        assert as_query(query) is query
