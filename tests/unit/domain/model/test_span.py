"""Tests for domain/model/span.py."""

import pytest

from lengthlint.domain.model.location import Location
from lengthlint.domain.model.span import SourceSpan


class TestSourceSpan:
    """Tests for SourceSpan."""

    def test_fields(self) -> None:
        span = SourceSpan(start_line=10, start_column=3, stop_line=25, text="{}")
        assert span.start_line == 10
        assert span.stop_line == 25
        assert span.text == "{}"

    def test_start_location(self) -> None:
        span = SourceSpan(start_line=10, start_column=3, stop_line=25, text="{}")
        assert span.start == Location(line=10, column=3)

    def test_single_line(self) -> None:
        span = SourceSpan(start_line=4, start_column=1, stop_line=4, text="x")
        assert span.stop_line == span.start_line

    def test_empty_text_allowed(self) -> None:
        span = SourceSpan(start_line=1, start_column=1, stop_line=1, text="")
        assert span.text == ""


class TestSourceSpanFailFirst:
    """Tests for FAIL-FIRST validation in SourceSpan."""

    def test_stop_before_start_raises(self) -> None:
        with pytest.raises(ValueError, match="stop_line"):
            SourceSpan(start_line=5, start_column=1, stop_line=4, text="x")

    def test_start_line_zero_raises(self) -> None:
        with pytest.raises(ValueError, match="start_line must be > 0"):
            SourceSpan(start_line=0, start_column=1, stop_line=1, text="x")

    def test_start_column_zero_raises(self) -> None:
        with pytest.raises(ValueError, match="start_column must be > 0"):
            SourceSpan(start_line=1, start_column=0, stop_line=1, text="x")
