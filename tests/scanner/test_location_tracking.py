"""Tests for accurate source location tracking in the scanner.

Token locations feed error reports and editor integrations. These tests
verify that line numbers, column offsets, and absolute offsets are
correctly tracked.
"""

from lexis.scanner import Scanner
from lexis.tokens import TokenKind


class TestSingleLineLocations:
    """Test location tracking for single-line tokens."""

    def test_first_token(self) -> None:
        token = Scanner("int x").scan()[0]
        assert token.location.lineno == 1
        assert token.location.col_offset == 1
        assert token.location.offset == 0
        assert token.location.end_offset == 3

    def test_column_after_whitespace(self) -> None:
        token = Scanner("int x").scan()[1]
        assert token.col == 5
        assert token.location.offset == 4
        assert token.location.end_col_offset == 6

    def test_second_line_offsets(self) -> None:
        token = Scanner("a\n  b").scan()[1]
        assert token.line == 2
        assert token.col == 3
        assert token.location.offset == 4
        assert token.location.end_lineno == 2

    def test_tab_counts_as_one_column(self) -> None:
        token = Scanner("\tx").scan()[0]
        assert token.col == 2

    def test_location_length(self) -> None:
        token = Scanner('  "abc"').scan()[0]
        assert token.location.length == len('"abc"')


class TestMultilineLocations:
    """Test location tracking for block comments spanning lines."""

    def test_block_comment_span(self) -> None:
        comment = Scanner("x /* a\nb */").scan()[1]
        assert comment.kind is TokenKind.COMMENT
        loc = comment.location
        assert loc.lineno == 1
        assert loc.col_offset == 3
        assert loc.offset == 2
        assert loc.end_lineno == 2
        assert loc.end_col_offset == 5
        assert loc.end_offset == len("x /* a\nb */")

    def test_token_after_comment_uses_closing_line(self) -> None:
        token = Scanner("/* a\nb */ x").scan()[1]
        assert token.line == 2
        assert token.col == 6
        assert token.location.offset == 10

    def test_eof_flushed_comment_ends_on_last_line(self) -> None:
        comment = Scanner("/* a\nb\nc").scan()[0]
        assert comment.line == 1
        assert comment.location.end_lineno == 3


class TestSourceFile:
    def test_source_file_in_location(self) -> None:
        token = Scanner("x", source_file="Main.java").scan()[0]
        assert token.location.source_file == "Main.java"
        assert str(token.location) == "Main.java:1:1"

    def test_without_source_file(self) -> None:
        token = Scanner("\n  y").scan()[0]
        assert str(token.location) == "2:3"

    def test_location_is_cached(self) -> None:
        token = Scanner("x").scan()[0]
        assert token.location is token.location
