"""Tests for line comments and block comments, including the carry state.

Block comments that stay open at end of line are carried to the next line
and emitted once, with the line number of the opener.
"""

from lexis.scanner import Scanner
from lexis.tokens import TokenKind

C = TokenKind.COMMENT
I = TokenKind.IDENTIFIER  # noqa: E741
O = TokenKind.OPERATOR  # noqa: E741


def triples(source: str) -> list[tuple]:
    return [(t.kind, t.lexeme, t.line) for t in Scanner(source).scan()]


class TestLineComments:
    """Test // comments."""

    def test_whole_line(self) -> None:
        assert triples("// just a note") == [(C, "// just a note", 1)]

    def test_nothing_after_marker_is_tokenized(self) -> None:
        assert triples("x // a /* b \"c") == [(I, "x", 1), (C, '// a /* b "c', 1)]

    def test_line_comment_does_not_carry(self) -> None:
        """A /* inside a line comment opens nothing."""
        assert triples("// a /* b\ny") == [(C, "// a /* b", 1), (I, "y", 2)]

    def test_no_space_before_marker(self) -> None:
        assert triples("a//b") == [(I, "a", 1), (C, "//b", 1)]

    def test_empty_line_comment(self) -> None:
        assert triples("//") == [(C, "//", 1)]

    def test_single_slash_is_operator(self) -> None:
        assert triples("a/b") == [(I, "a", 1), (O, "/", 1), (I, "b", 1)]


class TestSingleLineBlockComments:
    """Test /* ... */ comments that close on their opening line."""

    def test_between_code(self) -> None:
        assert triples("a /* b */ c") == [(I, "a", 1), (C, "/* b */", 1), (I, "c", 1)]

    def test_two_on_one_line(self) -> None:
        assert triples("/* a */ /* b */") == [(C, "/* a */", 1), (C, "/* b */", 1)]

    def test_empty_block_comment(self) -> None:
        assert triples("/**/") == [(C, "/**/", 1)]

    def test_opener_slash_does_not_close(self) -> None:
        """In "/*/" the closer cannot reuse the opener's star."""
        assert triples("/*/") == [(C, "/*/", 1)]

    def test_line_comment_after_block_comment(self) -> None:
        assert triples("/* a */ // b") == [(C, "/* a */", 1), (C, "// b", 1)]

    def test_stray_closer_is_operators(self) -> None:
        assert triples("*/") == [(O, "*", 1), (O, "/", 1)]

    def test_star_slash_operators_with_space(self) -> None:
        assert triples("a / * b") == [(I, "a", 1), (O, "/", 1), (O, "*", 1), (I, "b", 1)]


class TestMultilineBlockComments:
    """Test block comments carried across lines."""

    def test_spanning_two_lines(self) -> None:
        assert triples("/* a\nb */ x") == [(C, "/* a\nb */", 1), (I, "x", 2)]

    def test_spanning_three_lines(self) -> None:
        assert triples("x /* start\nmiddle\nend */ y") == [
            (I, "x", 1),
            (C, "/* start\nmiddle\nend */", 1),
            (I, "y", 3),
        ]

    def test_blank_lines_inside(self) -> None:
        assert triples("/*\n\n*/") == [(C, "/*\n\n*/", 1)]

    def test_closing_line_opens_another(self) -> None:
        assert triples("/* a\nb */ c /* d\ne */") == [
            (C, "/* a\nb */", 1),
            (I, "c", 2),
            (C, "/* d\ne */", 2),
        ]

    def test_line_comment_after_close(self) -> None:
        assert triples("/* a\n*/ // tail") == [(C, "/* a\n*/", 1), (C, "// tail", 2)]

    def test_markers_inside_are_text(self) -> None:
        assert triples('/* "x // y\n/* */ z') == [(C, '/* "x // y\n/* */', 1), (I, "z", 2)]

    def test_first_closer_wins(self) -> None:
        assert triples("/* a\n*/ */") == [
            (C, "/* a\n*/", 1),
            (O, "*", 2),
            (O, "/", 2),
        ]

    def test_token_order_is_source_order(self) -> None:
        tokens = Scanner("a /* b\nc */ d").scan()
        offsets = [t.location.offset for t in tokens]
        assert offsets == sorted(offsets)


class TestUnterminatedBlockComments:
    """A block comment still open at end of input is flushed, not dropped."""

    def test_unterminated_single_line(self) -> None:
        assert triples("x /* open") == [(I, "x", 1), (C, "/* open", 1)]

    def test_unterminated_multiline(self) -> None:
        assert triples("/* unterminated\nstill\ngoing") == [
            (C, "/* unterminated\nstill\ngoing", 1)
        ]

    def test_trailing_newline_is_kept(self) -> None:
        assert triples("/* a\n") == [(C, "/* a\n", 1)]

    def test_flushed_comment_is_last(self) -> None:
        tokens = triples("int x;\n/* trailing\n")
        assert tokens[-1] == (C, "/* trailing\n", 2)
        assert len(tokens) == 4
