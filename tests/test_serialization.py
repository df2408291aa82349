"""Tests for lexis.serialization — token stream JSON round-trip."""

import json

import pytest

from lexis import scan
from lexis.serialization import from_dict, from_json, to_dict, to_json
from lexis.tokens import ErrorKind, Token, TokenKind


class TestToDict:
    def test_fields(self) -> None:
        (token,) = scan("  $x", source_file="A.java")
        assert to_dict(token) == {
            "_type": "Token",
            "kind": "ERROR",
            "lexeme": "$x",
            "line": 1,
            "error": "INVALID_IDENTIFIER",
            "col": 3,
            "start_offset": 2,
            "end_offset": 4,
            "end_line": 1,
            "source_file": "A.java",
        }

    def test_non_error_token(self) -> None:
        data = to_dict(scan("x")[0])
        assert data["kind"] == "IDENTIFIER"
        assert data["error"] is None


class TestRoundTrip:
    def test_program(self) -> None:
        tokens = scan('class A { /* c\n */ String s = "x; int #y = 3.5; }')
        assert from_json(to_json(tokens)) == tokens

    def test_single_token(self) -> None:
        token = scan("/* a\nb")[0]
        assert from_dict(to_dict(token)) == token

    def test_minimal_dict(self) -> None:
        token = from_dict({"_type": "Token", "kind": "LITERAL", "lexeme": "42", "line": 7})
        assert token == Token(
            kind=TokenKind.LITERAL, lexeme="42", line=7, _end_offset=2
        )

    def test_error_kind_restored(self) -> None:
        token = from_json(to_json(scan("&")))[0]
        assert token.error is ErrorKind.UNRECOGNIZED_CHARACTER


class TestJsonOutput:
    def test_deterministic_sorted_keys(self) -> None:
        text = to_json(scan("int x;"))
        assert text == to_json(scan("int x;"))
        first = json.loads(text)[0]
        assert list(first) == sorted(first)

    def test_empty_stream(self) -> None:
        assert to_json([]) == "[]"
        assert from_json("[]") == []

    def test_indent(self) -> None:
        assert "\n" in to_json(scan("x"), indent=2)


class TestErrors:
    def test_missing_type(self) -> None:
        with pytest.raises(ValueError, match="Missing '_type'"):
            from_dict({"kind": "LITERAL", "lexeme": "1", "line": 1})

    def test_unknown_type(self) -> None:
        with pytest.raises(ValueError, match="Unknown token type"):
            from_dict({"_type": "Node"})

    def test_unknown_kind(self) -> None:
        with pytest.raises(ValueError, match="Unknown enum member"):
            from_dict({"_type": "Token", "kind": "WORD", "lexeme": "x", "line": 1})

    def test_not_an_array(self) -> None:
        with pytest.raises(ValueError, match="JSON array"):
            from_json('{"_type": "Token"}')
