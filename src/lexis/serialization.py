"""Token serialization — JSON round-trip for lexis token streams.

Converts tokens to/from JSON-compatible dicts. Useful for:
- Feeding scan results to tools written in other languages
- Snapshotting token streams in tests
- Debugging and inspection

All output is deterministic (sorted keys).

Example:
    from lexis import scan
    from lexis.serialization import to_json, from_json

    tokens = scan("int x = 1;")
    restored = from_json(to_json(tokens))
    assert tokens == restored

Thread Safety:
    All functions are pure — safe to call from any thread.

"""

import json
from collections.abc import Iterable
from typing import Any

from lexis.tokens import ErrorKind, Token, TokenKind


def to_dict(token: Token) -> dict[str, Any]:
    """Convert a token to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization. Enum
    fields are stored by member name.

    """
    return {
        "_type": "Token",
        "kind": token.kind.name,
        "lexeme": token.lexeme,
        "line": token.line,
        "error": token.error.name if token.error is not None else None,
        "col": token._col,
        "start_offset": token._start_offset,
        "end_offset": token._end_offset,
        "end_line": token._end_lineno,
        "source_file": token._source_file,
    }


def from_dict(data: dict[str, Any]) -> Token:
    """Reconstruct a token from a dict produced by to_dict.

    Raises:
        ValueError: If ``_type`` is missing or not "Token", or an enum name
            is unknown.

    """
    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized token"
        raise ValueError(msg)
    if type_name != "Token":
        msg = f"Unknown token type: {type_name!r}"
        raise ValueError(msg)

    try:
        kind = TokenKind[data["kind"]]
        error = ErrorKind[data["error"]] if data.get("error") is not None else None
    except KeyError as e:
        msg = f"Unknown enum member in serialized token: {e.args[0]!r}"
        raise ValueError(msg) from e

    lexeme = data["lexeme"]
    start_offset = data.get("start_offset", 0)
    return Token(
        kind=kind,
        lexeme=lexeme,
        line=data["line"],
        error=error,
        _col=data.get("col", 1),
        _start_offset=start_offset,
        _end_offset=data.get("end_offset", start_offset + len(lexeme)),
        _end_lineno=data.get("end_line"),
        _source_file=data.get("source_file"),
    )


def to_json(tokens: Iterable[Token], *, indent: int | None = None) -> str:
    """Serialize a token sequence to a JSON array string."""
    return json.dumps([to_dict(token) for token in tokens], indent=indent, sort_keys=True)


def from_json(json_str: str) -> list[Token]:
    """Deserialize a JSON array string back to tokens."""
    data = json.loads(json_str)
    if not isinstance(data, list):
        msg = "Serialized token stream must be a JSON array"
        raise ValueError(msg)
    return [from_dict(item) for item in data]


__all__ = ["from_dict", "from_json", "to_dict", "to_json"]
