"""Plain-text reports over a token sequence.

Two views are provided: every token, and ERROR tokens only. Each token is
rendered as ``<line>: [<kind>] "<lexeme>"``.

Example:
    >>> from lexis import scan
    >>> from lexis.report import format_errors
    >>> format_errors(scan("int #x;"))
    ['1: [error] "#x"']

"""

from __future__ import annotations

from collections.abc import Iterable

from lexis.tokens import Token, TokenKind


def format_token(token: Token) -> str:
    return f"{token.line}: {token.description()}"


def error_tokens(tokens: Iterable[Token]) -> list[Token]:
    """ERROR tokens in source order."""
    return [token for token in tokens if token.kind is TokenKind.ERROR]


def has_errors(tokens: Iterable[Token]) -> bool:
    """True if the scan produced any ERROR token."""
    return any(token.kind is TokenKind.ERROR for token in tokens)


def format_tokens(tokens: Iterable[Token]) -> list[str]:
    """One report line per token."""
    return [format_token(token) for token in tokens]


def format_errors(tokens: Iterable[Token]) -> list[str]:
    """One report line per ERROR token."""
    return [format_token(token) for token in error_tokens(tokens)]


def render_report(tokens: Iterable[Token]) -> str:
    """Full report: a ``results:`` section, then an ``errors:`` section."""
    tokens = list(tokens)
    lines = ["results:", *format_tokens(tokens), "errors:", *format_errors(tokens)]
    return "\n".join(lines) + "\n"


__all__ = [
    "error_tokens",
    "format_errors",
    "format_token",
    "format_tokens",
    "has_errors",
    "render_report",
]
