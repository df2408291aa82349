"""Token matchers for the lexis scanner.

Each matcher is a pure function ``(text, pos, config) -> Match | None`` that
tries to recognize one category of lexeme starting at ``text[pos]``. Matchers
never mutate state and never look past the end of ``text`` (one source line).

Several matchers can accept a prefix of the same text, so MATCHERS is an
ordered tuple and the first success wins:

1. string literal        "..." with backslash escapes
2. numeric literal       123 or 3.14
3. operator              longest entry of the operator table
4. delimiter             ( ) { } [ ] ; , .
5. keyword               identifier-shaped run found in config.keywords
6. identifier            any other identifier-shaped run
7. unterminated string   " to end of line (ERROR)
8. invalid identifier    #foo, $foo, @foo (ERROR)

match_lexeme() applies the rules in that order and falls back to a
one-character ERROR, so it always consumes at least one character.

No regex in the hot path; all scanning is over frozenset lookups.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from lexis.charsets import (
    DELIMITERS,
    DIGITS,
    IDENTIFIER_CHARS,
    IDENTIFIER_START,
    OPERATORS_LONGEST_FIRST,
    STRING_ESCAPE,
    STRING_QUOTE,
)
from lexis.config import ScanConfig
from lexis.tokens import ErrorKind, TokenKind


@dataclass(frozen=True, slots=True)
class Match:
    """Result of a successful matcher: what was found and how long it is."""

    kind: TokenKind
    length: int
    error: ErrorKind | None = None


Matcher = Callable[[str, int, ScanConfig], Match | None]


def _identifier_run_end(text: str, pos: int) -> int:
    """End of the identifier-continue run starting at pos."""
    end = pos
    text_len = len(text)
    while end < text_len and text[end] in IDENTIFIER_CHARS:
        end += 1
    return end


def _string_literal_end(text: str, pos: int) -> int:
    """Position after the closing quote, or -1 if the string is unterminated.

    text[pos] must be the opening quote. A backslash escapes whatever
    character follows it, including a quote.
    """
    text_len = len(text)
    i = pos + 1
    while i < text_len:
        char = text[i]
        if char == STRING_ESCAPE:
            i += 2
            continue
        if char == STRING_QUOTE:
            return i + 1
        i += 1
    return -1


def match_string_literal(text: str, pos: int, config: ScanConfig) -> Match | None:
    if text[pos] != STRING_QUOTE:
        return None
    end = _string_literal_end(text, pos)
    if end == -1:
        return None
    return Match(TokenKind.LITERAL, end - pos)


def match_number_literal(text: str, pos: int, config: ScanConfig) -> Match | None:
    """Unsigned decimal integer with an optional fractional part.

    A sign is never part of the literal, and "1." leaves the period for the
    delimiter rule.
    """
    text_len = len(text)
    end = pos
    while end < text_len and text[end] in DIGITS:
        end += 1
    if end == pos:
        return None
    if end + 1 < text_len and text[end] == "." and text[end + 1] in DIGITS:
        end += 1
        while end < text_len and text[end] in DIGITS:
            end += 1
    return Match(TokenKind.LITERAL, end - pos)


def match_operator(text: str, pos: int, config: ScanConfig) -> Match | None:
    for operator in OPERATORS_LONGEST_FIRST:
        if text.startswith(operator, pos):
            return Match(TokenKind.OPERATOR, len(operator))
    return None


def match_delimiter(text: str, pos: int, config: ScanConfig) -> Match | None:
    if text[pos] in DELIMITERS:
        return Match(TokenKind.DELIMITER, 1)
    return None


def match_keyword(text: str, pos: int, config: ScanConfig) -> Match | None:
    """Whole-word keyword: "intx" is an identifier even though "int" is reserved."""
    if text[pos] not in IDENTIFIER_START:
        return None
    end = _identifier_run_end(text, pos)
    if text[pos:end] in config.keywords:
        return Match(TokenKind.KEYWORD, end - pos)
    return None


def match_identifier(text: str, pos: int, config: ScanConfig) -> Match | None:
    if text[pos] not in IDENTIFIER_START:
        return None
    return Match(TokenKind.IDENTIFIER, _identifier_run_end(text, pos) - pos)


def match_unterminated_string(
    text: str, pos: int, config: ScanConfig
) -> Match | None:
    """An opening quote that never closes swallows the rest of the line."""
    if text[pos] != STRING_QUOTE:
        return None
    return Match(TokenKind.ERROR, len(text) - pos, ErrorKind.UNTERMINATED_STRING)


def match_invalid_identifier(
    text: str, pos: int, config: ScanConfig
) -> Match | None:
    if text[pos] not in config.invalid_identifier_prefixes:
        return None
    end = _identifier_run_end(text, pos + 1)
    if end == pos + 1:
        return None
    return Match(TokenKind.ERROR, end - pos, ErrorKind.INVALID_IDENTIFIER)


# Priority order. Changing it changes how text is classified.
MATCHERS: tuple[Matcher, ...] = (
    match_string_literal,
    match_number_literal,
    match_operator,
    match_delimiter,
    match_keyword,
    match_identifier,
    match_unterminated_string,
    match_invalid_identifier,
)


def match_lexeme(text: str, pos: int, config: ScanConfig) -> Match:
    """Classify the lexeme starting at text[pos].

    Args:
        text: One source line
        pos: Index of a non-whitespace character in text
        config: Active keyword and invalid-prefix sets

    Returns:
        First successful Match in priority order, or a one-character
        UNRECOGNIZED_CHARACTER error. Length is always >= 1.
    """
    for matcher in MATCHERS:
        match = matcher(text, pos, config)
        if match is not None:
            return match
    return Match(TokenKind.ERROR, 1, ErrorKind.UNRECOGNIZED_CHARACTER)


__all__ = [
    "MATCHERS",
    "Match",
    "Matcher",
    "match_delimiter",
    "match_identifier",
    "match_invalid_identifier",
    "match_keyword",
    "match_lexeme",
    "match_number_literal",
    "match_operator",
    "match_string_literal",
    "match_unterminated_string",
]
