"""Character sets and lexical tables for O(1) classification.

All sets are frozensets for:
- O(1) membership testing (vs O(n) for strings)
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Usage:
    from lexis.charsets import DELIMITERS

    if char in DELIMITERS:  # O(1) lookup
        ...
"""

import string

DIGITS: frozenset[str] = frozenset(string.digits)

# Identifiers are ASCII only: [A-Za-z_][A-Za-z0-9_]*
IDENTIFIER_START: frozenset[str] = frozenset(string.ascii_letters + "_")
IDENTIFIER_CHARS: frozenset[str] = IDENTIFIER_START | DIGITS

DELIMITERS: frozenset[str] = frozenset("(){}[];,.")

OPERATORS: tuple[str, ...] = (
    "+",
    "-",
    "*",
    "/",
    "%",
    "=",
    "==",
    "!=",
    "<",
    ">",
    "<=",
    ">=",
    "&&",
    "||",
    "!",
)

# Longest first so "==" is never split into "=" "="
OPERATORS_LONGEST_FIRST: tuple[str, ...] = tuple(
    sorted(OPERATORS, key=len, reverse=True)
)

# Characters that make an otherwise identifier-shaped run invalid.
# "%" always lexes as an operator, so it never appears here.
DEFAULT_INVALID_PREFIXES: frozenset[str] = frozenset("#$@")

STRING_QUOTE = '"'
STRING_ESCAPE = "\\"

LINE_COMMENT = "//"
BLOCK_COMMENT_OPEN = "/*"
BLOCK_COMMENT_CLOSE = "*/"
