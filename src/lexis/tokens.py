"""Token, TokenKind and ErrorKind definitions for the lexis scanner.

The scanner produces an ordered list of Token objects. Each Token has a
kind, the exact lexeme consumed from source, and the line it started on.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenKind and ErrorKind are enums (inherently immutable).

Performance Note:
Token stores raw coordinates and lazily creates SourceLocation on demand,
so reports that only need ``line`` never allocate a location object.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lexis.location import SourceLocation


class TokenKind(Enum):
    """Closed set of token classifications.

    The value of each member is its display name in reports.

    """

    KEYWORD = "keyword"
    IDENTIFIER = "identifier"
    OPERATOR = "operator"
    LITERAL = "literal"
    DELIMITER = "delimiter"
    COMMENT = "comment"
    ERROR = "error"


class ErrorKind(Enum):
    """Why an ERROR token was produced.

    Lexical errors never abort a scan; they are recorded on the token.

    """

    UNTERMINATED_STRING = auto()  # "abc with no closing quote
    INVALID_IDENTIFIER = auto()  # #foo, $bar, @baz
    UNRECOGNIZED_CHARACTER = auto()  # any single char no rule accepts


@dataclass(frozen=True, slots=True)
class Token:
    """A classified lexeme.

    Attributes:
        kind: The token kind (from TokenKind enum)
        lexeme: Exact source text consumed, delimiters and quotes included.
            Never empty.
        line: Line the token started on (1-indexed). A block comment that
            spans several lines keeps the line of its opener.
        error: ErrorKind for ERROR tokens, None otherwise
        _col: Start column (1-indexed)
        _start_offset: Absolute start position in source
        _end_offset: Absolute end position in source (exclusive)
        _end_lineno: Line of the last character
        _source_file: Optional source file path

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.
        The lazy cache uses idempotent write (safe for concurrent access).

    """

    kind: TokenKind
    lexeme: str
    line: int
    error: ErrorKind | None = None
    _col: int = 1
    _start_offset: int = 0
    _end_offset: int = 0
    _end_lineno: int | None = None
    _source_file: str | None = None
    # Cache field - excluded from repr and comparison
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache

        # Import here to avoid circular import at module load
        from lexis.location import SourceLocation

        end_lineno = self._end_lineno if self._end_lineno is not None else self.line
        last_newline = self.lexeme.rfind("\n")
        if last_newline == -1:
            end_col = self._col + len(self.lexeme)
        else:
            end_col = len(self.lexeme) - last_newline

        loc = SourceLocation(
            lineno=self.line,
            col_offset=self._col,
            offset=self._start_offset,
            end_offset=self._end_offset,
            end_lineno=end_lineno,
            end_col_offset=end_col,
            source_file=self._source_file,
        )
        # Safe mutation of frozen dataclass cache field (idempotent write)
        object.__setattr__(self, "_location_cache", loc)
        return loc

    @property
    def col(self) -> int:
        """Column offset (convenience accessor)."""
        return self._col

    @property
    def is_error(self) -> bool:
        return self.kind is TokenKind.ERROR

    def description(self) -> str:
        """Kind and lexeme, e.g. ``[keyword] "int"``."""
        return f'[{self.kind.value}] "{self.lexeme}"'

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.lexeme
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.kind.name}, {val!r}, {self.line}:{self._col})"
