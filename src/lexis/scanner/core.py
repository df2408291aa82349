"""Line-oriented scanner for Java-like source text.

Scans the source one physical line at a time. Within a line, lexemes are
recognized left to right; an unclosed block comment is the only state
carried from one line to the next.

Thread Safety:
Scanner instances own all their state. Create one per source string; never
share an instance between threads while scan() runs. Independent instances
can scan in parallel.

"""

from __future__ import annotations

from lexis.config import ScanConfig, get_scan_config
from lexis.scanner.code import CodeScannerMixin
from lexis.scanner.comment import BlockCommentScannerMixin
from lexis.scanner.modes import ScannerMode
from lexis.tokens import ErrorKind, Token, TokenKind
from lexis.utils.logger import get_logger

logger = get_logger(__name__)


class Scanner(
    # Carry state (real implementations must precede the stubs below)
    BlockCommentScannerMixin,
    # Per-line scanning
    CodeScannerMixin,
):
    """Single-pass scanner producing a materialized token list.

    Usage:
            >>> scanner = Scanner("int x = 42; // answer")
            >>> for token in scanner.scan():
            ...     print(token)
        Token(KEYWORD, 'int', 1:1)
        Token(IDENTIFIER, 'x', 1:5)
        Token(OPERATOR, '=', 1:7)
        Token(LITERAL, '42', 1:9)
        Token(DELIMITER, ';', 1:11)
        Token(COMMENT, '// answer', 1:13)

    Lifecycle:
        All carry state is reset at the start of scan() and cleared when it
        returns, so calling scan() again reproduces the same tokens.

    """

    __slots__ = (
        "_source",
        "_source_file",
        "_config",
        "_tokens",
        "_mode",
        "_lineno",
        "_line_start",  # Offset of the current line in source
        # Block comment carry state
        "_comment_parts",
        "_comment_lineno",
        "_comment_col",
        "_comment_offset",
    )

    def __init__(
        self,
        source: str,
        *,
        config: ScanConfig | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize scanner with source text.

        Args:
            source: Source text; lines are separated by "\\n"
            config: Keyword and invalid-prefix sets. Defaults to the active
                context config at construction time.
            source_file: Optional source file path carried into locations
        """
        self._source = source
        self._source_file = source_file
        self._config = config if config is not None else get_scan_config()
        self._reset()

    def _reset(self) -> None:
        self._tokens: list[Token] = []
        self._mode = ScannerMode.CODE
        self._lineno = 0
        self._line_start = 0
        self._comment_parts: list[str] = []
        self._comment_lineno = 0
        self._comment_col = 0
        self._comment_offset = 0

    @property
    def config(self) -> ScanConfig:
        return self._config

    def scan(self) -> list[Token]:
        """Tokenize the whole source.

        Returns:
            Tokens in source order. Empty source yields an empty list.

        Complexity: O(n * m) where n = len(source) and m = number of matchers
        """
        self._reset()
        tokens = self._tokens
        logger.debug(
            "Scanning %s (%d chars)", self._source_file or "<string>", len(self._source)
        )

        offset = 0
        for index, line in enumerate(self._source.split("\n")):
            self._lineno = index + 1
            self._line_start = offset
            self._scan_line(line)
            offset += len(line) + 1

        self._flush_block_comment()

        error_count = sum(1 for token in tokens if token.kind is TokenKind.ERROR)
        logger.debug(
            "Scanned %d lines into %d tokens (%d errors)",
            self._lineno,
            len(tokens),
            error_count,
        )
        self._tokens = []
        return tokens

    def _scan_line(self, line: str) -> None:
        pos = 0
        if self._mode is ScannerMode.BLOCK_COMMENT:
            pos = self._continue_block_comment(line)
            if pos == -1:
                return
        self._scan_code(line, pos)

    def _make_token(
        self,
        kind: TokenKind,
        lexeme: str,
        *,
        lineno: int,
        col: int,
        start_offset: int,
        error: ErrorKind | None = None,
    ) -> Token:
        """Create a Token with raw coordinates (lazy SourceLocation).

        Args:
            kind: The token kind.
            lexeme: Exact source text consumed.
            lineno: Line the token starts on.
            col: 1-indexed start column.
            start_offset: Start position in source.
            error: Error classification for ERROR tokens.

        Returns:
            Token ending on the line currently being scanned.
        """
        return Token(
            kind=kind,
            lexeme=lexeme,
            line=lineno,
            error=error,
            _col=col,
            _start_offset=start_offset,
            _end_offset=start_offset + len(lexeme),
            _end_lineno=self._lineno,
            _source_file=self._source_file,
        )
