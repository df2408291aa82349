"""Code mode scanner mixin."""

from __future__ import annotations

from lexis.charsets import BLOCK_COMMENT_CLOSE, BLOCK_COMMENT_OPEN, LINE_COMMENT
from lexis.config import ScanConfig
from lexis.scanner.matchers import match_lexeme
from lexis.tokens import ErrorKind, Token, TokenKind


class CodeScannerMixin:
    """Mixin providing left-to-right scanning of code on one line.

    At each non-whitespace position, in order:
    1. ``//`` ends the line as a single COMMENT token
    2. ``/*`` becomes a COMMENT token if ``*/`` follows on the same line,
       otherwise it opens a carried block comment
    3. the matchers classify the next lexeme

    Comments are recognized positionally, so ``//`` inside a string
    literal is part of the literal.

    """

    # These will be set by the Scanner class
    _lineno: int
    _line_start: int
    _tokens: list[Token]
    _config: ScanConfig

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
        """Create token with raw coordinates. Implemented by Scanner."""
        raise NotImplementedError

    def _open_block_comment(self, text: str, pos: int) -> None:
        """Start carrying a block comment. Implemented by BlockCommentScannerMixin."""
        raise NotImplementedError

    def _emit(
        self,
        kind: TokenKind,
        line: str,
        start: int,
        end: int,
        error: ErrorKind | None = None,
    ) -> None:
        self._tokens.append(
            self._make_token(
                kind,
                line[start:end],
                lineno=self._lineno,
                col=start + 1,
                start_offset=self._line_start + start,
                error=error,
            )
        )

    def _scan_code(self, line: str, pos: int = 0) -> None:
        """Tokenize line[pos:] as code.

        Whitespace between lexemes produces no token. Every branch advances
        pos or returns, so the loop always terminates.

        Args:
            line: One physical source line, without its newline
            pos: Index to start scanning from
        """
        line_len = len(line)
        config = self._config
        while pos < line_len:
            if line[pos].isspace():
                pos += 1
                continue

            if line.startswith(LINE_COMMENT, pos):
                self._emit(TokenKind.COMMENT, line, pos, line_len)
                return

            if line.startswith(BLOCK_COMMENT_OPEN, pos):
                close = line.find(BLOCK_COMMENT_CLOSE, pos + len(BLOCK_COMMENT_OPEN))
                if close == -1:
                    self._open_block_comment(line, pos)
                    return
                end = close + len(BLOCK_COMMENT_CLOSE)
                self._emit(TokenKind.COMMENT, line, pos, end)
                pos = end
                continue

            match = match_lexeme(line, pos, config)
            end = pos + match.length
            self._emit(match.kind, line, pos, end, match.error)
            pos = end
