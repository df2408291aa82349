"""Block comment carry-state mixin."""

from __future__ import annotations

from lexis.charsets import BLOCK_COMMENT_CLOSE
from lexis.scanner.modes import ScannerMode
from lexis.tokens import ErrorKind, Token, TokenKind
from lexis.utils.logger import get_logger

logger = get_logger(__name__)


class BlockCommentScannerMixin:
    """Mixin carrying an open /* comment across line boundaries.

    While the scanner is in BLOCK_COMMENT mode each new line is appended to
    the pending comment. The comment token is emitted once, with the line
    of its opener, when */ is found or when input ends.

    """

    # These will be set by the Scanner class
    _mode: ScannerMode
    _lineno: int
    _line_start: int
    _tokens: list[Token]
    _comment_parts: list[str]
    _comment_lineno: int
    _comment_col: int
    _comment_offset: int

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
        """Start carrying a comment whose opener is at text[pos].

        The rest of the line becomes the first accumulated part.
        """
        self._mode = ScannerMode.BLOCK_COMMENT
        self._comment_parts = [text[pos:]]
        self._comment_lineno = self._lineno
        self._comment_col = pos + 1
        self._comment_offset = self._line_start + pos

    def _continue_block_comment(self, line: str) -> int:
        """Feed one more line to the open comment.

        Returns:
            Index in line just past */ when the comment closed here, so the
            caller can scan the remainder as code. -1 if still open.
        """
        close = line.find(BLOCK_COMMENT_CLOSE)
        if close == -1:
            self._comment_parts.append(line)
            return -1

        end = close + len(BLOCK_COMMENT_CLOSE)
        self._comment_parts.append(line[:end])
        self._emit_block_comment()
        return end

    def _flush_block_comment(self) -> None:
        """Emit a comment still open at end of input."""
        if self._mode is not ScannerMode.BLOCK_COMMENT:
            return
        logger.debug(
            "Unterminated block comment from line %d flushed at end of input",
            self._comment_lineno,
        )
        self._emit_block_comment()

    def _emit_block_comment(self) -> None:
        self._tokens.append(
            self._make_token(
                TokenKind.COMMENT,
                "\n".join(self._comment_parts),
                lineno=self._comment_lineno,
                col=self._comment_col,
                start_offset=self._comment_offset,
            )
        )
        self._mode = ScannerMode.CODE
        self._comment_parts = []
        self._comment_lineno = 0
        self._comment_col = 0
        self._comment_offset = 0
