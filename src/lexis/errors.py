"""Exception classes for lexis.

Lexical problems are never raised: the scanner records them as ERROR
tokens and keeps going. Exceptions here belong to the I/O layer that
acquires source text and keyword lists before a scan starts.
"""

from __future__ import annotations

from pathlib import Path


class LexisError(Exception):
    """Base exception for all lexis errors.

    Subclass this for specific error categories.
    """

    pass


class SourceError(LexisError):
    """Error acquiring input for the scanner.

    Raised by the source and keyword providers, never by the scanner.
    """

    def __init__(self, path: str | Path, message: str) -> None:
        """Initialize source error.

        Args:
            path: File that could not be used
            message: Description of the failure
        """
        self.path = str(path)
        self.message = message
        super().__init__(f"{self.path}: {message}")


class SourceNotFoundError(SourceError):
    """The requested file does not exist."""


class SourceReadError(SourceError):
    """The file exists but could not be read or decoded."""
