"""Source text and keyword providers.

The scanner only ever sees fully materialized strings. This module turns
files into those strings and is the only place lexis performs I/O.

Failures are raised as SourceError subclasses. Callers that must always
produce a scan (the CLI) use the ``*_or_*`` variants, which log a warning
and substitute empty source text or the default keyword set.
"""

from __future__ import annotations

from pathlib import Path

from lexis.errors import SourceError, SourceNotFoundError, SourceReadError
from lexis.keywords import JAVA_KEYWORDS
from lexis.utils.logger import get_logger

logger = get_logger(__name__)


def normalize_newlines(text: str) -> str:
    """Convert \\r\\n and lone \\r line endings to \\n."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def _read_text(path: str | Path) -> str:
    path = Path(path)
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise SourceNotFoundError(path, "file not found") from e
    except IsADirectoryError as e:
        raise SourceReadError(path, "is a directory") from e
    except UnicodeDecodeError as e:
        raise SourceReadError(path, f"not valid UTF-8 ({e.reason})") from e
    except OSError as e:
        raise SourceReadError(path, e.strerror or str(e)) from e


def read_source(path: str | Path) -> str:
    """Read source text to scan.

    Args:
        path: UTF-8 encoded source file

    Returns:
        File contents with newlines normalized to "\\n"

    Raises:
        SourceNotFoundError: path does not exist
        SourceReadError: path cannot be read or decoded
    """
    return normalize_newlines(_read_text(path))


def parse_keywords(text: str) -> frozenset[str]:
    """Parse a keyword list: one word per line, blank lines ignored."""
    return frozenset(
        word for word in (line.strip() for line in text.splitlines()) if word
    )


def read_keywords(path: str | Path) -> frozenset[str]:
    """Read a reserved-word list.

    Raises:
        SourceNotFoundError: path does not exist
        SourceReadError: path cannot be read or decoded
    """
    keywords = parse_keywords(_read_text(path))
    logger.debug("Loaded %d keywords from %s", len(keywords), path)
    return keywords


def read_source_or_empty(path: str | Path) -> str:
    """Read source text, substituting "" when the file cannot be used."""
    try:
        return read_source(path)
    except SourceError as e:
        logger.warning("Scanning empty input instead: %s", e)
        return ""


def read_keywords_or_default(
    path: str | Path, default: frozenset[str] = JAVA_KEYWORDS
) -> frozenset[str]:
    """Read a keyword list, substituting default when the file cannot be used."""
    try:
        return read_keywords(path)
    except SourceError as e:
        logger.warning("Using default keywords instead: %s", e)
        return default


__all__ = [
    "normalize_newlines",
    "parse_keywords",
    "read_keywords",
    "read_keywords_or_default",
    "read_source",
    "read_source_or_empty",
]
