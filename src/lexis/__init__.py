"""
lexis — Lexical Scanner for Java-like Source Text

Converts source text into a flat list of classified tokens (keywords,
identifiers, operators, literals, delimiters, comments and errors), each
tagged with the line it started on. Lexical errors never stop a scan; they
come back as ERROR tokens.

Quick Start:
    >>> from lexis import scan
    >>> for token in scan("int x = 3.14; // pi"):
    ...     print(token.line, token.kind.value, token.lexeme)
    1 keyword int
    1 identifier x
    1 operator =
    1 literal 3.14
    1 delimiter ;
    1 comment // pi

Custom Keywords:
    >>> from lexis import ScanConfig, scan
    >>> config = ScanConfig(keywords=frozenset({"let", "fn"}))
    >>> [t.kind.value for t in scan("let int", config=config)]
    ['keyword', 'identifier']

Installation:
    pip install lexis              # Core scanner (zero deps)
    pip install lexis[test]        # + pytest and Hypothesis for the test suite
"""

from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor

from lexis.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from lexis.errors import LexisError, SourceError, SourceNotFoundError, SourceReadError
from lexis.keywords import JAVA_KEYWORDS
from lexis.location import SourceLocation
from lexis.report import (
    error_tokens,
    format_errors,
    format_token,
    format_tokens,
    has_errors,
    render_report,
)
from lexis.scanner import Scanner, ScannerMode
from lexis.serialization import from_dict, from_json, to_dict, to_json
from lexis.sources import read_keywords, read_source
from lexis.tokens import ErrorKind, Token, TokenKind

__version__ = "0.1.0"


def scan(
    source: str,
    *,
    config: ScanConfig | None = None,
    source_file: str | None = None,
) -> list[Token]:
    """Scan source text into tokens.

    Args:
        source: Source text (newlines already normalized to "\\n")
        config: Keyword and invalid-prefix sets; defaults to the active
            context config
        source_file: Optional source file path carried into token locations

    Returns:
        Tokens in source order

    Example:
        >>> [t.lexeme for t in scan("a == b")]
        ['a', '==', 'b']
    """
    return Scanner(source, config=config, source_file=source_file).scan()


def scan_file(
    path: str,
    *,
    config: ScanConfig | None = None,
) -> list[Token]:
    """Read and scan a source file.

    Raises:
        SourceNotFoundError: path does not exist
        SourceReadError: path cannot be read or decoded
    """
    return scan(read_source(path), config=config, source_file=str(path))


def scan_many(
    sources: Iterable[str],
    *,
    config: ScanConfig | None = None,
    max_workers: int | None = None,
) -> list[list[Token]]:
    """Scan several independent sources.

    Scanners share no state, so with ``max_workers`` set the sources are
    scanned on a thread pool. Results keep the input order.

    Args:
        sources: Iterable of source strings
        config: Config applied to every scan (defaults to the caller's
            active context config, resolved once)
        max_workers: Thread count; None scans sequentially

    Example:
        >>> results = scan_many(["int a;", "int b;"], max_workers=2)
        >>> [len(tokens) for tokens in results]
        [3, 3]
    """
    # Resolve here: worker threads do not inherit the caller's context
    config = config if config is not None else get_scan_config()
    if max_workers is None:
        return [scan(source, config=config) for source in sources]

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        return list(executor.map(lambda source: scan(source, config=config), sources))


__all__ = [
    # Core API
    "scan",
    "scan_file",
    "scan_many",
    "Scanner",
    "ScannerMode",
    # Tokens
    "Token",
    "TokenKind",
    "ErrorKind",
    # Location
    "SourceLocation",
    # Configuration (ContextVar-based)
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
    "JAVA_KEYWORDS",
    # Providers
    "read_source",
    "read_keywords",
    # Reports
    "format_token",
    "format_tokens",
    "format_errors",
    "error_tokens",
    "has_errors",
    "render_report",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Errors
    "LexisError",
    "SourceError",
    "SourceNotFoundError",
    "SourceReadError",
]
