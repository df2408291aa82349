"""ContextVar-based scan configuration for lexis.

Provides context-local configuration using Python's ContextVars (PEP 567).
A Scanner created without an explicit config snapshots the active one.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    # Explicit config
    from lexis import Scanner, ScanConfig

    scanner = Scanner(source, config=ScanConfig(keywords=frozenset({"let"})))

    # Or use the context manager
    with scan_config_context(ScanConfig(keywords=keywords)):
        tokens = scan(source)

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

from lexis.charsets import DEFAULT_INVALID_PREFIXES
from lexis.keywords import JAVA_KEYWORDS


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable scan configuration.

    Attributes:
        keywords: Reserved words; a word-like lexeme is a keyword only on an
            exact match.
        invalid_identifier_prefixes: Single characters that turn a following
            identifier-shaped run into an ERROR token.

    """

    keywords: frozenset[str] = JAVA_KEYWORDS
    invalid_identifier_prefixes: frozenset[str] = DEFAULT_INVALID_PREFIXES

    def __post_init__(self) -> None:
        # Accept any iterable of strings but always store frozensets
        for name in ("keywords", "invalid_identifier_prefixes"):
            value = getattr(self, name)
            if isinstance(value, str):
                msg = f"{name} must be a collection of strings, not a str: {value!r}"
                raise TypeError(msg)
            if not isinstance(value, frozenset):
                object.__setattr__(self, name, frozenset(value))
        for prefix in self.invalid_identifier_prefixes:
            if len(prefix) != 1:
                msg = f"Invalid identifier prefix must be one character: {prefix!r}"
                raise ValueError(msg)

    def with_keywords(self, keywords: Iterable[str]) -> ScanConfig:
        """Return a copy using a different keyword set."""
        return ScanConfig(
            keywords=keywords,  # type: ignore[arg-type]
            invalid_identifier_prefixes=self.invalid_identifier_prefixes,
        )

    @classmethod
    def from_dict(cls, config_dict: dict) -> ScanConfig:
        """Create ScanConfig from dictionary.

        Only includes keys that are valid ScanConfig fields; unknown keys
        are silently ignored. List values (e.g. from JSON or TOML) are
        converted to frozensets; a bare string raises TypeError.

        Example:
            >>> config = ScanConfig.from_dict({
            ...     "keywords": ["if", "else"],
            ...     "unknown_key": "ignored",
            ... })
            >>> sorted(config.keywords)
            ['else', 'if']

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ScanConfig = ScanConfig()

_scan_config: ContextVar[ScanConfig] = ContextVar(
    "scan_config",
    default=_DEFAULT_CONFIG,
)


def get_scan_config() -> ScanConfig:
    """Get current scan configuration (context-local)."""
    return _scan_config.get()


def set_scan_config(config: ScanConfig) -> None:
    """Set scan configuration for current context.

    Only affects the current thread's context. Other threads are unaffected.
    """
    _scan_config.set(config)


def reset_scan_config() -> None:
    """Reset to default configuration."""
    _scan_config.set(_DEFAULT_CONFIG)


@contextmanager
def scan_config_context(config: ScanConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Example:
        >>> with scan_config_context(ScanConfig(keywords=frozenset({"fn"}))):
        ...     tokens = scan("fn main")
        >>> # Automatically reset to previous config

    Properly restores the previous config even if an exception is raised.

    """
    previous = _scan_config.get()
    _scan_config.set(config)
    try:
        yield
    finally:
        _scan_config.set(previous)


__all__ = [
    "ScanConfig",
    "get_scan_config",
    "reset_scan_config",
    "scan_config_context",
    "set_scan_config",
]
