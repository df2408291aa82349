"""Utility modules for lexis.

Provides:
- logger: get_logger for logging
"""

from lexis.utils.logger import get_logger

__all__ = [
    "get_logger",
]
