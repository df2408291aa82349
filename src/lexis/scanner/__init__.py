"""Line-oriented scanner for lexis.

Architecture:
scanner/
├── __init__.py          # Re-exports Scanner, ScannerMode
├── core.py              # Scanner class (mixin composition + line traversal)
├── modes.py             # ScannerMode enum
├── code.py              # Code scanning on one line (comments, matchers)
├── comment.py           # Block comment carry state across lines
└── matchers.py          # Ordered pure token matchers

Usage:
    >>> from lexis.scanner import Scanner
    >>> for token in Scanner("/* a\\nb */ x").scan():
    ...     print(token)
Token(COMMENT, '/* a\\nb */', 1:1)
Token(IDENTIFIER, 'x', 2:6)

"""

from lexis.scanner.core import Scanner
from lexis.scanner.modes import ScannerMode

__all__ = ["Scanner", "ScannerMode"]
