"""Scanner operating modes.

This module defines the finite state machine modes for the scanner.
"""

from __future__ import annotations

from enum import Enum, auto


class ScannerMode(Enum):
    """Scanner operating modes.

    The scanner switches between modes at comment boundaries:
    - CODE: Classifying lexemes with the matchers
    - BLOCK_COMMENT: Inside a /* ... */ comment that did not close on its
      opening line; text is accumulated until */ or end of input

    """

    CODE = auto()
    BLOCK_COMMENT = auto()
