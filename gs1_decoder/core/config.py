"""
Decoder configuration.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


# ASCII 29, transmitted by scanners for FNC1
GROUP_SEPARATOR = '\x1d'


@dataclass(frozen=True)
class ParserConfig:
    """
    Configuration options for decoding.

    Attributes:
        terminator: Character ending a variable-length field (FNC1)
        lot_max_length: Maximum length of an unterminated batch/lot (AI 10)
            or serial number (AI 21); None keeps the AI table cap of 20
    """
    terminator: str = GROUP_SEPARATOR
    lot_max_length: Optional[int] = None

    def __post_init__(self):
        if not isinstance(self.terminator, str) or len(self.terminator) != 1:
            raise ValueError(
                f"terminator must be a single character, got {self.terminator!r}"
            )
        if self.lot_max_length is not None and self.lot_max_length < 1:
            raise ValueError(
                f"lot_max_length must be positive, got {self.lot_max_length}"
            )
