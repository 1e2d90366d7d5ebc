import logging
from enum import Enum
from typing import Any, Optional

logger = logging.getLogger(__name__)


class Strand(str, Enum):
    PLUS = "+"
    MINUS = "-"
    UNSTRANDED = "."
    UNKNOWN = "?"

    def __str__(self):
        return self.to_symbol()

    @staticmethod
    def from_symbol(value: Any) -> "Strand":
        """Converts string representation of a strand to a Strand.

        Unrecognized values are not an error: they are treated as unstranded.
        """
        if isinstance(value, Strand):
            return value
        try:
            return Strand(value)
        except ValueError:
            logger.debug(f"Normalizing unrecognized strand {value!r} to unstranded")
            return Strand.UNSTRANDED

    def to_symbol(self) -> str:
        return self.value

    @staticmethod
    def from_biopython(value: Optional[int]) -> "Strand":
        """Converts a Biopython strand (``1``, ``-1``, ``0`` or ``None``) to a Strand"""
        if value == 1:
            return Strand.PLUS
        if value == -1:
            return Strand.MINUS
        if value == 0:
            return Strand.UNKNOWN
        return Strand.UNSTRANDED

    def to_biopython(self) -> Optional[int]:
        """Biopython uses ``0`` for stranded-but-unknown and ``None`` for features where strand does not apply"""
        if self == Strand.PLUS:
            return 1
        if self == Strand.MINUS:
            return -1
        if self == Strand.UNKNOWN:
            return 0
        return None

    @property
    def is_stranded(self) -> bool:
        return self in (Strand.PLUS, Strand.MINUS)

    def reverse(self) -> "Strand":
        """Returns the opposite of this Strand. Unstranded and unknown strands are their own opposite."""
        if self == Strand.PLUS:
            return Strand.MINUS
        if self == Strand.MINUS:
            return Strand.PLUS
        return self
