from functools import total_ordering
from typing import Any

from Bio.SeqFeature import SimpleLocation

from seqfeatures import AbstractRange
from seqfeatures.exc import UnsupportedOperationException
from seqfeatures.location.strand import Strand
from seqfeatures.util.object_validation import ObjectValidation


@total_ordering
class Range(AbstractRange):
    """A half-open interval ``[start, end)`` over integer coordinates.

    The bounds are fixed at construction. Positions are not validated: a caller building a range with
    ``start > end`` gets a range with negative size.
    """

    def __init__(self, start: int, end: int):
        """
        Parameters
        ----------
        start
            0-based start position, included
        end
            0-based end position, excluded
        """
        self._start = start
        self._end = end

    @property
    def start(self) -> int:
        return self._start

    @property
    def end(self) -> int:
        return self._end

    def __str__(self):
        return f"{self.start}-{self.end}"

    def __repr__(self):
        return f"<{self.__class__.__name__} {str(self)}>"

    def __eq__(self, other):
        if type(other) is not type(self):
            return False
        return self.start == other.start and self.end == other.end

    def __hash__(self):
        return hash((self.start, self.end))

    def __lt__(self, other: AbstractRange):
        ObjectValidation.require_object_has_type(other, AbstractRange)
        return (self.start, self.end) < (other.start, other.end)

    def overlap(self, other: AbstractRange) -> bool:
        """Returns True iff the two intervals share at least one position. Strand is never considered.

        Intervals that only touch (``[10, 20)`` and ``[20, 30)``) do not overlap, and an empty interval
        overlaps nothing.
        """
        ObjectValidation.require_object_has_type(other, AbstractRange)
        if self.is_empty or other.is_empty:
            return False
        return self.start < other.end and other.start < self.end

    def contains(self, other: AbstractRange) -> bool:
        """Returns True iff the other interval lies within this one. Equal intervals contain each other."""
        ObjectValidation.require_object_has_type(other, AbstractRange)
        return other.start >= self.start and other.end <= self.end

    def is_contiguous(self, other: AbstractRange) -> bool:
        """Returns True iff one interval ends exactly where the other starts"""
        ObjectValidation.require_object_has_type(other, AbstractRange)
        return other.start == self.end or other.end == self.start

    def expand_with(self, other: AbstractRange) -> "Range":
        """Returns a new Range spanning both this Range and the other one"""
        ObjectValidation.require_object_has_type(other, AbstractRange)
        return Range(min(self.start, other.start), max(self.end, other.end))

    def to_biopython(self) -> SimpleLocation:
        return SimpleLocation(self.start, self.end)


class StrandedRange(Range):
    """A :class:`Range` that also records the strand it lies on.

    Strand can be one of ``+`` (positive), ``-`` (negative), ``.`` (not stranded) or ``?`` (strandedness is
    relevant but unknown). Any other value is stored as ``.``.

    The bounds are fixed, but the strand can be flipped in place with :meth:`invert`. Equality takes the strand
    into account, so stranded ranges are not hashable.
    """

    __hash__ = None

    def __init__(self, start: int, end: int, strand: Any = Strand.UNSTRANDED):
        super().__init__(start, end)
        self._strand = Strand.from_symbol(strand)

    @staticmethod
    def from_range(source_range: AbstractRange, strand: Any = Strand.UNSTRANDED) -> "StrandedRange":
        """Builds a StrandedRange with the bounds of the given range"""
        return StrandedRange(source_range.start, source_range.end, strand)

    @staticmethod
    def from_biopython(location) -> "StrandedRange":
        """Builds a StrandedRange from a single-part Biopython location. Fuzzy positions are reduced to
        their integer value."""
        if len(location.parts) != 1:
            raise UnsupportedOperationException(
                "Cannot convert a location with {} parts into a single range".format(len(location.parts))
            )
        return StrandedRange(int(location.start), int(location.end), Strand.from_biopython(location.strand))

    @property
    def strand(self) -> Strand:
        return self._strand

    def __str__(self):
        return f"{self.start}-{self.end}:{self.strand}"

    def __eq__(self, other):
        if not super().__eq__(other):
            return False
        return self.strand is other.strand

    @property
    def is_stranded(self) -> bool:
        return self._strand.is_stranded

    @property
    def is_negative_strand(self) -> bool:
        return self._strand is Strand.MINUS

    def invert(self) -> None:
        """Flips a ``+`` strand to ``-`` and vice versa. Does nothing on unstranded or unknown strands."""
        self._strand = self._strand.reverse()

    def copy(self) -> "StrandedRange":
        return StrandedRange(self.start, self.end, self._strand)

    def to_range(self) -> Range:
        """Drops the strand information"""
        return Range(self.start, self.end)

    def to_biopython(self) -> SimpleLocation:
        return SimpleLocation(self.start, self.end, strand=self._strand.to_biopython())
