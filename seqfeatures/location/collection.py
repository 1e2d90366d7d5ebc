"""
Range collections receive coordinates in bulk, for instance from
:meth:`~seqfeatures.feature.feature_set.FeatureSet.fill_range_collection()`.

Two flavors are provided:

1. :class:`RangeSet` keeps every distinct range, sorted by start then end. Ranges with the same bounds are stored
   once; the first one added wins, so its strand is the one kept.
2. :class:`MultiRange` merges overlapping ranges as they are added, and describes the positions covered by the
   collection. Merged ranges no longer carry strand information, and empty ranges are ignored.
"""
from abc import ABC, abstractmethod
from bisect import insort
from typing import Iterator, List, Dict, Tuple

from seqfeatures import AbstractRange
from seqfeatures.location.range import Range, StrandedRange
from seqfeatures.util.object_validation import ObjectValidation


def _copy_range(r: AbstractRange) -> AbstractRange:
    return r.copy() if isinstance(r, StrandedRange) else r


class RangeCollection(ABC):
    """Abstract container of ranges"""

    def __iter__(self) -> Iterator[AbstractRange]:
        yield from self.ranges

    def __len__(self):
        return len(self.ranges)

    def __repr__(self):
        return f"{self.__class__.__name__}({','.join(str(r) for r in self.ranges)})"

    @property
    def is_empty(self) -> bool:
        return len(self) == 0

    @property
    def total_length(self) -> int:
        """Sum of the lengths of all ranges in this collection"""
        return sum(r.size for r in self.ranges)

    @property
    @abstractmethod
    def ranges(self) -> List[AbstractRange]:
        """Returns the ranges of this collection, sorted by start then end"""

    @abstractmethod
    def add_range(self, range_to_add: AbstractRange) -> None:
        """Add a range to this collection. The collection keeps its own copy."""

    @abstractmethod
    def clear(self) -> None:
        """Remove every range from this collection"""


class RangeSet(RangeCollection):
    """Sorted collection of distinct ranges. Two ranges are considered the same if their bounds are equal,
    regardless of strand."""

    def __init__(self):
        self._ranges: Dict[Tuple[int, int], AbstractRange] = {}
        self._keys: List[Tuple[int, int]] = []

    @property
    def ranges(self) -> List[AbstractRange]:
        """Returns copies of the stored ranges. Plain ranges are immutable and returned as is."""
        return [_copy_range(self._ranges[key]) for key in self._keys]

    def add_range(self, range_to_add: AbstractRange) -> None:
        ObjectValidation.require_object_has_type(range_to_add, AbstractRange)
        key = (range_to_add.start, range_to_add.end)
        if key in self._ranges:
            return
        if isinstance(range_to_add, StrandedRange):
            self._ranges[key] = range_to_add.copy()
        else:
            self._ranges[key] = Range(range_to_add.start, range_to_add.end)
        insort(self._keys, key)

    def clear(self) -> None:
        self._ranges.clear()
        self._keys.clear()

    def restrict_to(self, boundaries: AbstractRange) -> None:
        """Crop every range to the given boundaries. Ranges that do not overlap the boundaries are removed."""
        kept = [r for r in self.ranges if r.overlap(boundaries)]
        self.clear()
        for r in kept:
            start = max(r.start, boundaries.start)
            end = min(r.end, boundaries.end)
            if isinstance(r, StrandedRange):
                self.add_range(StrandedRange(start, end, r.strand))
            else:
                self.add_range(Range(start, end))

    def filter_within(self, boundaries: AbstractRange) -> None:
        """Remove every range that is not fully contained in the given boundaries"""
        for key in [k for k in self._keys if not boundaries.contains(self._ranges[k])]:
            del self._ranges[key]
            self._keys.remove(key)


class MultiRange(RangeCollection):
    """Collection of non-overlapping ranges. A range that overlaps ranges already in the collection is merged
    with all of them into a single range spanning the union."""

    def __init__(self):
        self._ranges: List[Range] = []

    @property
    def ranges(self) -> List[Range]:
        return list(self._ranges)

    def add_range(self, range_to_add: AbstractRange) -> None:
        ObjectValidation.require_object_has_type(range_to_add, AbstractRange)
        merged = Range(range_to_add.start, range_to_add.end)
        # empty ranges cover no position
        if merged.is_empty:
            return
        kept = []
        for r in self._ranges:
            if r.overlap(merged):
                merged = merged.expand_with(r)
            else:
                kept.append(r)
        kept.append(merged)
        self._ranges = sorted(kept)

    def clear(self) -> None:
        self._ranges = []
