__version__ = "0.1.0"

from abc import ABC, abstractmethod


class AbstractRange(ABC):
    """Shared AbstractRange base class simplifies imports for type checking"""

    # The 0-based start position of this Range
    start: int

    # The 0-based exclusive end position of this Range
    end: int

    def __len__(self):
        """Returns the length (number of positions) of this Range"""
        return self.size

    @property
    def size(self) -> int:
        """Returns ``end - start``. Ranges are not validated, so this is negative if the caller built
        a range with ``start > end``."""
        return self.end - self.start

    @property
    def is_empty(self) -> bool:
        """Returns True iff this Range covers no position"""
        return self.size == 0

    @abstractmethod
    def __str__(self):
        """Returns a human readable string representation of this Range"""

    @abstractmethod
    def __eq__(self, other):
        """Returns True iff this Range is equal to other object"""

    @abstractmethod
    def __repr__(self):
        """Returns the 'official' string representation of this Range"""

    @abstractmethod
    def overlap(self, other: "AbstractRange") -> bool:
        """Returns True iff this Range shares at least one position with the other Range"""

    @abstractmethod
    def contains(self, other: "AbstractRange") -> bool:
        """Returns True iff the other Range lies fully within this Range"""
