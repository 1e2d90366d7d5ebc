"""
The base interface for sequence features.

A feature is an annotated interval on a named sequence. It carries:

- the id of the feature itself, which does not need to be unique
- the id of the sequence it is defined on
- the source, a text describing the algorithm or procedure that produced the feature
- the type, either free text (``TFXX binding site``) or a controlled vocabulary term (``mRNA``)
- start and end positions. Coordinates are 0-based and half-open, so that if ``start == end`` the feature is
  empty. A single-position feature is for instance ``start=12`` (included), ``end=13`` (excluded).
- a strand
- a score (an E-value or a P-value, for instance)
- string attributes

Subclasses inheriting this interface provide the storage.
"""
from abc import ABC, abstractmethod
from typing import Optional, Set, Union

from seqfeatures import AbstractRange
from seqfeatures.location.range import StrandedRange
from seqfeatures.location.strand import Strand
from seqfeatures.util.object_validation import ObjectValidation

# A score equal to this value means that no score was set
UNSET_SCORE = -1.0


class SequenceFeature(ABC):
    """Abstract feature. Concrete subclasses must store identity, coordinates, score and attributes."""

    feature_id: str
    sequence_id: str
    source: str
    feature_type: str
    score: float

    def __len__(self):
        return self.size

    @property
    def id(self) -> str:
        """Returns the ID of this feature"""
        return self.feature_id

    @id.setter
    def id(self, value: str) -> None:
        self.feature_id = value

    @property
    def type(self) -> str:
        """Returns the type of this feature"""
        return self.feature_type

    @type.setter
    def type(self, value: str) -> None:
        self.feature_type = value

    @property
    @abstractmethod
    def range(self) -> StrandedRange:
        """Returns a copy of the coordinates of this feature. Changing the returned object does not change
        the feature."""

    @property
    def start(self) -> int:
        """0-based start position, included"""
        return self.range.start

    @property
    def end(self) -> int:
        """0-based end position, excluded"""
        return self.range.end

    @property
    def strand(self) -> Strand:
        return self.range.strand

    @property
    def size(self) -> int:
        return self.end - self.start

    @property
    def is_empty(self) -> bool:
        """True if ``start == end``"""
        return self.size == 0

    @property
    def is_point(self) -> bool:
        """True if ``start + 1 == end``"""
        return self.size == 1

    @property
    def is_stranded(self) -> bool:
        return self.strand.is_stranded

    @property
    def is_negative_strand(self) -> bool:
        """True if the feature lies on the negative strand. False if positive, unstranded or unknown."""
        return self.strand is Strand.MINUS

    @property
    def has_score(self) -> bool:
        return self.score != UNSET_SCORE

    @abstractmethod
    def invert(self) -> None:
        """Change the orientation of this feature"""

    def overlap(self, other: Union["SequenceFeature", AbstractRange]) -> bool:
        """Returns True if this feature overlaps the other feature or range.

        Two features overlap only if they are defined on the same sequence. A bare range has no sequence, so
        overlap with a range only compares positions; callers that care about the sequence should first
        restrict themselves to features of that sequence, for instance with
        :meth:`~seqfeatures.feature.feature_set.FeatureSet.get_subset_for_sequence()`.
        """
        if isinstance(other, SequenceFeature):
            if other.sequence_id != self.sequence_id:
                return False
            return self.range.overlap(other.range)
        ObjectValidation.require_object_has_type(other, AbstractRange)
        return self.range.overlap(other)

    def includes(self, other: AbstractRange) -> bool:
        """Returns True if this feature fully contains the given range. The sequence is not checked."""
        ObjectValidation.require_object_has_type(other, AbstractRange)
        return self.range.contains(other)

    def is_included_in(self, other: AbstractRange) -> bool:
        """Returns True if this feature is fully contained in the given range. The sequence is not checked."""
        ObjectValidation.require_object_has_type(other, AbstractRange)
        return other.contains(self.range)

    @abstractmethod
    def get_attribute(self, name: str) -> Optional[str]:
        """Returns the value of the named attribute, or ``NO_ATTRIBUTE_SET`` if it was never set.
        Never modifies the feature."""

    @abstractmethod
    def get_or_insert_attribute(self, name: str, default: str = "") -> str:
        """Returns the value of the named attribute. If it does not exist, it is first set to ``default``."""

    @abstractmethod
    def set_attribute(self, name: str, value: str) -> None:
        """Set the value of an attribute, creating it if needed"""

    @abstractmethod
    def remove_attribute(self, name: str) -> None:
        """Remove an attribute. Does nothing if the attribute does not exist."""

    @abstractmethod
    def get_attribute_list(self) -> Set[str]:
        """Returns the names of all attributes set on this feature"""

    def has_attribute(self, name: str) -> bool:
        return name in self.get_attribute_list()

    @abstractmethod
    def clone(self) -> "SequenceFeature":
        """Returns a deep copy of this feature, with the same concrete type"""
