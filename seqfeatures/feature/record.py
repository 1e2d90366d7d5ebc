"""
:class:`FeatureRecord` is the default implementation of :class:`~seqfeatures.feature.feature.SequenceFeature`.
It stores its coordinates as a :class:`~seqfeatures.location.range.StrandedRange` and its attributes in a
:class:`~seqfeatures.feature.attributes.FeatureAttributes`.

Records have value semantics: :meth:`FeatureRecord.clone()` returns a fully independent copy, and collections
always store clones of the records they are given.
"""
import copy
import warnings
from typing import Any, Dict, Mapping, Optional, Set

from Bio.SeqFeature import SeqFeature

from seqfeatures.exc import MultiValueQualifierWarning, ReservedQualifierWarning
from seqfeatures.feature.attributes import FeatureAttributes
from seqfeatures.feature.feature import SequenceFeature, UNSET_SCORE
from seqfeatures.location.range import StrandedRange
from seqfeatures.location.strand import Strand

# qualifiers used to carry the source and score of a record on a Biopython SeqFeature
SOURCE_QUALIFIER = "source"
SCORE_QUALIFIER = "score"


def _is_number(value: str) -> bool:
    try:
        float(value)
    except ValueError:
        return False
    return True


class FeatureRecord(SequenceFeature):
    """A very simple implementation of :class:`~seqfeatures.feature.feature.SequenceFeature`, backed by a
    :class:`~seqfeatures.location.range.StrandedRange` and a
    :class:`~seqfeatures.feature.attributes.FeatureAttributes`."""

    def __init__(
        self,
        feature_id: str = "",
        sequence_id: str = "",
        source: str = "",
        feature_type: str = "",
        start: int = 0,
        end: int = 0,
        strand: Any = Strand.UNSTRANDED,
        score: float = UNSET_SCORE,
        attributes: Optional[Mapping[str, str]] = None,
    ):
        """
        Parameters
        ----------
        feature_id
            ID of this feature. Does not need to be unique.
        sequence_id
            ID of the sequence this feature is defined on.
        source
            Algorithm or procedure used to generate the feature.
        feature_type
            Type of this feature.
        start
            0-based start position, included.
        end
            0-based end position, excluded.
        strand
            A :class:`~seqfeatures.location.strand.Strand` or one of ``+``, ``-``, ``.`` and ``?``. Other values
            are stored as ``.``.
        score
            Score of this feature. ``-1`` means unset.
        attributes
            Initial attributes.
        """
        self.feature_id = feature_id
        self.sequence_id = sequence_id
        self.source = source
        self.feature_type = feature_type
        self._range = StrandedRange(start, end, strand)
        self.score = score
        self._attributes = FeatureAttributes(attributes)

    def __str__(self):
        return f"FeatureRecord(({self.sequence_id}:{self._range}), type={self.feature_type}, id={self.feature_id})"

    def __repr__(self):
        return "<{}>".format(str(self))

    def __eq__(self, other):
        if not isinstance(other, self.__class__):
            return False
        return self.to_dict() == other.to_dict()

    __hash__ = None

    @property
    def range(self) -> StrandedRange:
        return self._range.copy()

    @property
    def start(self) -> int:
        return self._range.start

    @property
    def end(self) -> int:
        return self._range.end

    @property
    def strand(self) -> Strand:
        return self._range.strand

    def invert(self) -> None:
        self._range.invert()

    @property
    def attributes(self) -> Dict[str, str]:
        """Returns a copy of the attributes of this feature"""
        return self._attributes.to_dict()

    def get_attribute(self, name: str) -> Optional[str]:
        return self._attributes.get(name)

    def get_or_insert_attribute(self, name: str, default: str = "") -> str:
        return self._attributes.get_or_insert(name, default)

    def set_attribute(self, name: str, value: str) -> None:
        self._attributes.set(name, value)

    def remove_attribute(self, name: str) -> None:
        self._attributes.remove(name)

    def get_attribute_list(self) -> Set[str]:
        return self._attributes.names()

    def has_attribute(self, name: str) -> bool:
        return name in self._attributes

    def clone(self) -> "FeatureRecord":
        new_record = copy.copy(self)
        new_record._range = self._range.copy()
        new_record._attributes = self._attributes.copy()
        return new_record

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a dict usable by :class:`~seqfeatures.models.FeatureRecordModel`."""
        return dict(
            feature_id=self.feature_id,
            sequence_id=self.sequence_id,
            source=self.source,
            feature_type=self.feature_type,
            start=self.start,
            end=self.end,
            strand=self.strand.name,
            score=self.score,
            attributes=self._attributes.to_dict() if self._attributes else None,
        )

    @staticmethod
    def from_dict(vals: Dict[str, Any]) -> "FeatureRecord":
        """Build a :class:`FeatureRecord` from a dictionary."""
        return FeatureRecord(
            feature_id=vals["feature_id"],
            sequence_id=vals["sequence_id"],
            source=vals["source"],
            feature_type=vals["feature_type"],
            start=vals["start"],
            end=vals["end"],
            strand=Strand[vals["strand"]],
            score=vals.get("score", UNSET_SCORE),
            attributes=vals.get("attributes"),
        )

    def to_biopython(self) -> SeqFeature:
        """Convert to a Biopython :class:`~Bio.SeqFeature.SeqFeature`.

        Attributes become single-valued qualifiers. The source and the score, if set, are stored in the
        ``source`` and ``score`` qualifiers. These two qualifiers are reserved: attributes named ``source`` or
        ``score`` are not exported, and a :class:`~seqfeatures.exc.ReservedQualifierWarning` is emitted for each.
        """
        qualifiers = {}
        if self.source:
            qualifiers[SOURCE_QUALIFIER] = [self.source]
        if self.has_score:
            qualifiers[SCORE_QUALIFIER] = [str(self.score)]
        for key, val in self._attributes.to_dict().items():
            if key in (SOURCE_QUALIFIER, SCORE_QUALIFIER):
                warnings.warn(
                    ReservedQualifierWarning(f"Attribute {key} uses a reserved qualifier name and was not exported")
                )
                continue
            qualifiers[key] = [val]
        return SeqFeature(
            location=self._range.to_biopython(),
            type=self.feature_type,
            id=self.feature_id,
            qualifiers=qualifiers,
        )

    @staticmethod
    def from_biopython(
        seq_feature: SeqFeature, sequence_id: str, source: Optional[str] = None
    ) -> "FeatureRecord":
        """Build a :class:`FeatureRecord` from a Biopython :class:`~Bio.SeqFeature.SeqFeature` with a
        single-part location.

        Args:
            seq_feature: The feature to convert.
            sequence_id: ID of the sequence the feature is defined on. Biopython features do not know it.
            source: Source of the new record. If not set, it is read from the ``source`` qualifier.

        Returns:
            A new :class:`FeatureRecord`. Every qualifier other than ``source`` and ``score`` becomes an
            attribute. A ``score`` qualifier that is not a number is kept as a ``score`` attribute. Qualifiers
            with several values keep their first value only and a
            :class:`~seqfeatures.exc.MultiValueQualifierWarning` is emitted.

        Raises:
            UnsupportedOperationException: If the feature location has several parts.
        """
        location = StrandedRange.from_biopython(seq_feature.location)
        attributes = {}
        for key, vals in seq_feature.qualifiers.items():
            if isinstance(vals, (list, tuple)):
                if not vals:
                    continue
                if len(vals) > 1:
                    warnings.warn(
                        MultiValueQualifierWarning(f"Qualifier {key} has {len(vals)} values, keeping the first one")
                    )
                val = vals[0]
            else:
                val = vals
            attributes[key] = str(val)

        qualifier_source = attributes.pop(SOURCE_QUALIFIER, "")
        score = UNSET_SCORE
        if SCORE_QUALIFIER in attributes and _is_number(attributes[SCORE_QUALIFIER]):
            score = float(attributes.pop(SCORE_QUALIFIER))

        return FeatureRecord(
            feature_id=seq_feature.id,
            sequence_id=sequence_id,
            source=source if source is not None else qualifier_source,
            feature_type=seq_feature.type,
            start=location.start,
            end=location.end,
            strand=location.strand,
            score=score,
            attributes=attributes,
        )
