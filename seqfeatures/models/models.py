"""
Data models. These models allow for validation of inputs to a SeqFeatures object, acting as a JSON schema for
serializing and deserializing features and feature sets.
"""
from typing import Dict, List, Optional, ClassVar, Type

from marshmallow import Schema
from marshmallow_dataclass import dataclass

from seqfeatures.exc import InvalidFeatureModelError
from seqfeatures.feature.feature import UNSET_SCORE
from seqfeatures.feature.feature_set import FeatureSet
from seqfeatures.feature.record import FeatureRecord
from seqfeatures.location.range import StrandedRange
from seqfeatures.location.strand import Strand


@dataclass
class BaseModel:
    """Base for all of the models."""

    Schema: ClassVar[Type[Schema]] = Schema  # noqa: F811

    class Meta:
        ordered = True


@dataclass
class StrandedRangeModel(BaseModel):
    """Data model that allows construction of a :class:`~seqfeatures.location.range.StrandedRange` object."""

    start: int
    end: int
    strand: Strand = Strand.UNSTRANDED

    def to_stranded_range(self) -> StrandedRange:
        return StrandedRange(self.start, self.end, self.strand)

    @staticmethod
    def from_stranded_range(stranded_range: StrandedRange) -> "StrandedRangeModel":
        return StrandedRangeModel.Schema().load(
            dict(start=stranded_range.start, end=stranded_range.end, strand=stranded_range.strand.name)
        )


@dataclass
class FeatureRecordModel(BaseModel):
    """Data model that allows construction of a :class:`~seqfeatures.feature.record.FeatureRecord` object.

    Feature types are arbitrary here, and not enumerated.
    """

    feature_id: str
    sequence_id: str
    source: str
    feature_type: str
    start: int
    end: int
    strand: Strand = Strand.UNSTRANDED
    score: float = UNSET_SCORE
    attributes: Optional[Dict[str, str]] = None

    def to_feature_record(self) -> FeatureRecord:
        """Construct a :class:`~seqfeatures.feature.record.FeatureRecord` from a :class:`FeatureRecordModel`."""
        if not 0 <= self.start <= self.end:
            raise InvalidFeatureModelError(
                f"Positions must satisfy 0 <= start <= end. Start: {self.start}, end: {self.end}"
            )
        return FeatureRecord(
            feature_id=self.feature_id,
            sequence_id=self.sequence_id,
            source=self.source,
            feature_type=self.feature_type,
            start=self.start,
            end=self.end,
            strand=self.strand,
            score=self.score,
            attributes=self.attributes,
        )

    @staticmethod
    def from_feature_record(feature: FeatureRecord) -> "FeatureRecordModel":
        """Convert a :class:`~seqfeatures.feature.record.FeatureRecord` to a :class:`FeatureRecordModel`"""
        return FeatureRecordModel.Schema().load(feature.to_dict())


@dataclass
class FeatureSetModel(BaseModel):
    """
    Data model that allows construction of a :class:`~seqfeatures.feature.feature_set.FeatureSet` object.

    Features keep their order.
    """

    features: List[FeatureRecordModel]

    def to_feature_set(self) -> FeatureSet:
        feature_set = FeatureSet()
        for feature in self.features:
            feature_set.add_feature(feature.to_feature_record())
        return feature_set

    @staticmethod
    def from_feature_set(feature_set: FeatureSet) -> "FeatureSetModel":
        return FeatureSetModel.Schema().load(feature_set.to_dict())
