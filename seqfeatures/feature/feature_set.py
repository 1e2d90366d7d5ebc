"""
A :class:`FeatureSet` is an ordered collection of features, with a few queries to select subsets of them.

Every feature added to a set is cloned, and the set owns its clones. Subsets returned by the ``get_subset_for_*``
methods hold their own clones too, so they are snapshots: modifying the original features, the parent set or
another subset never changes them.

Every query is a linear scan over the features in insertion order. No index is kept, so repeated queries scan the
set again.
"""
import logging
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Set, Union

from seqfeatures import AbstractRange
from seqfeatures.feature.feature import SequenceFeature
from seqfeatures.feature.record import FeatureRecord
from seqfeatures.location.collection import RangeCollection
from seqfeatures.util.object_validation import ObjectValidation

logger = logging.getLogger(__name__)


class FeatureSet:
    """
    A simple ensemble of sequence features.

    Features are kept in insertion order, duplicates included. Positional access with :meth:`get_feature` or
    ``feature_set[i]`` returns the stored feature itself; treat it as read-only and :meth:`clone()
    <seqfeatures.feature.feature.SequenceFeature.clone>` it before making changes.
    """

    def __init__(self, features: Optional[Iterable[SequenceFeature]] = None):
        self._features: List[SequenceFeature] = []
        if features:
            for feature in features:
                self.add_feature(feature)

    def __repr__(self):
        return f"{self.__class__.__name__}({','.join(str(f) for f in self._features)})"

    def __len__(self):
        return len(self._features)

    def __iter__(self) -> Iterator[SequenceFeature]:
        yield from self._features

    def __getitem__(self, index: int) -> SequenceFeature:
        return self.get_feature(index)

    def __eq__(self, other):
        if not isinstance(other, FeatureSet):
            return False
        return self._features == other._features

    __hash__ = None

    def __copy__(self) -> "FeatureSet":
        return self.copy()

    def __deepcopy__(self, memo) -> "FeatureSet":
        return self.copy()

    def copy(self) -> "FeatureSet":
        """Returns a new set holding clones of every feature of this set"""
        return FeatureSet(self._features)

    @property
    def number_of_features(self) -> int:
        return len(self._features)

    @property
    def is_empty(self) -> bool:
        """True if the set contains no feature"""
        return len(self._features) == 0

    def clear(self) -> None:
        """Remove all features from this set"""
        self._features = []

    def get_feature(self, index: int) -> SequenceFeature:
        """Returns the feature at the given position.

        Raises:
            FeatureIndexError: If ``index`` is not in ``[0, len(self))``. Negative indices are not supported.
        """
        ObjectValidation.require_index_in_bounds(index, len(self._features))
        return self._features[index]

    def add_feature(self, feature: SequenceFeature) -> None:
        """Add a feature to this set. The feature is cloned, and the clone is owned by this set."""
        ObjectValidation.require_object_has_type(feature, SequenceFeature)
        self._features.append(feature.clone())

    def get_sequences(self) -> Set[str]:
        """Returns the IDs of all sequences that features of this set are defined on"""
        return {feature.sequence_id for feature in self._features}

    def get_types(self) -> Set[str]:
        """Returns all feature types in this set"""
        return {feature.feature_type for feature in self._features}

    def fill_range_collection(self, coords: RangeCollection) -> None:
        """Add the coordinates of every feature to a range collection. The collection is not cleared first."""
        ObjectValidation.require_object_has_type(coords, RangeCollection)
        for feature in self._features:
            coords.add_range(feature.range)

    def fill_range_collection_for_sequence(self, sequence_id: str, coords: RangeCollection) -> None:
        """Add the coordinates of every feature defined on the given sequence to a range collection.
        The collection is not cleared first."""
        ObjectValidation.require_object_has_type(coords, RangeCollection)
        for feature in self._features:
            if feature.sequence_id == sequence_id:
                coords.add_range(feature.range)

    def _subset(self, keep: Callable[[SequenceFeature], bool], query: Any) -> "FeatureSet":
        subset = FeatureSet()
        for feature in self._features:
            if keep(feature):
                subset.add_feature(feature)
        logger.debug(f"Query {query} kept {len(subset)} of {len(self)} features")
        return subset

    def get_subset_for_type(self, feature_type: str) -> "FeatureSet":
        """Returns a new set with all features of the given type"""
        return self._subset(lambda f: f.feature_type == feature_type, f"type={feature_type}")

    def get_subset_for_types(self, feature_types: Union[str, Iterable[str]]) -> "FeatureSet":
        """Returns a new set with all features of any of the given types. A single type may be given as a string."""
        if isinstance(feature_types, str):
            feature_types = {feature_types}
        else:
            feature_types = set(feature_types)
        return self._subset(lambda f: f.feature_type in feature_types, f"types={sorted(feature_types)}")

    def get_subset_for_sequence(self, sequence_id: str) -> "FeatureSet":
        """Returns a new set with all features defined on the given sequence"""
        return self._subset(lambda f: f.sequence_id == sequence_id, f"sequence={sequence_id}")

    def get_subset_for_sequences(self, sequence_ids: Union[str, Iterable[str]]) -> "FeatureSet":
        """Returns a new set with all features defined on any of the given sequences. A single sequence ID may be
        given as a string."""
        if isinstance(sequence_ids, str):
            sequence_ids = {sequence_ids}
        else:
            sequence_ids = set(sequence_ids)
        return self._subset(lambda f: f.sequence_id in sequence_ids, f"sequences={sorted(sequence_ids)}")

    def get_subset_for_range(self, query_range: AbstractRange, complete: bool) -> "FeatureSet":
        """Returns a new set with the features found in the given range.

        Comparisons are made on positions only: neither strand nor sequence is considered, so this is usually
        called on the result of :meth:`get_subset_for_sequence`.

        Here is an example, with a query range ``[15, 25)``:

        .. code-block::

                    10        15        20        25        30
            query:            [===================)
            F1:     [===================)
            F2:                 [=====)
            F3:                                   [=========)

        +-----------+------------+
        | complete  | result     |
        +===========+============+
        | True      | F2         |
        +-----------+------------+
        | False     | F1,F2      |
        +-----------+------------+

        F3 only touches the end of the query and is never returned.

        Args:
            query_range: The range to look into.
            complete: If ``True``, only keep features fully included in ``query_range``. Otherwise, keep every
                feature overlapping it.

        Returns:
           A new :class:`FeatureSet` that may be empty.
        """
        ObjectValidation.require_object_has_type(query_range, AbstractRange)
        if complete:
            keep = lambda f: f.is_included_in(query_range)  # noqa: E731
        else:
            keep = lambda f: f.overlap(query_range)  # noqa: E731
        return self._subset(keep, f"range={query_range}, complete={complete}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a dict usable by :class:`~seqfeatures.models.FeatureSetModel`. Every feature must provide
        a ``to_dict()`` method."""
        return dict(features=[feature.to_dict() for feature in self._features])

    @staticmethod
    def from_dict(vals: Dict[str, Any]) -> "FeatureSet":
        """Build a :class:`FeatureSet` of :class:`~seqfeatures.feature.record.FeatureRecord` from a dictionary."""

        feature_set = FeatureSet()
        for feature in vals["features"]:
            feature_set._features.append(FeatureRecord.from_dict(feature))
        return feature_set
