"""
Features are annotated intervals on named sequences. :class:`SequenceFeature` is the abstract interface,
:class:`FeatureRecord` its default implementation, and :class:`FeatureSet` an owning collection of features that
can be filtered by type, sequence and position.
"""

from seqfeatures.feature.attributes import FeatureAttributes, NO_ATTRIBUTE_SET
from seqfeatures.feature.feature import SequenceFeature, UNSET_SCORE
from seqfeatures.feature.record import FeatureRecord
from seqfeatures.feature.feature_set import FeatureSet  # noqa F401
