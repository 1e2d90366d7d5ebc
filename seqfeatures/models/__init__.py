"""
Data models. These models allow for validation of inputs to a SeqFeatures object.
"""

from seqfeatures.models.models import (
    StrandedRangeModel,
    FeatureRecordModel,
    FeatureSetModel,
)  # noqa: F401
