"""
:class:`Range` objects are half-open intervals over the positions of a sequence. :class:`StrandedRange` adds the
strand the interval lies on. Both provide the coordinate algebra (overlap, containment, strand inversion) that
features are built on. Range collections gather many ranges, either as distinct intervals or as merged coverage.
"""

from seqfeatures.location.strand import Strand
from seqfeatures.location.range import Range, StrandedRange
from seqfeatures.location.collection import RangeCollection, RangeSet, MultiRange  # noqa F401
