class SeqFeaturesException(Exception):
    """
    Base exception class for SeqFeatures.
    """

    pass


class UnsupportedOperationException(SeqFeaturesException):
    """
    Raised when an object is converted or compared in a way that is unsupported, such as converting a
    multi-part Biopython location into a single range.
    """

    pass


class FeatureIndexError(SeqFeaturesException, IndexError):
    """
    Raised when a FeatureSet is accessed with a position outside of ``0 <= index < len(feature_set)``.
    """

    pass


class ValidationException(SeqFeaturesException):
    """
    Raised when object constructors are given invalid inputs.
    """

    pass


class InvalidFeatureModelError(ValidationException):
    """
    Raised when a feature data model holds coordinates that cannot describe a half-open interval.
    """

    pass


class MultiValueQualifierWarning(UserWarning):
    """
    Emitted when a multi-valued Biopython qualifier is reduced to its first value.
    """

    pass


class ReservedQualifierWarning(UserWarning):
    """
    Emitted when an attribute cannot be exported because its name is a qualifier reserved for the source or
    score of a feature.
    """

    pass
