from typing import Any, Type

from seqfeatures.exc import FeatureIndexError


class ObjectValidation:
    @staticmethod
    def require_object_has_type(obj: Any, required_type: Type):
        if not isinstance(obj, required_type):
            raise TypeError("Object must have type {}, not {}".format(required_type.__name__, type(obj).__name__))

    @staticmethod
    def require_index_in_bounds(index: int, size: int):
        if not isinstance(index, int) or isinstance(index, bool):
            raise TypeError("Index must be an integer, not {}".format(type(index).__name__))
        if not 0 <= index < size:
            raise FeatureIndexError("Index {} is out of bounds for a set of {} features".format(index, size))
