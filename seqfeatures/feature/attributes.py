"""
Attribute storage for features. Attributes are an open-ended mapping of case-sensitive names to string values,
such as the column 9 tags of a GFF3 row.

Reading and inserting are two separate operations:

* :meth:`FeatureAttributes.get` never modifies the store and returns ``NO_ATTRIBUTE_SET`` for missing names.
* :meth:`FeatureAttributes.get_or_insert` stores the default value first if the name is missing. After calling
  it, the attribute always exists.
"""
from typing import Dict, Iterator, Optional, Set, Mapping

# Returned by lookups of attributes that were never set. Use ``is`` to test for it.
NO_ATTRIBUTE_SET = None


class FeatureAttributes:
    def __init__(self, attributes: Optional[Mapping[str, str]] = None):
        self._attributes: Dict[str, str] = dict(attributes) if attributes else {}

    def __repr__(self):
        return f"{self.__class__.__name__}({self._attributes})"

    def __len__(self):
        return len(self._attributes)

    def __iter__(self) -> Iterator[str]:
        yield from self._attributes

    def __contains__(self, name: str) -> bool:
        return name in self._attributes

    def __eq__(self, other):
        if not isinstance(other, FeatureAttributes):
            return False
        return self._attributes == other._attributes

    __hash__ = None

    def get(self, name: str) -> Optional[str]:
        return self._attributes.get(name, NO_ATTRIBUTE_SET)

    def get_or_insert(self, name: str, default: str = "") -> str:
        return self._attributes.setdefault(name, default)

    def set(self, name: str, value: str) -> None:
        self._attributes[name] = value

    def remove(self, name: str) -> None:
        self._attributes.pop(name, None)

    def names(self) -> Set[str]:
        return set(self._attributes)

    def to_dict(self) -> Dict[str, str]:
        return dict(self._attributes)

    def copy(self) -> "FeatureAttributes":
        # values are immutable strings, so a shallow copy of the dict is a deep copy of the store
        return FeatureAttributes(self._attributes)
