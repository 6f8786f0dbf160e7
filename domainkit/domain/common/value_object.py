"""
Base class for Value Objects.

Value Objects are immutable objects that are defined by their attributes
rather than by identity. Two value objects are equal if all their
attributes are equal.

Example:
    @dataclass(frozen=True)
    class Postcode(ValueObject):
        value: str

        def __post_init__(self) -> None:
            require_not_blank(self.value, "postcode")
"""

from dataclasses import fields, is_dataclass


class ValueObject:
    """
    Base class for Value Objects in the domain model.

    Value Objects are:
    - Immutable (use frozen=True in dataclass)
    - Compared by value (all attributes must match)
    - Self-validating (validation in __post_init__)
    """

    def _values(self) -> tuple[object, ...]:
        if is_dataclass(self):
            return tuple(getattr(self, f.name) for f in fields(self))
        return tuple(self.__dict__.values())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self._values() == other._values()

    def __hash__(self) -> int:
        return hash((self.__class__, self._values()))

    def to_primitive(self) -> object:
        """
        Convert to primitive Python type for serialization.

        Single-attribute value objects collapse to that attribute.
        """
        values = self._values()
        if len(values) == 1:
            return values[0]
        if is_dataclass(self):
            return {f.name: getattr(self, f.name) for f in fields(self)}
        return dict(self.__dict__)
