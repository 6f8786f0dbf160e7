"""
Base classes for entity identities.

An Identity is a value object that durably names an Entity. It wraps a
single opaque (generated) or structured (client-supplied) value and is
immutable once constructed.

Identities created for the store-assigned strategy start out *unassigned*
(value ``None``). An unassigned identity is never equal to anything,
including itself, so entities cannot be confused before persistence.

Example:
    @dataclass(frozen=True, eq=False)
    class CustomerId(IntegerIdentity):
        pass

    CustomerId(42) == CustomerId(42)            # True
    CustomerId(42) == OrderId(42)               # False, different kinds
    CustomerId.unassigned() == CustomerId.unassigned()  # False
"""

from dataclasses import dataclass
from typing import Self, TypeVar
from uuid import UUID, uuid4

from .exceptions import InvalidIdentityFormatError
from .value_object import ValueObject

IdentityValue = int | str | UUID


@dataclass(frozen=True, eq=False)
class Identity(ValueObject):
    """
    Base class for strongly-typed identities.

    Subclasses must be declared with ``@dataclass(frozen=True, eq=False)`` so
    the identity equality rules below are kept, and may override
    ``check_format`` and ``coerce`` to describe their grammar.
    """

    value: IdentityValue | None = None

    def __post_init__(self) -> None:
        if self.value is not None:
            self.check_format(self.value)

    @classmethod
    def check_format(cls, value: IdentityValue) -> None:
        """Raise InvalidIdentityFormatError when ``value`` breaks the grammar."""

    @classmethod
    def coerce(cls, raw: object) -> IdentityValue:
        """Convert raw client input into the wrapped value type."""
        if isinstance(raw, bool) or not isinstance(raw, int | str | UUID):
            raise InvalidIdentityFormatError(cls.__name__, raw, "unsupported value type")
        return raw

    @classmethod
    def parse(cls, raw: object) -> Self:
        """
        Validating constructor over caller-supplied input.

        Raises:
            InvalidIdentityFormatError: If the input does not satisfy the grammar
        """
        if raw is None:
            raise InvalidIdentityFormatError(cls.__name__, raw, "no value supplied")
        return cls(cls.coerce(raw))

    @classmethod
    def unassigned(cls) -> Self:
        """Placeholder for identities that the store assigns on first persistence."""
        return cls(None)

    @property
    def is_assigned(self) -> bool:
        return self.value is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Identity) or type(other) is not type(self):
            return False
        if not self.is_assigned or not other.is_assigned:
            return False
        return self.value == other.value

    def __hash__(self) -> int:
        if not self.is_assigned:
            return object.__hash__(self)
        return hash((type(self), self.value))

    def __str__(self) -> str:
        if not self.is_assigned:
            return "<unassigned>"
        return str(self.value)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.value!r})"

    def to_primitive(self) -> int | str | None:
        """Convert to primitive for serialization."""
        if isinstance(self.value, UUID):
            return str(self.value)
        return self.value


@dataclass(frozen=True, eq=False)
class IntegerIdentity(Identity):
    """Positive integer identity, typically drawn from a store sequence."""

    value: int | None = None

    @classmethod
    def check_format(cls, value: IdentityValue) -> None:
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidIdentityFormatError(cls.__name__, value, "must be an integer")
        if value <= 0:
            raise InvalidIdentityFormatError(cls.__name__, value, "must be positive")

    @classmethod
    def coerce(cls, raw: object) -> int:
        if isinstance(raw, str):
            digits = raw.strip()
            if digits.isascii() and digits.isdigit():
                return int(digits)
        if isinstance(raw, int) and not isinstance(raw, bool):
            return raw
        raise InvalidIdentityFormatError(cls.__name__, raw, "must be an integer")

    def __int__(self) -> int:
        if self.value is None:
            raise TypeError(f"Cannot convert unassigned {self.__class__.__name__} to int")
        return self.value


@dataclass(frozen=True, eq=False)
class UuidIdentity(Identity):
    """128-bit random identity assigned by the application before persistence."""

    value: UUID | None = None

    @classmethod
    def check_format(cls, value: IdentityValue) -> None:
        if not isinstance(value, UUID):
            raise InvalidIdentityFormatError(cls.__name__, value, "must be a UUID")

    @classmethod
    def coerce(cls, raw: object) -> UUID:
        if isinstance(raw, UUID):
            return raw
        if isinstance(raw, str):
            try:
                return UUID(raw)
            except ValueError as err:
                raise InvalidIdentityFormatError(cls.__name__, raw, "malformed UUID") from err
        raise InvalidIdentityFormatError(cls.__name__, raw, "must be a UUID")

    @classmethod
    def new(cls) -> Self:
        """Create a fresh random identity."""
        return cls(uuid4())


IdType = TypeVar("IdType", bound=Identity)
