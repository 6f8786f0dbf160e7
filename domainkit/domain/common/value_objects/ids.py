from dataclasses import dataclass

from ..exceptions import InvalidIdentityFormatError
from ..identity import Identity, IdentityValue, IntegerIdentity, UuidIdentity


@dataclass(frozen=True, eq=False)
class ArticleId(UuidIdentity):
    """Strongly-typed article identifier (application-assigned)."""


@dataclass(frozen=True, eq=False)
class AddressId(UuidIdentity):
    """Strongly-typed address identifier (application-assigned)."""


@dataclass(frozen=True, eq=False)
class CustomerId(IntegerIdentity):
    """Strongly-typed customer identifier (store-assigned)."""


@dataclass(frozen=True, eq=False)
class MemberId(Identity):
    """Member identifier owned by the identity-access context."""

    value: str | None = None

    @classmethod
    def check_format(cls, value: IdentityValue) -> None:
        if not isinstance(value, str) or not value.strip():
            raise InvalidIdentityFormatError(cls.__name__, value, "must be a non-empty string")
