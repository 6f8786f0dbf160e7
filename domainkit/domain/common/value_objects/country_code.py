"""CountryCode identity (ISO 3166-1 alpha-2)."""

from dataclasses import dataclass

from ..exceptions import InvalidIdentityFormatError
from ..identity import Identity, IdentityValue


@dataclass(frozen=True, eq=False)
class CountryCode(Identity):
    """Two-letter uppercase country code, e.g. ``NL``."""

    value: str | None = None

    @classmethod
    def check_format(cls, value: IdentityValue) -> None:
        if not isinstance(value, str) or len(value) != 2 or not value.isascii():
            raise InvalidIdentityFormatError(cls.__name__, value, "must be two ASCII letters")
        if not value.isalpha() or not value.isupper():
            raise InvalidIdentityFormatError(cls.__name__, value, "must be uppercase letters")

    @classmethod
    def coerce(cls, raw: object) -> str:
        if not isinstance(raw, str):
            raise InvalidIdentityFormatError(cls.__name__, raw, "must be a string")
        return raw.strip().upper()
