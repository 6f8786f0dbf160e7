"""
Ean13 identity for catalog products.

Products are identified by the EAN-13 barcode printed on them, supplied by
the client. The last digit is a checksum over the first twelve.
"""

from dataclasses import dataclass

from ..exceptions import InvalidIdentityFormatError
from ..identity import Identity, IdentityValue

_EAN13_LENGTH = 13


def ean13_check_digit(digits: str) -> int:
    """Compute the check digit for the first twelve digits of an EAN-13."""
    total = sum(int(d) * (3 if i % 2 else 1) for i, d in enumerate(digits[:12]))
    return (10 - total % 10) % 10


@dataclass(frozen=True, eq=False)
class Ean13(Identity):
    """
    EAN-13 product code.

    Accepts separators (spaces, hyphens) on input and stores the bare
    thirteen digits.
    """

    value: str | None = None

    @classmethod
    def check_format(cls, value: IdentityValue) -> None:
        if not isinstance(value, str) or len(value) != _EAN13_LENGTH:
            raise InvalidIdentityFormatError(cls.__name__, value, "must be 13 digits")
        # str.isdigit also accepts non-ASCII digits such as superscripts
        if not (value.isascii() and value.isdigit()):
            raise InvalidIdentityFormatError(cls.__name__, value, "must be 13 digits")
        if int(value[-1]) != ean13_check_digit(value):
            raise InvalidIdentityFormatError(cls.__name__, value, "checksum mismatch")

    @classmethod
    def coerce(cls, raw: object) -> str:
        if isinstance(raw, int) and not isinstance(raw, bool):
            raw = str(raw).zfill(_EAN13_LENGTH)
        if not isinstance(raw, str):
            raise InvalidIdentityFormatError(cls.__name__, raw, "must be a string of digits")
        return raw.strip().replace("-", "").replace(" ", "")

    @property
    def gs1_prefix(self) -> str:
        """Three-digit GS1 prefix identifying the issuing organisation."""
        return str(self.value)[:3]
