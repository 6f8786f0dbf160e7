"""Geography domain layer."""

from domainkit.domain.geography.entities import Address, Country
from domainkit.domain.geography.events import (
    AddressRecorded,
    AddressRejected,
    AddressRelocated,
    AddressVerified,
)
from domainkit.domain.geography.services import (
    AddressValidationHandler,
    AddressValidator,
    CollectingAddressValidationHandler,
)

__all__ = [
    "Address",
    "AddressRecorded",
    "AddressRejected",
    "AddressRelocated",
    "AddressValidationHandler",
    "AddressValidator",
    "AddressVerified",
    "CollectingAddressValidationHandler",
    "Country",
]
