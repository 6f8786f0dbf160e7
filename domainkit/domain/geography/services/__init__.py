from .address_validator import (
    CITY_NOT_IN_COUNTRY,
    INVALID_POSTCODE,
    UNKNOWN_COUNTRY,
    AddressValidationHandler,
    AddressValidator,
    CollectingAddressValidationHandler,
)

__all__ = [
    "CITY_NOT_IN_COUNTRY",
    "INVALID_POSTCODE",
    "UNKNOWN_COUNTRY",
    "AddressValidationHandler",
    "AddressValidator",
    "CollectingAddressValidationHandler",
]
