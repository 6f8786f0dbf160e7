"""
Composite validation for addresses.

An address can be valid attribute by attribute and still be wrong as a
whole: a city that is not in the stated country, or a postcode that does
not follow that country's format. AddressValidator reports every such
problem through an AddressValidationHandler in one pass.
"""

from typing import Protocol

from domainkit.domain.common.validation import CompositeValidator, ValidationResultHandler
from domainkit.domain.common.value_objects import CountryCode
from domainkit.domain.geography.entities.address import Address
from domainkit.domain.geography.entities.country import Country

UNKNOWN_COUNTRY = "unknown_country"
CITY_NOT_IN_COUNTRY = "city_not_in_country"
INVALID_POSTCODE = "invalid_postcode"


class AddressValidationHandler(Protocol):
    """Receives one call per violated address rule."""

    def unknown_country(self, country_code: CountryCode) -> None: ...

    def city_not_in_country(self, city: str, country_code: CountryCode) -> None: ...

    def invalid_postcode(self, postcode: str, country_code: CountryCode) -> None: ...


class CollectingAddressValidationHandler(ValidationResultHandler):
    """AddressValidationHandler that records violations into a ValidationResult."""

    def unknown_country(self, country_code: CountryCode) -> None:
        self._record(UNKNOWN_COUNTRY, f"Country {country_code} is not known")

    def city_not_in_country(self, city: str, country_code: CountryCode) -> None:
        self._record(CITY_NOT_IN_COUNTRY, f"{city} is not a city in {country_code}")

    def invalid_postcode(self, postcode: str, country_code: CountryCode) -> None:
        self._record(INVALID_POSTCODE, f"{postcode} is not a valid postcode in {country_code}")


class AddressValidator(CompositeValidator[Address, AddressValidationHandler]):
    """
    Checks an address against its country.

    Rules, in order:
    1. The stated country is known (otherwise nothing else can be checked)
    2. The city belongs to the country
    3. The postcode matches the country's postcode format
    """

    def __init__(self, country: Country | None) -> None:
        self._country = country

    def validate(self, subject: Address, handler: AddressValidationHandler) -> None:
        country = self._country
        if country is None or country.id != subject.country_code:
            handler.unknown_country(subject.country_code)
            return

        if not country.has_city(subject.city):
            handler.city_not_in_country(subject.city, subject.country_code)

        if not country.accepts_postcode(subject.postcode):
            handler.invalid_postcode(subject.postcode, subject.country_code)
