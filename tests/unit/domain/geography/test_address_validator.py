"""Tests for composite address validation."""

import copy

import pytest

from domainkit.domain.common import FixedClock, InvalidArgumentError
from domainkit.domain.common.value_objects import AddressId, CountryCode
from domainkit.domain.geography import (
    Address,
    AddressValidator,
    CollectingAddressValidationHandler,
    Country,
)
from domainkit.domain.geography.services import (
    CITY_NOT_IN_COUNTRY,
    INVALID_POSTCODE,
    UNKNOWN_COUNTRY,
)

NL = CountryCode("NL")


@pytest.fixture
def netherlands() -> Country:
    return Country(
        id=NL,
        name="Netherlands",
        postcode_pattern=r"\d{4} ?[A-Z]{2}",
        cities=frozenset({"Amsterdam", "Utrecht"}),
    )


def make_address(clock: FixedClock, city: str = "Amsterdam", postcode: str = "1012 AB") -> Address:
    return Address.record(AddressId.new(), NL, city, postcode, "Dam 1", clock)


class RecordingHandler:
    """Handler that records the call sequence."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, ...]] = []

    def unknown_country(self, country_code: CountryCode) -> None:
        self.calls.append(("unknown_country", str(country_code)))

    def city_not_in_country(self, city: str, country_code: CountryCode) -> None:
        self.calls.append(("city_not_in_country", city, str(country_code)))

    def invalid_postcode(self, postcode: str, country_code: CountryCode) -> None:
        self.calls.append(("invalid_postcode", postcode, str(country_code)))


def test_valid_address_has_no_violations(netherlands: Country, clock: FixedClock) -> None:
    handler = CollectingAddressValidationHandler()
    AddressValidator(netherlands).validate(make_address(clock), handler)
    assert handler.result.is_valid
    assert len(handler.result) == 0


def test_city_match_is_case_insensitive(netherlands: Country, clock: FixedClock) -> None:
    handler = CollectingAddressValidationHandler()
    AddressValidator(netherlands).validate(make_address(clock, city="utrecht"), handler)
    assert handler.result.is_valid


def test_all_violations_reported_in_rule_order(netherlands: Country, clock: FixedClock) -> None:
    address = make_address(clock, city="Paris", postcode="75001")
    handler = RecordingHandler()

    AddressValidator(netherlands).validate(address, handler)

    assert handler.calls == [
        ("city_not_in_country", "Paris", "NL"),
        ("invalid_postcode", "75001", "NL"),
    ]


def test_collecting_handler_result(netherlands: Country, clock: FixedClock) -> None:
    handler = CollectingAddressValidationHandler()
    AddressValidator(netherlands).validate(make_address(clock, "Paris", "75001"), handler)

    assert handler.result.kinds == [CITY_NOT_IN_COUNTRY, INVALID_POSTCODE]
    assert handler.result.violations[0].message == "Paris is not a city in NL"


def test_unknown_country_stops_further_rules(clock: FixedClock) -> None:
    handler = RecordingHandler()
    AddressValidator(None).validate(make_address(clock, "Paris", "75001"), handler)
    assert handler.calls == [(UNKNOWN_COUNTRY, "NL")]


def test_country_mismatch_is_unknown_country(clock: FixedClock) -> None:
    belgium = Country(id=CountryCode("BE"), name="Belgium", postcode_pattern=r"\d{4}")
    handler = CollectingAddressValidationHandler()
    AddressValidator(belgium).validate(make_address(clock), handler)
    assert handler.result.kinds == [UNKNOWN_COUNTRY]


def test_validation_does_not_mutate_subject(netherlands: Country, clock: FixedClock) -> None:
    address = make_address(clock, "Paris", "75001")
    before = copy.copy(vars(address))

    AddressValidator(netherlands).validate(address, CollectingAddressValidationHandler())

    assert vars(address) == before


def test_attribute_validation_is_separate(clock: FixedClock) -> None:
    with pytest.raises(InvalidArgumentError, match="city cannot be empty"):
        make_address(clock, city=" ")


def test_add_city(netherlands: Country, clock: FixedClock) -> None:
    netherlands.add_city(" Rotterdam ")

    handler = CollectingAddressValidationHandler()
    AddressValidator(netherlands).validate(make_address(clock, city="ROTTERDAM"), handler)

    assert handler.result.is_valid


def test_invalid_postcode_pattern_rejected() -> None:
    with pytest.raises(InvalidArgumentError, match="postcode_pattern"):
        Country(id=NL, name="Netherlands", postcode_pattern="[")


def test_relocate_records_event(clock: FixedClock) -> None:
    address = make_address(clock)
    address.collect_events()
    address.relocate("Oudegracht 1", "Utrecht", "3511 AB")
    events = address.collect_events()
    assert events[0].payload == {"country_code": "NL", "city": "Utrecht", "postcode": "3511 AB"}
