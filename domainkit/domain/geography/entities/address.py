"""
Address aggregate root.

Attribute rules (non-empty parts) are enforced here. Whether the city
belongs to the country and whether the postcode fits the country's format
are relational rules checked by AddressValidator.
"""

from dataclasses import dataclass

from domainkit.domain.common.aggregate_root import AggregateRoot
from domainkit.domain.common.clock import Clock, SystemClock
from domainkit.domain.common.guards import require_not_blank
from domainkit.domain.common.value_objects import AddressId, CountryCode
from domainkit.domain.geography.events import AddressRecorded, AddressRelocated


@dataclass(eq=False)
class Address(AggregateRoot[AddressId]):
    """Postal address in a stated country."""

    id: AddressId
    country_code: CountryCode
    city: str
    postcode: str
    street: str

    def __post_init__(self) -> None:
        """Validate invariants."""
        self.city = require_not_blank(self.city, "city")
        self.postcode = require_not_blank(self.postcode, "postcode")
        self.street = require_not_blank(self.street, "street")

    def relocate(self, street: str, city: str, postcode: str) -> None:
        """
        Move the address within its country.

        Raises:
            InvalidArgumentError: If any part is empty
        """
        new_street = require_not_blank(street, "street")
        new_city = require_not_blank(city, "city")
        new_postcode = require_not_blank(postcode, "postcode")
        self.street, self.city, self.postcode = new_street, new_city, new_postcode
        self._record_event(
            AddressRelocated(
                str(self.country_code), new_city, new_postcode, occurred_at=self.clock.now()
            )
        )

    @classmethod
    def record(
        cls,
        id: AddressId,
        country_code: CountryCode,
        city: str,
        postcode: str,
        street: str,
        clock: Clock | None = None,
    ) -> "Address":
        address = cls(
            id=id,
            country_code=country_code,
            city=city,
            postcode=postcode,
            street=street,
            clock=clock or SystemClock(),
        )
        address._record_event(
            AddressRecorded(
                str(country_code), address.city, address.postcode, occurred_at=address.clock.now()
            )
        )
        return address
