"""
Application service for verifying addresses against country reference data.

Verification needs a second aggregate (the Country), so it is not done by
the Address itself: the service loads the country, runs the composite
address rules and announces the outcome as a domain event so other parts
of the system can react without being called directly.
"""

import structlog

from domainkit.application.common.result import Failure, Result, Success
from domainkit.application.ports.event_sink import EventSinkProtocol
from domainkit.application.ports.store import StoreProtocol
from domainkit.domain.common.clock import Clock, SystemClock
from domainkit.domain.common.validation import ValidationResult
from domainkit.domain.common.value_objects import CountryCode
from domainkit.domain.geography.entities.address import Address
from domainkit.domain.geography.entities.country import Country
from domainkit.domain.geography.events import AddressRejected, AddressVerified
from domainkit.domain.geography.services.address_validator import (
    AddressValidationHandler,
    AddressValidator,
    CollectingAddressValidationHandler,
)

logger = structlog.get_logger(__name__)


class AddressVerificationService:
    """Checks addresses against the stored countries and publishes the outcome."""

    def __init__(
        self,
        countries: StoreProtocol[Country, CountryCode],
        event_sink: EventSinkProtocol,
        clock: Clock | None = None,
    ) -> None:
        self.countries = countries
        self.event_sink = event_sink
        self.clock = clock or SystemClock()

    def check(self, address: Address, handler: AddressValidationHandler) -> None:
        """Run the address rules, reporting to ``handler``. Publishes nothing."""
        country = self.countries.find(address.country_code)
        AddressValidator(country).validate(address, handler)

    def verify(self, address: Address) -> Result[Address, ValidationResult]:
        """
        Verify an address and announce the outcome.

        Returns:
            Success with the address, or Failure with the collected violations

        Raises:
            EventDeliveryError: If a subscriber to the outcome event failed
        """
        handler = CollectingAddressValidationHandler()
        self.check(address, handler)
        result = handler.result

        if result.is_valid:
            logger.debug("address_verified", address_id=str(address.id))
            self.event_sink.publish(
                AddressVerified(
                    str(address.country_code),
                    aggregate_id=address.id,
                    occurred_at=self.clock.now(),
                )
            )
            return Success(address)

        logger.info(
            "address_rejected",
            address_id=str(address.id),
            violations=result.kinds,
        )
        self.event_sink.publish(
            AddressRejected(
                str(address.country_code),
                tuple(result.kinds),
                aggregate_id=address.id,
                occurred_at=self.clock.now(),
            )
        )
        return Failure(result)
