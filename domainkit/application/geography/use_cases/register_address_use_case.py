"""Use case for registering a verified address."""

import structlog

from domainkit.application.geography.services.address_verification_service import (
    AddressVerificationService,
)
from domainkit.application.identity.identity_generator import (
    GenerationContext,
    IdentityGenerator,
    IdentityStrategy,
)
from domainkit.application.ports.event_sink import EventSinkProtocol
from domainkit.application.ports.store import StoreProtocol
from domainkit.config import get_settings
from domainkit.domain.common.clock import Clock, SystemClock
from domainkit.domain.common.exceptions import CompositeValidationError
from domainkit.domain.common.value_objects import AddressId, CountryCode
from domainkit.domain.geography.entities.address import Address

logger = structlog.get_logger(__name__)


class RegisterAddressUseCase:
    """
    Register a new address.

    Whether an address with composite violations may still be persisted is
    decided here, not by the validator: fail-closed (the default, from
    FAIL_CLOSED_VALIDATION) refuses it, fail-open persists it and logs the
    violations.
    """

    def __init__(
        self,
        addresses: StoreProtocol[Address, AddressId],
        verification_service: AddressVerificationService,
        identity_generator: IdentityGenerator,
        event_sink: EventSinkProtocol,
        clock: Clock | None = None,
        fail_closed: bool | None = None,
    ) -> None:
        """Initialize use case with dependencies."""
        self.addresses = addresses
        self.verification_service = verification_service
        self.identity_generator = identity_generator
        self.event_sink = event_sink
        self.clock = clock or SystemClock()
        self.fail_closed = get_settings().FAIL_CLOSED_VALIDATION if fail_closed is None else fail_closed

    def register_address(
        self,
        country_code: str,
        city: str,
        postcode: str,
        street: str,
        fail_closed: bool | None = None,
    ) -> Address:
        """
        Register an address in a country.

        Args:
            country_code: ISO 3166-1 alpha-2 code supplied by the caller
            city: City name
            postcode: Postcode in the country's format
            street: Street and house number
            fail_closed: Override the use case's fail-closed setting for this call

        Returns:
            The persisted address

        Raises:
            InvalidIdentityFormatError: If the country code is malformed
            InvalidArgumentError: If any address part is empty
            CompositeValidationError: If verification fails and the call is fail-closed
        """
        code = self.identity_generator.generate(
            IdentityStrategy.CLIENT_SUPPLIED, GenerationContext(CountryCode, raw=country_code)
        )
        address_id = self.identity_generator.generate(
            IdentityStrategy.APPLICATION_ASSIGNED, GenerationContext(AddressId)
        )
        address = Address.record(
            id=address_id,
            country_code=code,
            city=city,
            postcode=postcode,
            street=street,
            clock=self.clock,
        )

        outcome = self.verification_service.verify(address)
        if outcome.is_failure:
            violations = outcome.unwrap_error().violations
            closed = self.fail_closed if fail_closed is None else fail_closed
            if closed:
                raise CompositeValidationError("Address", violations)
            logger.warning(
                "address_registered_with_violations",
                address_id=str(address.id),
                violations=[v.kind for v in violations],
            )

        self.addresses.add(address)
        self.event_sink.publish_all(address.collect_events())

        logger.info("address_registered", address_id=str(address.id), country_code=str(code))

        return address
