"""Use case for customer registration."""

import structlog

from domainkit.application.common.unit_of_work import UnitOfWork
from domainkit.application.identity.identity_generator import (
    GenerationContext,
    IdentityGenerator,
    IdentityStrategy,
)
from domainkit.application.ports.store import StoreProtocol
from domainkit.domain.common.clock import Clock, SystemClock
from domainkit.domain.common.value_objects import CustomerId
from domainkit.domain.customers.entities.customer import Customer

logger = structlog.get_logger(__name__)


class RegisterCustomerUseCase:
    """Use case for customer registration and profile changes."""

    def __init__(
        self,
        customers: StoreProtocol[Customer, CustomerId],
        identity_generator: IdentityGenerator,
        unit_of_work: UnitOfWork,
        clock: Clock | None = None,
    ) -> None:
        """Initialize use case with dependencies."""
        self.customers = customers
        self.identity_generator = identity_generator
        self.unit_of_work = unit_of_work
        self.clock = clock or SystemClock()

    def register_customer(self, name: str, email: str) -> Customer:
        """
        Register a new customer; the store assigns the identity.

        Returns:
            The persisted customer, with its identity bound

        Raises:
            InvalidArgumentError: If name or email is invalid
            EventDeliveryError: If a subscriber to CustomerRegistered failed
        """
        customer_id = self.identity_generator.generate(
            IdentityStrategy.STORE_ASSIGNED, GenerationContext(CustomerId)
        )
        customer = Customer.register(name=name, email=email, id=customer_id, clock=self.clock)

        with self.unit_of_work as uow:
            uow.add(self.customers, customer)
            uow.commit()

        logger.info("customer_registered", customer_id=customer.identity().value)

        return customer

    def rename_customer(self, customer_id: CustomerId, name: str) -> Customer:
        """
        Raises:
            EntityNotFoundError: If the customer does not exist
            InvalidArgumentError: If the name is invalid
        """
        customer = self.customers.get(customer_id)
        with self.unit_of_work as uow:
            customer.rename(name)
            uow.save(self.customers, customer)
            uow.commit()
        return customer
