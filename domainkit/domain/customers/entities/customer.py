"""Customer aggregate root with a store-assigned identity."""

from dataclasses import dataclass

from domainkit.domain.common.aggregate_root import AggregateRoot
from domainkit.domain.common.clock import Clock, SystemClock
from domainkit.domain.common.exceptions import InvalidArgumentError
from domainkit.domain.common.guards import require_max_length, require_not_blank
from domainkit.domain.common.value_objects import CustomerId
from domainkit.domain.customers.events import (
    CustomerEmailChanged,
    CustomerRegistered,
    CustomerRenamed,
)

# Domain constraints
MAX_NAME_LENGTH = 100
MAX_EMAIL_LENGTH = 100


def _valid_email(email: str) -> str:
    email = require_max_length(require_not_blank(email, "email"), "email", MAX_EMAIL_LENGTH)
    if "@" not in email:
        raise InvalidArgumentError("email must contain '@'", field="email", value=email)
    return email


@dataclass(eq=False)
class Customer(AggregateRoot[CustomerId]):
    """
    Customer whose identity is drawn from the store's sequence.

    Business Rules:
    - Name is non-empty, at most MAX_NAME_LENGTH chars
    - Email is non-empty, contains '@', at most MAX_EMAIL_LENGTH chars
    - The identity is unknown until the customer is first added to a store
    """

    id: CustomerId
    name: str
    email: str

    def __post_init__(self) -> None:
        """Validate invariants."""
        self.name = require_max_length(require_not_blank(self.name, "name"), "name", MAX_NAME_LENGTH)
        self.email = _valid_email(self.email)

    def rename(self, name: str) -> None:
        new_name = require_max_length(require_not_blank(name, "name"), "name", MAX_NAME_LENGTH)
        if new_name == self.name:
            return
        previous_name = self.name
        self.name = new_name
        self._record_event(CustomerRenamed(new_name, previous_name, occurred_at=self.clock.now()))

    def change_email(self, email: str) -> None:
        new_email = _valid_email(email)
        if new_email == self.email:
            return
        self.email = new_email
        self._record_event(CustomerEmailChanged(new_email, occurred_at=self.clock.now()))

    @classmethod
    def register(
        cls,
        name: str,
        email: str,
        id: CustomerId | None = None,
        clock: Clock | None = None,
    ) -> "Customer":
        """
        Create a new customer (identity unassigned until persisted).

        Raises:
            InvalidArgumentError: If name or email is invalid
        """
        customer = cls(
            id=id if id is not None else CustomerId.unassigned(),
            name=name,
            email=email,
            clock=clock or SystemClock(),
        )
        customer._record_event(
            CustomerRegistered(customer.name, customer.email, occurred_at=customer.clock.now())
        )
        return customer
