"""Protocol for the domain event sink."""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Protocol, TypeVar
from uuid import UUID, uuid4

from domainkit.domain.common.domain_event import DomainEvent

TEvent = TypeVar("TEvent", bound=DomainEvent)

EventHandler = Callable[[TEvent], None]


@dataclass(frozen=True)
class SubscriptionToken:
    """Handle returned by subscribe, used to unsubscribe."""

    event_kind: type[DomainEvent]
    token_id: UUID = field(default_factory=uuid4)


class EventSinkProtocol(Protocol):
    """
    Publish/subscribe channel for domain events.

    Delivery is synchronous: publish returns once every handler
    subscribed to the event's kind has been called.
    """

    def subscribe(
        self, event_kind: type[TEvent], handler: EventHandler[TEvent]
    ) -> SubscriptionToken: ...

    def unsubscribe(self, token: SubscriptionToken) -> bool: ...

    def publish(self, event: DomainEvent) -> None:
        """
        Deliver ``event`` to its subscribers in registration order.

        Raises:
            EventDeliveryError: If one or more handlers failed
        """
        ...

    def publish_all(self, events: Iterable[DomainEvent]) -> None: ...
