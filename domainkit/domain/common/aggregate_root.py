"""
Base class for Aggregate Roots.

Aggregate Roots are the entry point to an aggregate - a cluster of domain
objects that are treated as a single unit. All external references should
go through the aggregate root, and all invariants are enforced here.

Example:
    @dataclass(eq=False)
    class Article(AggregateRoot[ArticleId]):
        id: ArticleId
        title: str

        def retitle(self, title: str) -> None:
            self.title = require_not_blank(title, "title")
            self._record_event(ArticleRevised(self.title, occurred_at=self.clock.now()))
"""

from dataclasses import dataclass, field, replace
from typing import Generic, Protocol

from .clock import Clock, SystemClock
from .domain_event import DomainEvent
from .entity import Entity
from .exceptions import EventDeliveryError, HandlerFailure
from .identity import IdType


class EventPublisher(Protocol):
    """Anything that can deliver a domain event to its subscribers."""

    def publish(self, event: DomainEvent) -> None: ...


@dataclass(eq=False)
class AggregateRoot(Entity[IdType], Generic[IdType]):
    """
    Base class for Aggregate Roots in the domain model.

    Aggregate Roots are:
    - Entry point to an aggregate (cluster of related entities)
    - Responsible for maintaining invariants
    - The only entity referenced from outside the aggregate
    - The source of domain events, numbered in mutation order

    Recorded events stay pending until collected (typically by a Unit of
    Work after persistence). When an event publisher is attached and the
    aggregate has an identity, events are published as they are recorded.
    Events recorded before a store-assigned identity exists are stamped
    with that identity once it is bound.
    """

    clock: Clock = field(default_factory=SystemClock, repr=False, compare=False, kw_only=True)
    _events: list[DomainEvent] = field(default_factory=list, init=False, repr=False, compare=False)
    _event_count: int = field(default=0, init=False, repr=False, compare=False)
    _publisher: EventPublisher | None = field(
        default=None, init=False, repr=False, compare=False
    )

    def attach_event_sink(self, publisher: EventPublisher | None) -> None:
        """
        Publish this aggregate's events through ``publisher`` from now on.

        Pending events are flushed immediately when the identity is known.

        Raises:
            EventDeliveryError: If a handler fails while flushing
        """
        self._publisher = publisher
        if publisher is not None and self.id.is_assigned:
            self._flush()

    def _record_event(self, event: DomainEvent) -> None:
        """Number ``event``, then publish it or keep it pending."""
        self._event_count += 1
        if self.id.is_assigned:
            event = event.stamped(self.id, self._event_count)
        else:
            event = replace(event, sequence=self._event_count)
        self._events.append(event)
        if self._publisher is not None and self.id.is_assigned:
            self._flush()

    def _on_identity_bound(self) -> None:
        self._events = [event.stamped(self.id, event.sequence) for event in self._events]
        if self._publisher is not None:
            self._flush()

    def _flush(self) -> None:
        publisher = self._publisher
        if publisher is None:
            return
        events = self._events.copy()
        self._events.clear()
        failures: list[HandlerFailure] = []
        for event in events:
            try:
                publisher.publish(event)
            except EventDeliveryError as err:
                failures.extend(err.failures)
        if failures:
            raise EventDeliveryError(failures)

    def collect_events(self) -> list[DomainEvent]:
        """
        Collect and clear all recorded domain events.

        This is called by the application layer (e.g., Unit of Work)
        after persisting the aggregate.
        """
        events = self._events.copy()
        self._events.clear()
        return events

    @property
    def pending_events(self) -> list[DomainEvent]:
        """Return pending events without clearing them."""
        return self._events.copy()
