"""
Unit of Work interface.

The Unit of Work keeps track of the aggregates touched by a business
transaction, persists them on commit and then dispatches the domain events
they recorded, in the order the aggregates were tracked.

Example:
    with uow:
        customer = Customer.register(name, email)
        uow.add(customers, customer)
        uow.commit()   # binds the identity, then publishes CustomerRegistered
"""

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Self

from domainkit.application.ports.store import StoreProtocol
from domainkit.domain.common import AggregateRoot, DomainEvent


class UnitOfWork(ABC):
    """
    Unit of Work interface (Port).

    The Unit of Work:
    - Tracks aggregates changed in one transaction
    - Persists them on commit
    - Collects and dispatches domain events after persistence
    - Can be used as a context manager

    Event delivery is not part of the transaction: a handler failure after
    commit does not undo what was persisted.
    """

    def __init__(self) -> None:
        self._tracked: list[AggregateRoot] = []

    def track(self, aggregate: AggregateRoot) -> None:
        """Remember ``aggregate`` so its events are dispatched on commit."""
        if not any(tracked is aggregate for tracked in self._tracked):
            self._tracked.append(aggregate)

    @abstractmethod
    def add(self, store: StoreProtocol, aggregate: AggregateRoot) -> None:
        """Stage a new aggregate for ``store``."""
        raise NotImplementedError

    @abstractmethod
    def save(self, store: StoreProtocol, aggregate: AggregateRoot) -> None:
        """Stage changes to an existing aggregate."""
        raise NotImplementedError

    @abstractmethod
    def remove(self, store: StoreProtocol, aggregate: AggregateRoot) -> None:
        """Stage removal of an aggregate."""
        raise NotImplementedError

    @abstractmethod
    def commit(self) -> None:
        """
        Persist all changes, then dispatch the collected domain events.

        Raises:
            EventDeliveryError: If an event handler failed after persistence
        """
        raise NotImplementedError

    @abstractmethod
    def rollback(self) -> None:
        """Discard all staged changes and the events recorded with them."""
        raise NotImplementedError

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """
        Exit the unit of work context.

        If an exception occurred, rollback. Otherwise, do nothing
        (commit must be called explicitly).
        """
        if exc_type is not None:
            self.rollback()

    def collect_events(self) -> list[DomainEvent]:
        """Collect domain events from tracked aggregates, per aggregate in order."""
        events: list[DomainEvent] = []
        for aggregate in self._tracked:
            events.extend(aggregate.collect_events())
        return events
