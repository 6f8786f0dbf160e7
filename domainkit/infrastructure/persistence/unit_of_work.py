"""Unit of Work over in-memory stores."""

from collections.abc import Callable
from dataclasses import dataclass

import structlog

from domainkit.application.common.unit_of_work import UnitOfWork
from domainkit.application.ports.event_sink import EventSinkProtocol
from domainkit.application.ports.store import StoreProtocol
from domainkit.domain.common.aggregate_root import AggregateRoot

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class _StagedOperation:
    apply: Callable[[], object]
    undo: Callable[[], object]


def _nothing() -> None:
    return None


class StoreUnitOfWork(UnitOfWork):
    """
    Stages store operations and applies them on commit.

    After the stores are updated, the events recorded by the tracked
    aggregates are published through the event sink. If a store operation
    fails during commit, the operations already applied are undone in
    reverse order and the error is re-raised, so the stores are left as
    they were before commit.
    """

    def __init__(self, event_sink: EventSinkProtocol) -> None:
        super().__init__()
        self._event_sink = event_sink
        self._staged: list[_StagedOperation] = []

    def add(self, store: StoreProtocol, aggregate: AggregateRoot) -> None:
        self.track(aggregate)
        self._staged.append(
            _StagedOperation(
                apply=lambda: store.add(aggregate), undo=lambda: store.remove(aggregate)
            )
        )

    def save(self, store: StoreProtocol, aggregate: AggregateRoot) -> None:
        self.track(aggregate)
        # The in-memory store holds the aggregate itself, so there is no prior row to restore
        self._staged.append(_StagedOperation(apply=lambda: store.save(aggregate), undo=_nothing))

    def remove(self, store: StoreProtocol, aggregate: AggregateRoot) -> None:
        self.track(aggregate)
        self._staged.append(
            _StagedOperation(
                apply=lambda: store.remove(aggregate), undo=lambda: store.add(aggregate)
            )
        )

    def commit(self) -> None:
        """
        Apply the staged operations, then publish the collected events.

        Raises:
            DomainError: If a store operation fails; nothing stays applied
            EventDeliveryError: If an event handler failed after persistence
        """
        staged, self._staged = self._staged, []
        applied: list[_StagedOperation] = []
        try:
            for operation in staged:
                operation.apply()
                applied.append(operation)
        except Exception:
            for operation in reversed(applied):
                operation.undo()
            logger.warning(
                "unit_of_work_commit_failed", operations=len(staged), undone=len(applied)
            )
            raise
        events = self.collect_events()
        self._tracked.clear()
        logger.debug("unit_of_work_committed", operations=len(staged), events=len(events))
        self._event_sink.publish_all(events)

    def rollback(self) -> None:
        discarded = self.collect_events()
        self._tracked.clear()
        self._staged.clear()
        logger.info("unit_of_work_rolled_back", discarded_events=len(discarded))
