"""
In-process event sink.

Handlers are called synchronously, in registration order, on the thread
that publishes. Registration, deregistration and delivery are serialized
by one re-entrant lock, so a handler may itself publish or subscribe.
"""

import threading
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

import structlog

from domainkit.application.ports.event_sink import EventHandler, SubscriptionToken, TEvent
from domainkit.config import get_settings
from domainkit.domain.common.domain_event import DomainEvent
from domainkit.domain.common.exceptions import EventDeliveryError, HandlerFailure

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class _Subscription:
    token: SubscriptionToken
    handler: Callable[[Any], None]


def _handler_name(handler: Callable[..., None]) -> str:
    return getattr(handler, "__qualname__", None) or repr(handler)


class InMemoryEventSink:
    """
    Lifecycle-scoped publish/subscribe channel.

    A subscription to an event class also receives its subclasses, so
    subscribing to DomainEvent observes everything. A failing handler does
    not stop delivery to the others; all failures are raised together as
    EventDeliveryError once delivery is complete.
    """

    def __init__(self, log_payloads: bool | None = None) -> None:
        self._subscriptions: list[_Subscription] = []
        self._lock = threading.RLock()
        self._log_payloads = (
            get_settings().LOG_EVENT_PAYLOADS if log_payloads is None else log_payloads
        )

    def subscribe(
        self, event_kind: type[TEvent], handler: EventHandler[TEvent]
    ) -> SubscriptionToken:
        if not (isinstance(event_kind, type) and issubclass(event_kind, DomainEvent)):
            raise TypeError(f"{event_kind!r} is not a DomainEvent subclass")
        token = SubscriptionToken(event_kind=event_kind)
        with self._lock:
            self._subscriptions.append(_Subscription(token=token, handler=handler))
        logger.debug(
            "event_handler_subscribed",
            event_kind=event_kind.__name__,
            handler=_handler_name(handler),
        )
        return token

    def unsubscribe(self, token: SubscriptionToken) -> bool:
        """Remove a subscription. Returns False if it was already gone."""
        with self._lock:
            for index, subscription in enumerate(self._subscriptions):
                if subscription.token == token:
                    del self._subscriptions[index]
                    logger.debug("event_handler_unsubscribed", event_kind=token.event_kind.__name__)
                    return True
        return False

    def publish(self, event: DomainEvent) -> None:
        """
        Deliver ``event`` to every matching handler.

        Raises:
            EventDeliveryError: If one or more handlers failed
        """
        failures = self._deliver(event)
        if failures:
            raise EventDeliveryError(failures)

    def publish_all(self, events: Iterable[DomainEvent]) -> None:
        """
        Publish events in order, reporting all handler failures at the end.

        Raises:
            EventDeliveryError: If one or more handlers failed
        """
        failures: list[HandlerFailure] = []
        for event in events:
            failures.extend(self._deliver(event))
        if failures:
            raise EventDeliveryError(failures)

    def _deliver(self, event: DomainEvent) -> list[HandlerFailure]:
        failures: list[HandlerFailure] = []
        with self._lock:
            matching = [s for s in self._subscriptions if isinstance(event, s.token.event_kind)]
            if self._log_payloads:
                logger.debug("event_published", event=event.to_dict(), handlers=len(matching))
            else:
                logger.debug(
                    "event_published",
                    event_type=event.event_type,
                    aggregate_id=str(event.aggregate_id),
                    sequence=event.sequence,
                    handlers=len(matching),
                )
            for subscription in matching:
                try:
                    subscription.handler(event)
                except Exception as err:
                    failure = HandlerFailure(
                        event_type=event.event_type,
                        handler=_handler_name(subscription.handler),
                        error=err,
                    )
                    failures.append(failure)
                    logger.warning(
                        "event_handler_failed",
                        event_type=failure.event_type,
                        handler=failure.handler,
                        error=str(err),
                        exc_info=err,
                    )
        return failures

    def subscriber_count(self, event_kind: type[DomainEvent] | None = None) -> int:
        with self._lock:
            if event_kind is None:
                return len(self._subscriptions)
            return sum(1 for s in self._subscriptions if s.token.event_kind is event_kind)

    def clear(self) -> None:
        """Drop every subscription, e.g. at the end of a request."""
        with self._lock:
            self._subscriptions.clear()
