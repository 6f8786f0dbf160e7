"""Pytest configuration and fixtures."""

from collections.abc import Generator
from datetime import UTC, datetime

import pytest

from domainkit.config import configure_logging
from domainkit.domain.common import DomainEvent, FixedClock
from domainkit.infrastructure.events import InMemoryEventSink

START = datetime(2024, 3, 1, 9, 30, tzinfo=UTC)


@pytest.fixture(scope="session", autouse=True)
def _logging() -> None:
    """Structured logging configured as in the test environment."""
    configure_logging("test")


@pytest.fixture
def clock() -> FixedClock:
    """Clock frozen at a known instant."""
    return FixedClock(START)


@pytest.fixture
def event_sink() -> Generator[InMemoryEventSink, None, None]:
    """Fresh event sink per test, cleared afterwards."""
    sink = InMemoryEventSink(log_payloads=False)
    yield sink
    sink.clear()


@pytest.fixture
def published(event_sink: InMemoryEventSink) -> list[DomainEvent]:
    """Every event published on ``event_sink``, in delivery order."""
    events: list[DomainEvent] = []
    event_sink.subscribe(DomainEvent, events.append)
    return events
