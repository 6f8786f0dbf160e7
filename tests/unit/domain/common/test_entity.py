"""Tests for Entity identity semantics and AggregateRoot event recording."""

import pytest

from domainkit.domain.common import (
    DomainEvent,
    EventDeliveryError,
    FixedClock,
    HandlerFailure,
    IdentityAlreadyAssignedError,
    IdentityNotYetAssignedError,
    InvalidArgumentError,
    assign_surrogate_key,
    surrogate_key_of,
)
from domainkit.domain.common.value_objects import ArticleId, CustomerId
from domainkit.domain.customers import Customer, CustomerRegistered, CustomerRenamed


def make_customer(clock: FixedClock, customer_id: CustomerId | None = None) -> Customer:
    return Customer.register("Ada Lovelace", "ada@example.com", id=customer_id, clock=clock)


class RecordingPublisher:
    def __init__(self) -> None:
        self.events: list[DomainEvent] = []

    def publish(self, event: DomainEvent) -> None:
        self.events.append(event)


class TestIdentity:
    def test_identity_before_assignment_fails(self, clock: FixedClock) -> None:
        customer = make_customer(clock)
        with pytest.raises(IdentityNotYetAssignedError):
            customer.identity()

    def test_bind_identity_once(self, clock: FixedClock) -> None:
        customer = make_customer(clock)
        customer.bind_identity(CustomerId(10))
        assert customer.identity() == CustomerId(10)

    def test_bind_identity_twice_fails(self, clock: FixedClock) -> None:
        customer = make_customer(clock)
        customer.bind_identity(CustomerId(10))
        with pytest.raises(IdentityAlreadyAssignedError):
            customer.bind_identity(CustomerId(11))
        assert customer.identity() == CustomerId(10)

    def test_bind_unassigned_identity_fails(self, clock: FixedClock) -> None:
        customer = make_customer(clock)
        with pytest.raises(InvalidArgumentError):
            customer.bind_identity(CustomerId.unassigned())

    def test_bind_identity_of_other_kind_fails(self, clock: FixedClock) -> None:
        customer = make_customer(clock)
        with pytest.raises(InvalidArgumentError):
            customer.bind_identity(ArticleId.new())  # type: ignore[arg-type]

    def test_identity_stable_under_mutation(self, clock: FixedClock) -> None:
        customer = make_customer(clock, CustomerId(3))
        before = customer.identity()
        customer.rename("Augusta Ada King")
        customer.change_email("augusta@example.com")
        assert customer.identity() == before
        assert customer.identity() == customer.identity()


class TestEquality:
    def test_equal_when_identities_equal(self, clock: FixedClock) -> None:
        first = make_customer(clock, CustomerId(1))
        second = Customer.register("Someone Else", "else@example.com", id=CustomerId(1))
        assert first == second
        assert hash(first) == hash(second)

    def test_not_equal_when_identities_differ(self, clock: FixedClock) -> None:
        assert make_customer(clock, CustomerId(1)) != make_customer(clock, CustomerId(2))

    def test_unassigned_entity_never_equal(self, clock: FixedClock) -> None:
        customer = make_customer(clock)
        assert customer != customer
        assert make_customer(clock) != make_customer(clock)


class TestAttributeValidation:
    def test_blank_name_fails_fast(self, clock: FixedClock) -> None:
        with pytest.raises(InvalidArgumentError, match="name cannot be empty") as exc_info:
            Customer.register("  ", "not-an-email", clock=clock)
        assert exc_info.value.field == "name"

    def test_invalid_email(self, clock: FixedClock) -> None:
        with pytest.raises(InvalidArgumentError, match="email must contain"):
            Customer.register("Ada", "ada.example.com", clock=clock)

    def test_failed_mutation_leaves_state(self, clock: FixedClock) -> None:
        customer = make_customer(clock, CustomerId(1))
        customer.collect_events()
        with pytest.raises(InvalidArgumentError):
            customer.rename("")
        assert customer.name == "Ada Lovelace"
        assert customer.pending_events == []


class TestEvents:
    def test_events_are_numbered_in_mutation_order(self, clock: FixedClock) -> None:
        customer = make_customer(clock, CustomerId(1))
        customer.rename("Ada King")
        customer.change_email("king@example.com")
        events = customer.collect_events()
        assert [e.event_type for e in events] == [
            "CustomerRegistered",
            "CustomerRenamed",
            "CustomerEmailChanged",
        ]
        assert [e.sequence for e in events] == [1, 2, 3]
        assert all(e.aggregate_id == CustomerId(1) for e in events)
        assert customer.pending_events == []

    def test_payload_captured_at_emission(self, clock: FixedClock) -> None:
        customer = make_customer(clock, CustomerId(1))
        customer.rename("Ada King")
        customer.rename("Countess Lovelace")
        renamed = [e for e in customer.collect_events() if isinstance(e, CustomerRenamed)]
        assert renamed[0].payload == {"name": "Ada King", "previous_name": "Ada Lovelace"}
        assert renamed[1].payload["previous_name"] == "Ada King"

    def test_payload_is_read_only(self, clock: FixedClock) -> None:
        event = make_customer(clock, CustomerId(1)).collect_events()[0]
        with pytest.raises(TypeError):
            event.payload["name"] = "changed"  # type: ignore[index]

    def test_pending_events_restamped_when_identity_bound(self, clock: FixedClock) -> None:
        customer = make_customer(clock)
        customer.rename("Ada King")
        assert all(e.aggregate_id is None for e in customer.pending_events)

        customer.bind_identity(CustomerId(9))

        events = customer.collect_events()
        assert [e.aggregate_id for e in events] == [CustomerId(9), CustomerId(9)]
        assert [e.sequence for e in events] == [1, 2]

    def test_attached_publisher_receives_events_immediately(self, clock: FixedClock) -> None:
        publisher = RecordingPublisher()
        customer = make_customer(clock, CustomerId(1))
        customer.attach_event_sink(publisher)
        assert [e.event_type for e in publisher.events] == ["CustomerRegistered"]

        customer.rename("Ada King")

        assert [e.event_type for e in publisher.events] == ["CustomerRegistered", "CustomerRenamed"]
        assert customer.pending_events == []

    def test_attached_publisher_waits_for_identity(self, clock: FixedClock) -> None:
        publisher = RecordingPublisher()
        customer = make_customer(clock)
        customer.attach_event_sink(publisher)
        assert publisher.events == []

        customer.bind_identity(CustomerId(4))

        assert len(publisher.events) == 1
        assert isinstance(publisher.events[0], CustomerRegistered)
        assert publisher.events[0].aggregate_id == CustomerId(4)

    def test_delivery_failure_does_not_undo_mutation(self, clock: FixedClock) -> None:
        class FailingPublisher:
            def publish(self, event: DomainEvent) -> None:
                raise EventDeliveryError([HandlerFailure(event.event_type, "h", ValueError())])

        customer = make_customer(clock, CustomerId(1))
        customer.collect_events()
        customer.attach_event_sink(FailingPublisher())

        with pytest.raises(EventDeliveryError):
            customer.rename("Ada King")

        assert customer.name == "Ada King"

    def test_event_occurred_at_comes_from_clock(self, clock: FixedClock) -> None:
        event = make_customer(clock, CustomerId(1)).collect_events()[0]
        assert event.occurred_at == clock.now()

    def test_to_dict(self, clock: FixedClock) -> None:
        event = make_customer(clock, CustomerId(1)).collect_events()[0]
        data = event.to_dict()
        assert data["event_type"] == "CustomerRegistered"
        assert data["aggregate_id"] == 1
        assert data["name"] == "Ada Lovelace"
        assert data["occurred_at"] == clock.now().isoformat()


def test_surrogate_key_is_separate_from_identity(clock: FixedClock) -> None:
    customer = make_customer(clock, CustomerId(1))
    assert surrogate_key_of(customer) is None
    assign_surrogate_key(customer, 77)
    assert surrogate_key_of(customer) == 77
    assert customer.identity() == CustomerId(1)
