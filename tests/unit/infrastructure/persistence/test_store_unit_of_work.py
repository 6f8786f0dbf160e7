"""Tests for StoreUnitOfWork."""

import pytest

from domainkit.domain.catalog import Product
from domainkit.domain.common import DomainEvent, DuplicateIdentityError, FixedClock
from domainkit.domain.common.value_objects import CustomerId, Ean13
from domainkit.domain.customers import Customer, CustomerRegistered, CustomerRenamed
from domainkit.infrastructure.events import InMemoryEventSink
from domainkit.infrastructure.persistence import InMemoryStore, StoreUnitOfWork


@pytest.fixture
def customers() -> InMemoryStore[Customer, CustomerId]:
    return InMemoryStore(Customer, CustomerId, sequence_start=1)


@pytest.fixture
def uow(event_sink: InMemoryEventSink) -> StoreUnitOfWork:
    return StoreUnitOfWork(event_sink)


def test_commit_persists_then_publishes(
    uow: StoreUnitOfWork,
    customers: InMemoryStore[Customer, CustomerId],
    event_sink: InMemoryEventSink,
    published: list[DomainEvent],
    clock: FixedClock,
) -> None:
    ada = Customer.register("Ada", "ada@example.com", clock=clock)
    grace = Customer.register("Grace", "grace@example.com", clock=clock)

    def seen_in_store(event: DomainEvent) -> None:
        assert customers.find(event.aggregate_id) is not None  # type: ignore[arg-type]

    event_sink.subscribe(CustomerRegistered, seen_in_store)

    with uow:
        uow.add(customers, ada)
        uow.add(customers, grace)
        assert published == []
        uow.commit()

    assert len(customers) == 2
    assert [e.aggregate_id for e in published] == [CustomerId(1), CustomerId(2)]


def test_events_ordered_per_aggregate(
    uow: StoreUnitOfWork,
    customers: InMemoryStore[Customer, CustomerId],
    published: list[DomainEvent],
    clock: FixedClock,
) -> None:
    ada = Customer.register("Ada", "ada@example.com", clock=clock)
    ada.rename("Ada Lovelace")

    uow.add(customers, ada)
    uow.commit()

    assert [type(e) for e in published] == [CustomerRegistered, CustomerRenamed]
    assert [e.sequence for e in published] == [1, 2]


def test_exception_rolls_back(
    uow: StoreUnitOfWork,
    customers: InMemoryStore[Customer, CustomerId],
    published: list[DomainEvent],
    clock: FixedClock,
) -> None:
    ada = Customer.register("Ada", "ada@example.com", clock=clock)

    with pytest.raises(RuntimeError), uow:
        uow.add(customers, ada)
        raise RuntimeError("abort")

    uow.commit()

    assert len(customers) == 0
    assert published == []
    assert ada.pending_events == []


def test_failed_commit_leaves_stores_untouched(
    uow: StoreUnitOfWork, published: list[DomainEvent], clock: FixedClock
) -> None:
    products: InMemoryStore[Product, Ean13] = InMemoryStore(Product, Ean13)
    code = Ean13("4006381333931")
    first = Product.create(code, "Fountain pen", 2500, clock)
    second = Product.create(code, "Fountain pen refill", 300, clock)

    with pytest.raises(DuplicateIdentityError), uow:
        uow.add(products, first)
        uow.add(products, second)
        uow.commit()

    assert len(products) == 0
    assert published == []


def test_failed_commit_undoes_applied_operations(
    uow: StoreUnitOfWork,
    customers: InMemoryStore[Customer, CustomerId],
    published: list[DomainEvent],
    clock: FixedClock,
) -> None:
    ada = customers.add(Customer.register("Ada", "ada@example.com", clock=clock))
    bob = customers.add(Customer.register("Bob", "bob@example.com", clock=clock))
    grace = Customer.register("Grace", "grace@example.com", clock=clock)
    clashing = Customer.register("Eve", "eve@example.com", id=bob.identity(), clock=clock)

    with pytest.raises(DuplicateIdentityError), uow:
        uow.remove(customers, ada)
        uow.add(customers, grace)
        uow.add(customers, clashing)
        uow.commit()

    assert {c.identity() for c in customers.all()} == {CustomerId(1), CustomerId(2)}
    assert customers.get(CustomerId(1)) is ada
    assert published == []
