"""Tests for EnrollCollaboratorUseCase with identities from the identity-access context."""

import pytest

from domainkit.application.collaboration.use_cases import EnrollCollaboratorUseCase
from domainkit.application.identity import IdentityGenerator
from domainkit.domain.collaboration import (
    Collaborator,
    CollaboratorJoined,
    CollaboratorProfileSynchronized,
)
from domainkit.domain.common import (
    DomainEvent,
    DuplicateIdentityError,
    FixedClock,
    ForeignIdentityUnavailableError,
    GenerationFailedError,
)
from domainkit.domain.common.foreign import ForeignIdentityChanged
from domainkit.domain.common.value_objects import MemberId
from domainkit.infrastructure.events import InMemoryEventSink
from domainkit.infrastructure.identity_access import InMemoryMemberDirectory
from domainkit.infrastructure.persistence import InMemoryStore


@pytest.fixture
def directory(event_sink: InMemoryEventSink, clock: FixedClock) -> InMemoryMemberDirectory:
    directory = InMemoryMemberDirectory(event_sink, clock)
    directory.register_member("grace@example.com", "Grace")
    return directory


@pytest.fixture
def collaborators() -> InMemoryStore[Collaborator, MemberId]:
    return InMemoryStore(Collaborator, MemberId)


@pytest.fixture
def use_case(
    collaborators: InMemoryStore[Collaborator, MemberId],
    directory: InMemoryMemberDirectory,
    event_sink: InMemoryEventSink,
    clock: FixedClock,
) -> EnrollCollaboratorUseCase:
    generator = IdentityGenerator.standard(foreign_lookup=directory, event_sink=event_sink)
    return EnrollCollaboratorUseCase(collaborators, generator, event_sink, clock)


def test_enroll_uses_member_identity(
    use_case: EnrollCollaboratorUseCase,
    collaborators: InMemoryStore[Collaborator, MemberId],
    published: list[DomainEvent],
) -> None:
    collaborator = use_case.enroll("grace@example.com", "Grace")

    assert collaborator.identity() == MemberId("mbr-000001")
    assert collaborators.get(MemberId("mbr-000001")) is collaborator
    assert [type(e) for e in published] == [CollaboratorJoined]
    assert published[0].aggregate_id == collaborator.id


def test_profile_changes_are_synchronized(
    use_case: EnrollCollaboratorUseCase,
    directory: InMemoryMemberDirectory,
    published: list[DomainEvent],
) -> None:
    collaborator = use_case.enroll("grace@example.com", "Grace")

    directory.update_profile(collaborator.id, display_name="Grace Hopper", email="gh@example.com")

    assert collaborator.display_name == "Grace Hopper"
    assert collaborator.email == "gh@example.com"
    assert collaborator.id == MemberId("mbr-000001")
    assert [type(e) for e in published] == [
        CollaboratorJoined,
        ForeignIdentityChanged,
        CollaboratorProfileSynchronized,
    ]


def test_withdrawn_collaborator_stops_synchronizing(
    use_case: EnrollCollaboratorUseCase,
    directory: InMemoryMemberDirectory,
    collaborators: InMemoryStore[Collaborator, MemberId],
    event_sink: InMemoryEventSink,
) -> None:
    collaborator = use_case.enroll("grace@example.com", "Grace")

    use_case.withdraw(collaborator.id)
    directory.update_profile(collaborator.id, display_name="Grace Hopper")

    assert collaborator.display_name == "Grace"
    assert len(collaborators) == 0
    assert event_sink.subscriber_count(ForeignIdentityChanged) == 0


def test_unknown_member(use_case: EnrollCollaboratorUseCase) -> None:
    with pytest.raises(ForeignIdentityUnavailableError):
        use_case.enroll("nobody@example.com", "Nobody")


def test_directory_offline(
    use_case: EnrollCollaboratorUseCase, directory: InMemoryMemberDirectory
) -> None:
    directory.go_offline()
    with pytest.raises(GenerationFailedError):
        use_case.enroll("grace@example.com", "Grace")


def test_enroll_twice(use_case: EnrollCollaboratorUseCase) -> None:
    use_case.enroll("grace@example.com", "Grace")
    with pytest.raises(DuplicateIdentityError):
        use_case.enroll("grace@example.com", "Grace")
