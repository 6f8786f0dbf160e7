"""Use case for enrolling members of the identity-access context as collaborators."""

import structlog

from domainkit.application.identity.identity_generator import (
    GenerationContext,
    IdentityGenerator,
    IdentityStrategy,
)
from domainkit.application.ports.event_sink import EventSinkProtocol, SubscriptionToken
from domainkit.application.ports.store import StoreProtocol
from domainkit.domain.collaboration.entities.collaborator import Collaborator
from domainkit.domain.common.clock import Clock, SystemClock
from domainkit.domain.common.value_objects import MemberId

logger = structlog.get_logger(__name__)


class EnrollCollaboratorUseCase:
    """Use case for enrolling and withdrawing collaborators."""

    def __init__(
        self,
        collaborators: StoreProtocol[Collaborator, MemberId],
        identity_generator: IdentityGenerator,
        event_sink: EventSinkProtocol,
        clock: Clock | None = None,
    ) -> None:
        """Initialize use case with dependencies."""
        self.collaborators = collaborators
        self.identity_generator = identity_generator
        self.event_sink = event_sink
        self.clock = clock or SystemClock()
        self._subscriptions: dict[MemberId, SubscriptionToken] = {}

    def enroll(self, email: str, display_name: str) -> Collaborator:
        """
        Enroll the member registered under ``email``.

        The collaborator's identity is the member identity resolved by the
        identity-access context, and profile changes made there are applied
        to the collaborator until it is withdrawn. From enrollment on, the
        collaborator publishes its own events through the event sink.

        Raises:
            ForeignIdentityUnavailableError: If no member has that email
            GenerationFailedError: If the identity-access context is unavailable
            DuplicateIdentityError: If the member is already enrolled
        """
        member_id = self.identity_generator.generate(
            IdentityStrategy.FOREIGN_CONTEXT,
            GenerationContext(MemberId, criteria={"email": email}),
        )
        collaborator = Collaborator.join(
            id=member_id, display_name=display_name, email=email, clock=self.clock
        )
        self.collaborators.add(collaborator)
        self._subscriptions[member_id] = self.identity_generator.track_foreign(collaborator)
        collaborator.attach_event_sink(self.event_sink)

        logger.info("collaborator_enrolled", member_id=str(member_id))

        return collaborator

    def withdraw(self, member_id: MemberId) -> None:
        """
        Raises:
            EntityNotFoundError: If the collaborator is not enrolled
        """
        collaborator = self.collaborators.get(member_id)
        token = self._subscriptions.pop(member_id, None)
        if token is not None:
            self.event_sink.unsubscribe(token)
        collaborator.attach_event_sink(None)
        self.collaborators.remove(collaborator)

        logger.info("collaborator_withdrawn", member_id=str(member_id))

