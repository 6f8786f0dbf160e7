"""
Collaborator aggregate root.

A collaborator is a member of the identity-access context working in this
one. Its identity and its display name and email are owned by that
context; this aggregate keeps local copies and applies the changes the
identity-access context announces.
"""

from dataclasses import dataclass

from domainkit.domain.collaboration.events import (
    CollaboratorJoined,
    CollaboratorProfileSynchronized,
)
from domainkit.domain.common.aggregate_root import AggregateRoot
from domainkit.domain.common.clock import Clock, SystemClock
from domainkit.domain.common.foreign import ForeignIdentityChanged
from domainkit.domain.common.guards import require_not_blank
from domainkit.domain.common.value_objects import MemberId

IDENTITY_ACCESS_CONTEXT = "identity_access"


@dataclass(eq=False)
class Collaborator(AggregateRoot[MemberId]):
    id: MemberId
    display_name: str
    email: str | None = None
    contributions: int = 0

    def __post_init__(self) -> None:
        """Validate invariants."""
        self.display_name = require_not_blank(self.display_name, "display_name")

    def contribute(self) -> None:
        self.contributions += 1

    def apply_foreign_change(self, change: ForeignIdentityChanged) -> None:
        """Copy the attributes the identity-access context changed for this member."""
        if change.context != IDENTITY_ACCESS_CONTEXT or change.aggregate_id != self.id:
            return
        display_name = change.attributes.get("display_name", self.display_name)
        email = change.attributes.get("email", self.email)
        if display_name == self.display_name and email == self.email:
            return
        self.display_name = require_not_blank(display_name, "display_name")
        self.email = email
        self._record_event(
            CollaboratorProfileSynchronized(
                self.display_name, self.email, occurred_at=self.clock.now()
            )
        )

    @classmethod
    def join(
        cls,
        id: MemberId,
        display_name: str,
        email: str | None = None,
        clock: Clock | None = None,
    ) -> "Collaborator":
        collaborator = cls(
            id=id, display_name=display_name, email=email, clock=clock or SystemClock()
        )
        collaborator._record_event(
            CollaboratorJoined(collaborator.display_name, occurred_at=collaborator.clock.now())
        )
        return collaborator
