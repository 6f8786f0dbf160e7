"""
In-memory stand-in for the identity-access context.

Owns member identities and profiles. Other contexts resolve member
identities through ``resolve`` and learn about profile changes from the
ForeignIdentityChanged events published on the shared event sink.
"""

import itertools
import threading
from collections.abc import Mapping
from dataclasses import dataclass

import structlog

from domainkit.application.ports.event_sink import EventSinkProtocol
from domainkit.domain.collaboration.entities.collaborator import IDENTITY_ACCESS_CONTEXT
from domainkit.domain.common.clock import Clock, SystemClock
from domainkit.domain.common.exceptions import (
    DuplicateIdentityError,
    EntityNotFoundError,
    ForeignIdentityUnavailableError,
)
from domainkit.domain.common.foreign import ForeignIdentityChanged
from domainkit.domain.common.value_objects import MemberId

logger = structlog.get_logger(__name__)


class DirectoryUnavailableError(ConnectionError):
    """Raised while the directory is offline."""


@dataclass
class MemberProfile:
    member_id: MemberId
    email: str
    display_name: str


class InMemoryMemberDirectory:
    """Member directory implementing ForeignContextLookupProtocol."""

    context_name = IDENTITY_ACCESS_CONTEXT

    def __init__(self, event_sink: EventSinkProtocol, clock: Clock | None = None) -> None:
        self._event_sink = event_sink
        self._clock = clock or SystemClock()
        self._members: dict[str, MemberProfile] = {}
        self._numbers = itertools.count(1)
        self._lock = threading.Lock()
        self._online = True

    def register_member(self, email: str, display_name: str) -> MemberId:
        """
        Raises:
            DuplicateIdentityError: If a member already has that email
        """
        key = email.strip().casefold()
        with self._lock:
            if key in self._members:
                raise DuplicateIdentityError("Member", email.strip())
            member_id = MemberId(f"mbr-{next(self._numbers):06d}")
            self._members[key] = MemberProfile(member_id, email.strip(), display_name)
        logger.debug("member_registered", member_id=str(member_id))
        return member_id

    def resolve(self, criteria: Mapping[str, object]) -> MemberId:
        """
        Resolve a member identity by ``email``.

        Raises:
            ForeignIdentityUnavailableError: If no member has that email
            DirectoryUnavailableError: If the directory is offline
        """
        if not self._online:
            raise DirectoryUnavailableError("member directory is offline")
        email = criteria.get("email")
        if not isinstance(email, str):
            raise ForeignIdentityUnavailableError(self.context_name, dict(criteria))
        with self._lock:
            profile = self._members.get(email.strip().casefold())
        if profile is None:
            raise ForeignIdentityUnavailableError(self.context_name, dict(criteria))
        return profile.member_id

    def update_profile(
        self,
        member_id: MemberId,
        display_name: str | None = None,
        email: str | None = None,
    ) -> None:
        """
        Change a member's profile and announce it on the event sink.

        Raises:
            EntityNotFoundError: If the member does not exist
            DuplicateIdentityError: If another member already has the new email
            EventDeliveryError: If a subscriber failed to apply the change
        """
        with self._lock:
            profile = next((p for p in self._members.values() if p.member_id == member_id), None)
            if profile is None:
                raise EntityNotFoundError("Member", member_id)
            if email is not None:
                owner = self._members.get(email.strip().casefold())
                if owner is not None and owner is not profile:
                    raise DuplicateIdentityError("Member", email.strip())
            changed: dict[str, str] = {}
            if display_name is not None and display_name != profile.display_name:
                profile.display_name = display_name
                changed["display_name"] = display_name
            if email is not None and email.strip() != profile.email:
                del self._members[profile.email.casefold()]
                profile.email = email.strip()
                self._members[profile.email.casefold()] = profile
                changed["email"] = profile.email
        if not changed:
            return
        self._event_sink.publish(
            ForeignIdentityChanged(
                self.context_name,
                changed,
                aggregate_id=member_id,
                occurred_at=self._clock.now(),
            )
        )

    def go_offline(self) -> None:
        self._online = False

    def go_online(self) -> None:
        self._online = True
