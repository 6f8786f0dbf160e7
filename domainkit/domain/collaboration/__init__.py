"""Collaboration domain layer."""

from domainkit.domain.collaboration.entities.collaborator import (
    IDENTITY_ACCESS_CONTEXT,
    Collaborator,
)
from domainkit.domain.collaboration.events import (
    CollaboratorJoined,
    CollaboratorProfileSynchronized,
)

__all__ = [
    "IDENTITY_ACCESS_CONTEXT",
    "Collaborator",
    "CollaboratorJoined",
    "CollaboratorProfileSynchronized",
]
