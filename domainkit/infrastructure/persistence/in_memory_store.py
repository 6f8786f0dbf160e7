"""
In-memory entity store.

Holds entities by identity and hands out store-assigned identities from
an integer sequence. Every stored entity also gets a surrogate row key,
kept apart from its domain identity.
"""

import itertools
import threading
from typing import Generic, TypeVar

import structlog

from domainkit.config import get_settings
from domainkit.domain.common.entity import Entity, assign_surrogate_key
from domainkit.domain.common.exceptions import (
    DuplicateIdentityError,
    EntityNotFoundError,
    GenerationFailedError,
)
from domainkit.domain.common.identity import Identity, IntegerIdentity

logger = structlog.get_logger(__name__)

E = TypeVar("E", bound=Entity)
I = TypeVar("I", bound=Identity)  # noqa: E741


class InMemoryStore(Generic[E, I]):
    """Store for one entity type, safe to share between threads."""

    def __init__(
        self,
        entity_type: type[E],
        identity_type: type[I],
        sequence_start: int | None = None,
    ) -> None:
        self.entity_type = entity_type
        self.identity_type = identity_type
        start = get_settings().IDENTITY_SEQUENCE_START if sequence_start is None else sequence_start
        self._sequence = itertools.count(start)
        self._row_keys = itertools.count(1)
        self._rows: dict[I, E] = {}
        self._lock = threading.Lock()

    def next_identity(self) -> I:
        """
        Draw the next identity from the sequence.

        Raises:
            GenerationFailedError: If the identity type is not integer based
        """
        if not issubclass(self.identity_type, IntegerIdentity):
            raise GenerationFailedError(
                "store_assigned",
                f"{self.identity_type.__name__} cannot be drawn from an integer sequence",
            )
        with self._lock:
            value = next(self._sequence)
        return self.identity_type(value)

    def add(self, entity: E) -> E:
        """
        Store a new entity, binding the next identity if it has none.

        Raises:
            DuplicateIdentityError: If the identity is already stored
        """
        if not entity.has_identity:
            entity.bind_identity(self.next_identity())
        with self._lock:
            if entity.id in self._rows:
                raise DuplicateIdentityError(self.entity_type.__name__, entity.id)
            assign_surrogate_key(entity, next(self._row_keys))
            self._rows[entity.id] = entity
        logger.debug("entity_added", entity_type=self.entity_type.__name__, entity_id=str(entity.id))
        return entity

    def save(self, entity: E) -> E:
        """
        Store changes to an existing entity.

        Raises:
            EntityNotFoundError: If the entity was never added
        """
        with self._lock:
            if not entity.has_identity or entity.id not in self._rows:
                raise EntityNotFoundError(self.entity_type.__name__, entity.id)
            self._rows[entity.id] = entity
        logger.debug("entity_saved", entity_type=self.entity_type.__name__, entity_id=str(entity.id))
        return entity

    def remove(self, entity: E) -> None:
        """
        Remove an entity.

        Raises:
            EntityNotFoundError: If the entity is not stored
        """
        with self._lock:
            if not entity.has_identity or self._rows.pop(entity.id, None) is None:
                raise EntityNotFoundError(self.entity_type.__name__, entity.id)
        logger.debug(
            "entity_removed", entity_type=self.entity_type.__name__, entity_id=str(entity.id)
        )

    def find(self, identity: I) -> E | None:
        if not identity.is_assigned:
            return None
        with self._lock:
            return self._rows.get(identity)

    def get(self, identity: I) -> E:
        """
        Raises:
            EntityNotFoundError: If no entity has that identity
        """
        entity = self.find(identity)
        if entity is None:
            raise EntityNotFoundError(self.entity_type.__name__, identity)
        return entity

    def all(self) -> list[E]:
        with self._lock:
            return list(self._rows.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._rows)
