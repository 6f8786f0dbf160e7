"""Protocol for entity stores."""

from typing import Protocol, TypeVar

from domainkit.domain.common.entity import Entity
from domainkit.domain.common.identity import Identity

E = TypeVar("E", bound=Entity)
I = TypeVar("I", bound=Identity)  # noqa: E741


class StoreProtocol(Protocol[E, I]):
    """Persistence boundary for one entity type."""

    def next_identity(self) -> I:
        """
        Draw the next identity from the store's sequence.

        Only meaningful for store-assigned identities.

        Raises:
            GenerationFailedError: If the store cannot produce identities
        """
        ...

    def add(self, entity: E) -> E:
        """
        Persist a new entity, binding a store-assigned identity if it has none.

        Raises:
            DuplicateIdentityError: If an entity with the same identity exists
        """
        ...

    def save(self, entity: E) -> E:
        """
        Persist changes to an existing entity.

        Raises:
            EntityNotFoundError: If the entity was never added
        """
        ...

    def remove(self, entity: E) -> None:
        """
        Remove an entity.

        Raises:
            EntityNotFoundError: If the entity is not in the store
        """
        ...

    def find(self, identity: I) -> E | None:
        """Return the entity with ``identity``, or None."""
        ...

    def get(self, identity: I) -> E:
        """
        Return the entity with ``identity``.

        Raises:
            EntityNotFoundError: If no entity has that identity
        """
        ...
