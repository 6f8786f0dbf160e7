"""
Base class for Entities.

Entities are objects that have a distinct identity that runs through time
and different states. Two entities are equal if they have the same identity,
regardless of their attributes.

Example:
    @dataclass(eq=False)
    class Customer(Entity[CustomerId]):
        id: CustomerId
        name: str

        def rename(self, name: str) -> None:
            self.name = require_not_blank(name, "name")

Subclasses are declared with ``eq=False`` so the dataclass machinery does
not replace identity equality with attribute equality.
"""

from abc import ABC
from typing import Generic

from .exceptions import (
    IdentityAlreadyAssignedError,
    IdentityNotYetAssignedError,
    InvalidArgumentError,
)
from .identity import IdType

_SURROGATE_KEY_ATTR = "_surrogate_key"


class Entity(ABC, Generic[IdType]):
    """
    Base class for Entities in the domain model.

    Entities are:
    - Defined by identity (not attributes)
    - Mutable through named domain operations only
    - Have lifecycle (created, modified, removed through a store)

    Subclasses must have an 'id' attribute of type IdType. Under the
    store-assigned strategy it holds an unassigned identity until the
    store binds a real one with ``bind_identity``.
    """

    id: IdType

    def identity(self) -> IdType:
        """
        Return the entity's identity.

        Raises:
            IdentityNotYetAssignedError: If the store has not assigned it yet
        """
        if not self.id.is_assigned:
            raise IdentityNotYetAssignedError(self.__class__.__name__)
        return self.id

    @property
    def has_identity(self) -> bool:
        return self.id.is_assigned

    def bind_identity(self, identity: IdType) -> None:
        """
        Bind a store-assigned identity. Allowed exactly once.

        Raises:
            IdentityAlreadyAssignedError: If the entity already has an identity
            InvalidArgumentError: If ``identity`` is unassigned or of another kind
        """
        if self.id.is_assigned:
            raise IdentityAlreadyAssignedError(self.__class__.__name__, self.id)
        if type(identity) is not type(self.id):
            raise InvalidArgumentError(
                f"identity must be a {type(self.id).__name__}", field="id", value=identity
            )
        if not identity.is_assigned:
            raise InvalidArgumentError("cannot bind an unassigned identity", field="id")
        self.id = identity
        self._on_identity_bound()

    def _on_identity_bound(self) -> None:
        """Hook called after ``bind_identity`` succeeds."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        if not self.id.is_assigned or not other.id.is_assigned:
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        if not self.id.is_assigned:
            return object.__hash__(self)
        return hash((self.__class__, self.id))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"


def surrogate_key_of(entity: Entity) -> int | None:
    """Persistence key a store attached to ``entity``, kept apart from its identity."""
    return getattr(entity, _SURROGATE_KEY_ATTR, None)


def assign_surrogate_key(entity: Entity, key: int) -> None:
    """Attach a store-internal row key to ``entity``. Used by stores only."""
    object.__setattr__(entity, _SURROGATE_KEY_ATTR, key)
