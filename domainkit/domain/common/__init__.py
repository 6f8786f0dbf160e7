"""
Domain common module.

Contains base classes for domain modeling:
- ValueObject: Immutable objects defined by their attributes
- Identity: Immutable value naming an Entity, possibly not yet assigned
- Entity: Objects with identity and lifecycle
- AggregateRoot: Consistency boundaries with domain events
- DomainEvent: Notifications of significant domain occurrences
- CompositeValidator / ValidationResult: relational validation
"""

from .aggregate_root import AggregateRoot, EventPublisher
from .clock import Clock, FixedClock, SystemClock
from .domain_event import DomainEvent
from .entity import Entity, assign_surrogate_key, surrogate_key_of
from .exceptions import (
    CompositeValidationError,
    DomainError,
    DuplicateIdentityError,
    EntityNotFoundError,
    EventDeliveryError,
    ForeignIdentityUnavailableError,
    GenerationFailedError,
    HandlerFailure,
    IdentityAlreadyAssignedError,
    IdentityError,
    IdentityNotYetAssignedError,
    InvalidArgumentError,
    InvalidIdentityFormatError,
    UnsupportedStrategyError,
)
from .identity import Identity, IdType, IntegerIdentity, UuidIdentity
from .validation import (
    CompositeValidator,
    ValidationResult,
    ValidationResultHandler,
    Violation,
)
from .value_object import ValueObject

__all__ = [
    "AggregateRoot",
    "Clock",
    "CompositeValidationError",
    "CompositeValidator",
    "DomainError",
    "DomainEvent",
    "DuplicateIdentityError",
    "Entity",
    "EntityNotFoundError",
    "EventDeliveryError",
    "EventPublisher",
    "FixedClock",
    "ForeignIdentityUnavailableError",
    "GenerationFailedError",
    "HandlerFailure",
    "IdType",
    "Identity",
    "IdentityAlreadyAssignedError",
    "IdentityError",
    "IdentityNotYetAssignedError",
    "IntegerIdentity",
    "InvalidArgumentError",
    "InvalidIdentityFormatError",
    "SystemClock",
    "UnsupportedStrategyError",
    "UuidIdentity",
    "ValidationResult",
    "ValidationResultHandler",
    "ValueObject",
    "Violation",
    "assign_surrogate_key",
    "surrogate_key_of",
]
