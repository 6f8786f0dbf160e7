"""
Domain layer exceptions.

These exceptions represent domain-level errors that occur when
invariants are broken, identities cannot be produced or bound,
or domain events cannot be delivered. They are raised to the
immediate caller, which decides how to surface them.
"""

from collections.abc import Sequence


class DomainError(Exception):
    """
    Base exception for all domain errors.

    All domain exceptions should inherit from this class
    so they can be caught and handled uniformly.
    """

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class InvalidArgumentError(DomainError):
    """
    Raised when an attribute-level precondition fails.

    Carries the description of the failing constraint. Only the first
    failing constraint is ever reported.

    Example: Empty title, negative quantity, over-long name.
    """

    def __init__(self, constraint: str, field: str | None = None, value: object = None) -> None:
        details: dict[str, object] = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        super().__init__(constraint, details)
        self.constraint = constraint
        self.field = field
        self.value = value


class EntityNotFoundError(DomainError):
    """Raised when an entity cannot be found in a store."""

    def __init__(self, entity_type: str, entity_id: object) -> None:
        message = f"{entity_type} with id {entity_id} not found"
        super().__init__(message, {"entity_type": entity_type, "entity_id": entity_id})
        self.entity_type = entity_type
        self.entity_id = entity_id


class DuplicateIdentityError(DomainError):
    """Raised when adding an entity whose identity is already in use."""

    def __init__(self, entity_type: str, entity_id: object) -> None:
        super().__init__(
            f"{entity_type} with id {entity_id} already exists",
            {"entity_type": entity_type, "entity_id": entity_id},
        )
        self.entity_type = entity_type
        self.entity_id = entity_id


class IdentityError(DomainError):
    """Base class for identity generation and binding failures."""


class UnsupportedStrategyError(IdentityError):
    """Raised when no identity source is registered for a strategy."""

    def __init__(self, strategy: object) -> None:
        super().__init__(f"No identity source registered for strategy {strategy}")
        self.strategy = strategy


class GenerationFailedError(IdentityError):
    """Raised when the underlying identity source is unavailable or fails."""

    def __init__(self, strategy: object, reason: str) -> None:
        super().__init__(
            f"Identity generation failed: {reason}", {"strategy": str(strategy)}
        )
        self.strategy = strategy
        self.reason = reason


class InvalidIdentityFormatError(IdentityError):
    """Raised when client-supplied input does not satisfy an identity grammar."""

    def __init__(self, identity_type: str, raw: object, reason: str) -> None:
        super().__init__(
            f"Invalid {identity_type}: {reason}", {"identity_type": identity_type, "raw": raw}
        )
        self.identity_type = identity_type
        self.raw = raw
        self.reason = reason


class ForeignIdentityUnavailableError(IdentityError):
    """Raised when a foreign context cannot resolve an identity."""

    def __init__(self, context: str, criteria: object) -> None:
        super().__init__(
            f"{context} could not resolve an identity", {"context": context, "criteria": criteria}
        )
        self.context = context
        self.criteria = criteria


class IdentityAlreadyAssignedError(IdentityError):
    """
    Raised when an identity is bound to an entity a second time.

    This is a programming error: identities are bound exactly once.
    """

    def __init__(self, entity_type: str, identity: object) -> None:
        super().__init__(
            f"{entity_type} already has identity {identity}",
            {"entity_type": entity_type, "identity": identity},
        )
        self.entity_type = entity_type
        self.identity = identity


class IdentityNotYetAssignedError(IdentityError):
    """Raised when reading a store-assigned identity before first persistence."""

    def __init__(self, entity_type: str) -> None:
        super().__init__(f"{entity_type} has no identity until it is persisted")
        self.entity_type = entity_type


class HandlerFailure:
    """A single event handler failure collected during delivery."""

    __slots__ = ("error", "event_type", "handler")

    def __init__(self, event_type: str, handler: str, error: Exception) -> None:
        self.event_type = event_type
        self.handler = handler
        self.error = error

    def __repr__(self) -> str:
        return f"HandlerFailure({self.event_type}, {self.handler}, {self.error!r})"


class EventDeliveryError(DomainError):
    """
    Raised after delivery when one or more event handlers failed.

    Every registered handler is still invoked; the failures are reported
    together. The mutation that produced the event is not rolled back.
    """

    def __init__(self, failures: Sequence[HandlerFailure]) -> None:
        super().__init__(
            f"{len(failures)} event handler(s) failed",
            {"handlers": [failure.handler for failure in failures]},
        )
        self.failures = list(failures)


class CompositeValidationError(DomainError):
    """
    Raised by fail-closed call sites when composite validation reports violations.

    Validators themselves never raise this; it is a caller's decision.
    """

    def __init__(self, subject: str, violations: Sequence[object]) -> None:
        super().__init__(
            f"{subject} failed validation with {len(violations)} violation(s)",
            {"subject": subject},
        )
        self.subject = subject
        self.violations = list(violations)
