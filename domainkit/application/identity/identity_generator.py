"""
Identity generation.

Identities are produced by one of four strategies, each backed by an
IdentitySource registered with the IdentityGenerator:

- STORE_ASSIGNED: the identity is unknown until first persistence; the
  generator hands out the unassigned placeholder and the store binds the
  real identity later.
- APPLICATION_ASSIGNED: a 128-bit random UUID created up front.
- CLIENT_SUPPLIED: caller input checked against the identity's grammar.
- FOREIGN_CONTEXT: resolved by another bounded context, which also keeps
  the entity's foreign-owned attributes in step through the event sink.

Example:
    generator = IdentityGenerator.standard()
    article_id = generator.generate(
        IdentityStrategy.APPLICATION_ASSIGNED, GenerationContext(ArticleId)
    )
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Generic, Protocol, TypeVar
from uuid import UUID, uuid4

import structlog

from domainkit.application.ports.event_sink import EventSinkProtocol, SubscriptionToken
from domainkit.application.ports.foreign_context_lookup import ForeignContextLookupProtocol
from domainkit.domain.common.exceptions import (
    ForeignIdentityUnavailableError,
    GenerationFailedError,
    InvalidIdentityFormatError,
    UnsupportedStrategyError,
)
from domainkit.domain.common.foreign import ForeignIdentityChanged, ForeignSynchronized
from domainkit.domain.common.identity import Identity, UuidIdentity

logger = structlog.get_logger(__name__)

I = TypeVar("I", bound=Identity)  # noqa: E741


class IdentityStrategy(StrEnum):
    STORE_ASSIGNED = "store_assigned"
    APPLICATION_ASSIGNED = "application_assigned"
    CLIENT_SUPPLIED = "client_supplied"
    FOREIGN_CONTEXT = "foreign_context"


@dataclass(frozen=True)
class GenerationContext(Generic[I]):
    """
    What to generate.

    Attributes:
        identity_type: Identity class to produce
        raw: Caller-supplied input (client-supplied strategy)
        criteria: Lookup criteria (foreign-context strategy)
    """

    identity_type: type[I]
    raw: object = None
    criteria: Mapping[str, object] = field(default_factory=dict)


class IdentitySource(Protocol):
    def generate(self, context: GenerationContext[I]) -> I: ...


class StoreAssignedSource:
    """Hands out the unassigned placeholder; the store binds the identity on add."""

    def generate(self, context: GenerationContext[I]) -> I:
        return context.identity_type.unassigned()


class ApplicationAssignedSource:
    """Random 128-bit identities. Collisions are not checked."""

    def __init__(self, uuid_factory: Callable[[], UUID] = uuid4) -> None:
        self._uuid_factory = uuid_factory

    def generate(self, context: GenerationContext[I]) -> I:
        if not issubclass(context.identity_type, UuidIdentity):
            raise GenerationFailedError(
                IdentityStrategy.APPLICATION_ASSIGNED,
                f"{context.identity_type.__name__} is not a UUID identity",
            )
        try:
            value = self._uuid_factory()
        except Exception as err:
            raise GenerationFailedError(
                IdentityStrategy.APPLICATION_ASSIGNED, f"UUID source failed: {err}"
            ) from err
        return context.identity_type(value)


class ClientSuppliedSource:
    """Validating constructor over caller input; no randomness."""

    def generate(self, context: GenerationContext[I]) -> I:
        return context.identity_type.parse(context.raw)


class ForeignContextSource:
    """
    Identities resolved by another bounded context.

    Entities created with such an identity can be tracked: they then receive
    the ForeignIdentityChanged notifications the foreign context publishes
    on the event sink for their identity.
    """

    def __init__(self, lookup: ForeignContextLookupProtocol, event_sink: EventSinkProtocol) -> None:
        self._lookup = lookup
        self._event_sink = event_sink

    def generate(self, context: GenerationContext[I]) -> I:
        try:
            identity = self._lookup.resolve(context.criteria)
        except ForeignIdentityUnavailableError:
            raise
        except Exception as err:
            raise GenerationFailedError(
                IdentityStrategy.FOREIGN_CONTEXT,
                f"{self._lookup.context_name} is unavailable: {err}",
            ) from err

        if isinstance(identity, context.identity_type):
            return identity
        try:
            return context.identity_type.parse(identity.to_primitive())
        except InvalidIdentityFormatError as err:
            raise GenerationFailedError(
                IdentityStrategy.FOREIGN_CONTEXT,
                f"{self._lookup.context_name} returned an unusable identity {identity!r}",
            ) from err

    def track(self, entity: ForeignSynchronized) -> SubscriptionToken:
        """Keep ``entity`` synchronized with its foreign context until unsubscribed."""

        def on_change(change: ForeignIdentityChanged) -> None:
            if change.aggregate_id == entity.id:
                entity.apply_foreign_change(change)

        token = self._event_sink.subscribe(ForeignIdentityChanged, on_change)
        logger.debug(
            "foreign_identity_tracked",
            context=self._lookup.context_name,
            identity=str(entity.id),
        )
        return token


class IdentityGenerator:
    """Registry of identity sources keyed by strategy."""

    def __init__(self, sources: Mapping[IdentityStrategy, IdentitySource] | None = None) -> None:
        self._sources: dict[IdentityStrategy, IdentitySource] = dict(sources or {})

    def register(self, strategy: IdentityStrategy, source: IdentitySource) -> None:
        self._sources[strategy] = source

    def supports(self, strategy: IdentityStrategy) -> bool:
        return strategy in self._sources

    def generate(self, strategy: IdentityStrategy, context: GenerationContext[I]) -> I:
        """
        Produce an identity with the given strategy.

        Raises:
            UnsupportedStrategyError: If no source is registered for ``strategy``
            GenerationFailedError: If the underlying source fails
            InvalidIdentityFormatError: If client input breaks the identity grammar
            ForeignIdentityUnavailableError: If the foreign context cannot resolve it
        """
        source = self._sources.get(strategy)
        if source is None:
            raise UnsupportedStrategyError(strategy)

        identity = source.generate(context)
        logger.debug(
            "identity_generated",
            strategy=str(strategy),
            identity_type=context.identity_type.__name__,
            assigned=identity.is_assigned,
        )
        return identity

    def track_foreign(self, entity: ForeignSynchronized) -> SubscriptionToken:
        """
        Subscribe ``entity`` to change notifications of its foreign context.

        Raises:
            UnsupportedStrategyError: If no foreign-context source is registered
        """
        source = self._sources.get(IdentityStrategy.FOREIGN_CONTEXT)
        if not isinstance(source, ForeignContextSource):
            raise UnsupportedStrategyError(IdentityStrategy.FOREIGN_CONTEXT)
        return source.track(entity)

    @classmethod
    def standard(
        cls,
        foreign_lookup: ForeignContextLookupProtocol | None = None,
        event_sink: EventSinkProtocol | None = None,
        uuid_factory: Callable[[], UUID] = uuid4,
    ) -> "IdentityGenerator":
        """
        Generator with the store, application and client strategies.

        The foreign-context strategy is registered when both a lookup and
        an event sink are given.
        """
        generator = cls(
            {
                IdentityStrategy.STORE_ASSIGNED: StoreAssignedSource(),
                IdentityStrategy.APPLICATION_ASSIGNED: ApplicationAssignedSource(uuid_factory),
                IdentityStrategy.CLIENT_SUPPLIED: ClientSuppliedSource(),
            }
        )
        if foreign_lookup is not None and event_sink is not None:
            generator.register(
                IdentityStrategy.FOREIGN_CONTEXT, ForeignContextSource(foreign_lookup, event_sink)
            )
        return generator
