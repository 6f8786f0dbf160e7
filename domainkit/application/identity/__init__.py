"""Identity generation application layer."""

from domainkit.application.identity.identity_generator import (
    ApplicationAssignedSource,
    ClientSuppliedSource,
    ForeignContextSource,
    GenerationContext,
    IdentityGenerator,
    IdentitySource,
    IdentityStrategy,
    StoreAssignedSource,
)

__all__ = [
    "ApplicationAssignedSource",
    "ClientSuppliedSource",
    "ForeignContextSource",
    "GenerationContext",
    "IdentityGenerator",
    "IdentitySource",
    "IdentityStrategy",
    "StoreAssignedSource",
]
