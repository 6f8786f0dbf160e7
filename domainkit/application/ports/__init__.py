"""
Application ports (interfaces for external collaborators).

Ports define the boundaries between the application layer and
the infrastructure layer. They are interfaces that the infrastructure
layer must implement.

Types of ports:
- Store: Persists entities and hands out store-assigned identities
- Event sink: Publish/subscribe channel for domain events
- Foreign context lookup: Read-only identity resolution in another context
"""

from .event_sink import EventHandler, EventSinkProtocol, SubscriptionToken
from .foreign_context_lookup import ForeignContextLookupProtocol
from .store import StoreProtocol

__all__ = [
    "EventHandler",
    "EventSinkProtocol",
    "ForeignContextLookupProtocol",
    "StoreProtocol",
    "SubscriptionToken",
]
