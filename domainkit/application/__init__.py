"""
Application layer.

The application layer orchestrates domain objects and defines the boundaries
of the system. It produces identities, runs validation that needs other
aggregates, persists through stores and dispatches domain events.

This layer contains:
- Ports: Interfaces for stores, event sinks and foreign contexts
- Identity generation: Strategy registry producing identities
- Application services and use cases
- Unit of Work: Persist, then dispatch collected events
"""
