"""
Infrastructure layer.

In-memory adapters for the application ports: the event sink, entity
stores with their unit of work, and a member directory standing in for
the identity-access context.
"""
