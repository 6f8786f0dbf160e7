"""
Domain layer.

The domain layer contains identities, entities and the rules that keep
them consistent. It has no dependencies on external frameworks or
infrastructure.

This layer contains:
- Identities: Immutable values naming entities
- Entities and Aggregate Roots: Objects with identity and lifecycle
- Domain Events: Records of state changes
- Validators: Relational rules over constructed aggregates
"""
