"""Infrastructure Layer — database plumbing, repositories and cross-cutting concerns.

Invariants:
    - Infrastructure never contains business rules (those live in core/)
    - All SQLAlchemy errors mapped to the core error hierarchy before leaving this layer
"""
