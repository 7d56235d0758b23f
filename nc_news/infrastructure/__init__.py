"""Infrastructure Layer: database access and cross-cutting concerns.

Invariants:
    - Infrastructure implements core protocols, never core decisions
    - All database failures leave this layer as DatabaseError

Design Decisions:
    - Repository wraps an injected AsyncSession: no module-level connection
"""
