"""Infrastructure Layer - database access and cross-cutting concerns.

Invariants:
    - Infrastructure never imports domain logic beyond core/errors
    - All database failures mapped to DatabaseError
"""
