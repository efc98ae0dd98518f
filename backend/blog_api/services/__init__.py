"""Services Layer - IO-bound implementations of core protocols.

Invariants:
    - Services own their session's commits; routes never call commit()
"""
