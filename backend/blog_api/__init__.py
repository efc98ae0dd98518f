"""Blog API Package - CRUD service for blog posts.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
