"""ORM Models - SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)

Design Decisions:
    - One file per entity
    - All models imported here so Base.metadata is complete before create_all()
"""

from blog_api.models.post import Post  # noqa: F401
