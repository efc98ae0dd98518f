"""Domain Types - rich types that replace bare primitives across the codebase.

Invariants:
    - PostId wraps a UUID; never use a bare UUID in domain logic
    - AuthorDoc is the stored shape of an author: exactly firstName and lastName

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - AuthorDoc keys mirror the wire input so stored documents need no renaming
"""

from typing import NewType, TypedDict
from uuid import UUID


# --- Identity Types -----------------------------------------------------------

PostId = NewType("PostId", UUID)


# --- Value Types --------------------------------------------------------------

class AuthorDoc(TypedDict):
    """Structured author as persisted on a post."""
    firstName: str
    lastName: str


class PostRecord(TypedDict):
    """Post-shaped input accepted by the store."""
    title: str
    content: str
    author: AuthorDoc
