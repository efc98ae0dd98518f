"""Boundary Protocols - contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async methods: implementations do IO; routes await them in sequence
"""

from typing import Protocol, Sequence

from blog_api.core.domain_types import AuthorDoc, PostId, PostRecord
from blog_api.core.format_post import PostLike


class PostRepository(Protocol):
    """Contract for post persistence - implemented by shell."""
    async def insert_many(self, records: Sequence[PostRecord]) -> list[PostLike]: ...
    async def find_by_id(self, post_id: PostId) -> PostLike | None: ...
    async def find_one(self) -> PostLike | None: ...
    async def count(self) -> int: ...
    async def delete_by_id(self, post_id: PostId) -> bool: ...
    async def list_all(self) -> list[PostLike]: ...
    async def replace(
        self, post_id: PostId, title: str, content: str, author: AuthorDoc,
    ) -> PostLike | None: ...
