"""Post Store - SQLAlchemy implementation of the PostRepository protocol.

Invariants:
    - Every write commits before returning (callers see persisted state)
    - Absence is reported as None / False, never as an exception
    - delete_by_id is idempotent
    - list_all and find_one order by created_at, then id

Design Decisions:
    - One store per AsyncSession: constructed per request by the FastAPI dependency
    - Database failures propagate as DatabaseError via the session manager (no retry)
"""

import logging
from typing import Sequence

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.core.domain_types import AuthorDoc, PostId, PostRecord
from blog_api.core.format_post import build_author
from blog_api.models.post import Post

logger = logging.getLogger(__name__)


class PostStore:
    """Durable persistence of Post entities."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def insert_many(self, records: Sequence[PostRecord]) -> list[Post]:
        posts = [
            Post(
                title=r["title"],
                content=r["content"],
                author=build_author(
                    r["author"]["firstName"], r["author"]["lastName"],
                ),
            )
            for r in records
        ]
        self._db.add_all(posts)
        await self._db.commit()
        logger.info(f"Inserted {len(posts)} post(s)", extra={"count": len(posts)})
        return posts

    async def find_by_id(self, post_id: PostId) -> Post | None:
        result = await self._db.execute(select(Post).where(Post.id == post_id))
        return result.scalar_one_or_none()

    async def find_one(self) -> Post | None:
        result = await self._db.execute(
            select(Post).order_by(Post.created_at, Post.id).limit(1),
        )
        return result.scalars().first()

    async def count(self) -> int:
        result = await self._db.execute(select(func.count()).select_from(Post))
        return result.scalar_one()

    async def list_all(self) -> list[Post]:
        result = await self._db.execute(
            select(Post).order_by(Post.created_at, Post.id),
        )
        return list(result.scalars().all())

    async def replace(
        self, post_id: PostId, title: str, content: str, author: AuthorDoc,
    ) -> Post | None:
        """Overwrite title, content and author wholesale; id is preserved."""
        post = await self.find_by_id(post_id)
        if post is None:
            return None
        post.title = title
        post.content = content
        post.author = build_author(author["firstName"], author["lastName"])
        await self._db.commit()
        logger.info(f"Updated post {post_id}", extra={"post_id": str(post_id)})
        return post

    async def delete_by_id(self, post_id: PostId) -> bool:
        """Remove the post if present. Returns whether a row was deleted."""
        result = await self._db.execute(delete(Post).where(Post.id == post_id))
        await self._db.commit()
        deleted = (result.rowcount or 0) > 0
        if deleted:
            logger.info(f"Deleted post {post_id}", extra={"post_id": str(post_id)})
        return deleted
