"""Request Dependencies - wires a PostStore onto each request's DB session."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.core.repository_protocols import PostRepository
from blog_api.infrastructure.database import get_db
from blog_api.services.post_store import PostStore


async def get_post_store(db: AsyncSession = Depends(get_db)) -> PostRepository:
    return PostStore(db)
