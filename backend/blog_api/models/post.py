"""Post ORM - persists a blog post with its embedded author document.

Invariants:
    - id is UUID primary key, assigned on insert, never reassigned
    - title, content and author are non-nullable
    - author is stored as {"firstName": ..., "lastName": ...}

Design Decisions:
    - JSON column for author: the structured pair is kept as one embedded document
    - created_at is internal only; gives list and find_one a stable order
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Text, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from blog_api.core.format_post import format_author_name
from blog_api.db.base import Base


class Post(Base):
    """Blog post entity."""
    __tablename__ = "posts"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    author: Mapped[dict] = mapped_column(JSON, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
        default=lambda: datetime.now(timezone.utc),
    )

    @property
    def author_name(self) -> str:
        return format_author_name(self.author)

    def __repr__(self) -> str:
        return f"<Post id={self.id} title={self.title!r}>"
