"""Post Formatting - pure translation between stored posts and the wire format.

Invariants:
    - The flattened author is "firstName lastName", trimmed
    - serialize_post returns exactly the keys id, title, content, author
    - No IO, no ORM imports: works on anything shaped like a post

Design Decisions:
    - Duck-typed PostLike protocol so routes and tests can format without a session
"""

from typing import Protocol
from uuid import UUID

from blog_api.core.domain_types import AuthorDoc


class PostLike(Protocol):
    id: UUID
    title: str
    content: str
    author: AuthorDoc


def format_author_name(author: AuthorDoc) -> str:
    """Flatten a structured author into a single display string."""
    first = author.get("firstName") or ""
    last = author.get("lastName") or ""
    return f"{first} {last}".strip()


def build_author(first_name: str, last_name: str) -> AuthorDoc:
    return AuthorDoc(firstName=first_name, lastName=last_name)


def serialize_post(post: PostLike) -> dict:
    """Wire representation of a post."""
    return {
        "id": str(post.id),
        "title": post.title,
        "content": post.content,
        "author": format_author_name(post.author),
    }
