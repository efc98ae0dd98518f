"""Post Schemas - wire contracts for the /posts endpoints.

Invariants:
    - Input author is structured ({firstName, lastName}); output author is one string
    - Validation is key presence and type only (no length or content rules)
    - PostResponse carries exactly id, title, content, author

Design Decisions:
    - camelCase aliases on AuthorIn: the wire keys are firstName/lastName,
      Python attributes stay snake_case (populate_by_name accepts both)
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from blog_api.core.domain_types import AuthorDoc, PostRecord
from blog_api.core.format_post import build_author


class AuthorIn(BaseModel):
    """Structured author as sent by clients."""
    model_config = ConfigDict(populate_by_name=True)

    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")

    def to_doc(self) -> AuthorDoc:
        return build_author(self.first_name, self.last_name)


class PostCreate(BaseModel):
    """Post creation body."""
    title: str
    content: str
    author: AuthorIn

    def to_record(self) -> PostRecord:
        return PostRecord(
            title=self.title, content=self.content, author=self.author.to_doc(),
        )


class PostUpdate(PostCreate):
    """Full replacement body. id is optional but must match the path when sent."""
    id: UUID | None = None


class PostResponse(BaseModel):
    """Post as returned to clients (flattened author)."""
    id: UUID
    title: str
    content: str
    author: str
