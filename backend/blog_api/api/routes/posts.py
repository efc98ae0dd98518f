"""Posts - CRUD endpoints translating between wire posts and the store.

Invariants:
    - Responses always flatten author to "firstName lastName"
    - Unknown ids raise ResourceNotFoundError (404) on read, update and delete
    - PUT answers 201 with the updated post; id is never changed
    - DELETE answers 204 with an empty body

Design Decisions:
    - Store injected via Depends(get_post_store): tests swap the session, not the routes
    - PUT keeps the 201 status existing clients already assert on
    - No upsert: PUT on a missing id is a 404, not a create
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from blog_api.api.dependencies import get_post_store
from blog_api.core.domain_types import PostId
from blog_api.core.errors import IdMismatchError, ResourceNotFoundError
from blog_api.core.format_post import serialize_post
from blog_api.core.repository_protocols import PostRepository
from blog_api.schemas.post import PostCreate, PostResponse, PostUpdate

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/posts", tags=["posts"])


async def get_post_or_404(post_id: UUID, store: PostRepository):
    post = await store.find_by_id(PostId(post_id))
    if post is None:
        raise ResourceNotFoundError("Post", str(post_id))
    return post


@router.get("", response_model=list[PostResponse])
async def list_posts(store: PostRepository = Depends(get_post_store)):
    """Return every post."""
    posts = await store.list_all()
    return [serialize_post(p) for p in posts]


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(post_id: UUID, store: PostRepository = Depends(get_post_store)):
    post = await get_post_or_404(post_id, store)
    return serialize_post(post)


@router.post(
    "", response_model=PostResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_post(
    body: PostCreate, store: PostRepository = Depends(get_post_store),
):
    """Create a post; the store assigns its id."""
    [post] = await store.insert_many([body.to_record()])
    logger.info(f"Created post {post.id}", extra={"post_id": str(post.id)})
    return serialize_post(post)


@router.put(
    "/{post_id}", response_model=PostResponse,
    status_code=status.HTTP_201_CREATED,
)
async def update_post(
    post_id: UUID, body: PostUpdate,
    store: PostRepository = Depends(get_post_store),
):
    """Replace title, content and author of an existing post."""
    if body.id is not None and body.id != post_id:
        raise IdMismatchError(str(post_id), str(body.id))
    post = await store.replace(
        PostId(post_id), body.title, body.content, body.author.to_doc(),
    )
    if post is None:
        raise ResourceNotFoundError("Post", str(post_id))
    return serialize_post(post)


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(
    post_id: UUID, store: PostRepository = Depends(get_post_store),
):
    deleted = await store.delete_by_id(PostId(post_id))
    if not deleted:
        raise ResourceNotFoundError("Post", str(post_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
