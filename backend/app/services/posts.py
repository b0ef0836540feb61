"""
Post store: create, list, read, partial update and delete.
"""
import logging

from app.core.errors import NotFound, ValidationError
from app.core.security import authorize_mutation
from app.models.post import Post
from app.schemas.post import AuthorRef, PostOut
from app.services.accounts import require_account
from app.services.ids import parse_id

logger = logging.getLogger("uvicorn.error")

def post_to_out(post: Post, resolve_author: bool = False) -> PostOut:
    """
    Serialize a post. With resolve_author the author must have been fetched
    (prefetch_related("author")) and is returned as {id, username}.
    """
    author = str(post.author_id)
    if resolve_author:
        author = AuthorRef(id=str(post.author.id), username=post.author.username) if post.author else None
    return PostOut(
        id=str(post.id),
        title=post.title,
        content=post.content,
        author=author,
        image=post.image,
        createdAt=post.created_at,
    )

async def _get_or_404(post_id: str, *, with_author: bool = False) -> Post:
    pid = parse_id(post_id)
    post = None
    if pid:
        qs = Post.filter(id=pid)
        if with_author:
            qs = qs.prefetch_related("author")
        post = await qs.first()
    if not post:
        raise NotFound("Post not found")
    return post

def check_post_fields(title: str, content: str) -> None:
    if not title or not content:
        raise ValidationError("title/content required")

async def create_post(author_id: str, title: str, content: str, image: str | None = None) -> Post:
    check_post_fields(title, content)
    await require_account(author_id)
    post = await Post.create(
        author_id=parse_id(author_id),
        title=title,
        content=content,
        image=image,
    )
    logger.info("[posts] created id=%s author=%s image=%s", post.id, post.author_id, bool(image))
    return post

async def list_posts() -> list[Post]:
    """All posts in the order they were stored, authors prefetched."""
    return await Post.all().order_by("created_at").prefetch_related("author")

async def get_post(post_id: str) -> Post:
    return await _get_or_404(post_id, with_author=True)

async def update_post(post_id: str, subject_id: str, title: str | None = None, content: str | None = None) -> Post:
    """
    Partial update by the post's author.

    An empty or missing value leaves the field unchanged, so a field can not
    be cleared through this call.
    """
    post = await _get_or_404(post_id)
    authorize_mutation(subject_id, post.author_id)
    post.title = title or post.title
    post.content = content or post.content
    await post.save(update_fields=["title", "content"])
    return post

async def delete_post(post_id: str, subject_id: str) -> None:
    """Delete a post; its comments are left in place."""
    post = await _get_or_404(post_id)
    authorize_mutation(subject_id, post.author_id)
    await post.delete()
    logger.info("[posts] deleted id=%s", post.id)
