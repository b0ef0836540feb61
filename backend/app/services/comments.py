"""
Comment store: create and list comments of a post.
"""
import logging

from app.core.errors import ValidationError
from app.models.account import Account
from app.models.comment import Comment
from app.models.post import Post
from app.schemas.comment import CommentOut, PostRef
from app.schemas.post import AuthorRef
from app.services.accounts import require_account
from app.services.ids import parse_id

logger = logging.getLogger("uvicorn.error")

def comment_to_out(comment: Comment, author: AuthorRef | str | None = None, post: PostRef | str | None = None) -> CommentOut:
    return CommentOut(
        id=str(comment.id),
        content=comment.content,
        author=author if author is not None else str(comment.author_id),
        post=post if post is not None else str(comment.post_id),
        createdAt=comment.created_at,
    )

async def create_comment(author_id: str, post_id: str, content: str) -> Comment:
    """
    Add a comment to a post.

    The post is not looked up: a comment can reference a post that does not
    (or no longer) exist.
    """
    if not content:
        raise ValidationError("Comment content is required")
    pid = parse_id(post_id)
    if not pid:
        raise ValidationError("Invalid post id")
    await require_account(author_id)
    comment = await Comment.create(content=content, author_id=parse_id(author_id), post_id=pid)
    logger.debug("[comments] created id=%s post=%s author=%s", comment.id, pid, author_id)
    return comment

async def list_comments(post_id: str) -> list[CommentOut]:
    """
    Comments of a post, oldest first, with author username and post title
    resolved. References to removed records come back as None.
    """
    pid = parse_id(post_id)
    if not pid:
        return []
    comments = await Comment.filter(post_id=pid).order_by("created_at")
    if not comments:
        return []

    author_ids = {c.author_id for c in comments}
    authors = {a.id: AuthorRef(id=str(a.id), username=a.username)
               for a in await Account.filter(id__in=list(author_ids))}
    post = await Post.get_or_none(id=pid)
    post_ref = PostRef(id=str(post.id), title=post.title) if post else None

    items = []
    for c in comments:
        items.append(CommentOut(
            id=str(c.id),
            content=c.content,
            author=authors.get(c.author_id),
            post=post_ref,
            createdAt=c.created_at,
        ))
    return items
