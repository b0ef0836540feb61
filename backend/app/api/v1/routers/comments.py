# app/api/v1/routers/comments.py
import logging

from fastapi import APIRouter, Depends, status

from app.api.v1.deps import get_current_account_id
from app.schemas.comment import CommentIn, CommentOut
from app.services import comments
from app.services.comments import comment_to_out

logger = logging.getLogger("uvicorn.error")

router = APIRouter(prefix="/posts/{post_id}/comments", tags=["comments"])

@router.post("", response_model=CommentOut, status_code=status.HTTP_201_CREATED)
async def create_comment(post_id: str, body: CommentIn, account_id: str = Depends(get_current_account_id)):
    """
    Comment on a post. Any authenticated account may comment on any post;
    the post id is not checked against existing posts.

    Errors:
        400 BAD_REQUEST: Empty content
        401: Missing or invalid token
    """
    logger.debug("[comments] new comment post=%s account=%s", post_id, account_id)
    comment = await comments.create_comment(account_id, post_id, body.content)
    return comment_to_out(comment)

@router.get("", response_model=list[CommentOut])
async def list_comments(post_id: str):
    """Comments of a post with author usernames and the post title. No authentication."""
    return await comments.list_comments(post_id)
