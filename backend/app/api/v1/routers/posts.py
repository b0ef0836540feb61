# app/api/v1/routers/posts.py
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile, status

from app.api.v1.deps import get_current_account_id
from app.core.storage import delete_image, save_image
from app.schemas.auth import MessageOut
from app.schemas.post import PostOut, PostUpdateIn
from app.services import posts
from app.services.posts import post_to_out

router = APIRouter(prefix="/posts", tags=["posts"])

@router.post("", response_model=PostOut, status_code=status.HTTP_201_CREATED)
async def create_post(
    title: str = Form(""),
    content: str = Form(""),
    image: Optional[UploadFile] = File(None),
    account_id: str = Depends(get_current_account_id),
):
    """
    Create a post as the authenticated account.

    Accepts multipart form data: title, content and an optional image file.
    The image is stored locally and its URL saved on the post.
    """
    posts.check_post_fields(title, content)
    image_url = None
    if image is not None and image.filename:
        image_url = await save_image(image)
    try:
        post = await posts.create_post(account_id, title, content, image_url)
    except Exception:
        # Nothing references the image if the post was not stored
        if image_url:
            delete_image(image_url)
        raise
    return post_to_out(post)

@router.get("", response_model=list[PostOut])
async def list_posts():
    """All posts, in store order, with author usernames. No authentication."""
    return [post_to_out(p, resolve_author=True) for p in await posts.list_posts()]

@router.get("/{post_id}", response_model=PostOut)
async def get_post(post_id: str):
    post = await posts.get_post(post_id)
    return post_to_out(post, resolve_author=True)

@router.put("/{post_id}", response_model=PostOut)
async def update_post(post_id: str, body: Optional[PostUpdateIn] = None, account_id: str = Depends(get_current_account_id)):
    """
    Update title and/or content. Only the author may do this (403 otherwise).
    Empty or omitted fields keep their current value.
    """
    body = body or PostUpdateIn()
    post = await posts.update_post(post_id, account_id, title=body.title, content=body.content)
    return post_to_out(post)

@router.delete("/{post_id}", response_model=MessageOut)
async def delete_post(post_id: str, account_id: str = Depends(get_current_account_id)):
    await posts.delete_post(post_id, account_id)
    return MessageOut(message="Post deleted")
