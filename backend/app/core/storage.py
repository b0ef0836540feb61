# app/core/storage.py
"""
Local storage for images attached to posts.
Files are written under settings.upload_dir and served as static files
under settings.upload_url_prefix.
"""
import logging
import os
import uuid

from fastapi import UploadFile

from app.config import settings
from app.core.errors import InternalError, ValidationError

logger = logging.getLogger("uvicorn.error")

ALLOWED_EXTENSIONS = {".png", ".jpg", ".jpeg", ".gif", ".webp", ".bmp"}

def ensure_upload_dir() -> str:
    os.makedirs(settings.upload_dir, exist_ok=True)
    return settings.upload_dir

async def save_image(file: UploadFile) -> str:
    """
    Save an uploaded image and return the URL it is served from.

    Raises:
        ValidationError: The upload is not an image
        InternalError: The file could not be written
    """
    ext = os.path.splitext(file.filename or "")[1].lower()
    content_type = (file.content_type or "").lower()
    if ext not in ALLOWED_EXTENSIONS or not content_type.startswith("image/"):
        raise ValidationError("Only image files can be attached")

    fname = f"{uuid.uuid4().hex}{ext}"
    fpath = os.path.join(ensure_upload_dir(), fname)
    try:
        with open(fpath, "wb") as f:
            f.write(await file.read())
    except OSError as exc:
        raise InternalError("Failed to store image", detail=str(exc)) from exc
    logger.info("[storage] saved image %s (%s)", fname, content_type)
    return f"{settings.upload_url_prefix.rstrip('/')}/{fname}"

def delete_image(url: str) -> None:
    """Remove a stored image by the URL save_image returned for it."""
    fname = os.path.basename(url)
    fpath = os.path.join(settings.upload_dir, fname)
    try:
        os.remove(fpath)
    except FileNotFoundError:
        return
    logger.info("[storage] removed image %s", fname)
