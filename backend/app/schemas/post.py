# app/schemas/post.py
"""
Pydantic schemas for post endpoints.
"""
import datetime as dt
from typing import Optional, Union
from pydantic import BaseModel

class AuthorRef(BaseModel):
    """Author resolved to its username (listing and detail responses)."""
    id: str
    username: str

class PostOut(BaseModel):
    """
    A post as returned by the API.
    `author` is the bare account id on create/update responses and an
    AuthorRef on read responses; it is None when the author no longer exists.
    """
    id: str
    title: str
    content: str
    author: Union[AuthorRef, str, None] = None
    image: Optional[str] = None  # URL of the attached image
    createdAt: dt.datetime

class PostUpdateIn(BaseModel):
    """
    Partial update. Omitted or empty fields keep their current value.
    """
    title: Optional[str] = None
    content: Optional[str] = None
