# app/schemas/comment.py
"""
Pydantic schemas for comment endpoints.
"""
import datetime as dt
from typing import Union
from pydantic import BaseModel

from .post import AuthorRef

class PostRef(BaseModel):
    id: str
    title: str

class CommentIn(BaseModel):
    content: str = ""

class CommentOut(BaseModel):
    """
    A comment as returned by the API.
    On listing, author and post are resolved; a reference to a record that
    no longer exists is returned as None.
    """
    id: str
    content: str
    author: Union[AuthorRef, str, None] = None
    post: Union[PostRef, str, None] = None
    createdAt: dt.datetime
