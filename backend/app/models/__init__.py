# app/models/__init__.py
"""
Database models module initialization.
Exports all database models for convenient imports throughout the application.

Models exported:
- Account: Login name and password digest
- Post: Text post with optional image, owned by an Account
- Comment: Comment left on a Post
"""
from .account import Account
from .post import Post
from .comment import Comment
