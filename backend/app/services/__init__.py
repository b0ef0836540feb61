"""
Services Module

Store operations behind the HTTP routes:
- accounts: registration, login, account removal
- posts: post CRUD with author-only mutation
- comments: comment creation and listing
"""
from . import accounts, comments, posts

__all__ = ["accounts", "comments", "posts"]
