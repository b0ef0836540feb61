# app/models/account.py
"""
Database model for accounts.
Holds the login name and the password digest; the digest is never serialized.
"""
import uuid
from tortoise import fields, models

class Account(models.Model):
    """
    Account database model.

    Relationships:
    - Has many Posts (one-to-many, via related_name="posts")

    Comments reference their author by id only, so they are kept when the
    account is removed.
    """
    id = fields.UUIDField(pk=True, default=uuid.uuid4)  # Primary key: unique account identifier
    username = fields.CharField(
        max_length=256,
        unique=True,
        index=True
    )  # Login name (must be unique, indexed for fast lookups)
    password_hash = fields.CharField(max_length=255)  # Argon2 digest, never the plain password
    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "accounts"
