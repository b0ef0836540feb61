# app/models/post.py
"""
Database model for posts.
A post belongs to the account that wrote it and may carry one image URL.
"""
import uuid
from tortoise import fields, models

class Post(models.Model):
    """
    Post database model.

    Only the title and content change after creation, and only the author may
    change them. Comments point at posts by id without a foreign key, so
    deleting a post leaves its comments in place.
    """
    id = fields.UUIDField(pk=True, default=uuid.uuid4)
    title = fields.CharField(max_length=256)
    content = fields.TextField()
    author = fields.ForeignKeyField(
        "models.Account",
        related_name="posts",
        on_delete=fields.CASCADE
    )  # Removed together with the author's account
    image = fields.CharField(max_length=1024, null=True)  # URL of the attached image, if any
    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "posts"
