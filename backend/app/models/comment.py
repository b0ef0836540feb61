# app/models/comment.py
import uuid
from tortoise import fields, models

class Comment(models.Model):
    id = fields.UUIDField(pk=True, default=uuid.uuid4)
    content = fields.TextField()
    # Plain ids: comments outlive their author and their post
    author_id = fields.UUIDField(index=True)
    post_id = fields.UUIDField(index=True)
    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "comments"
