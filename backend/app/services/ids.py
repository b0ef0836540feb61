"""
Identifier helpers shared by the store services.
"""
import uuid

def parse_id(value) -> uuid.UUID | None:
    """Return value as a UUID, or None when it is not a well-formed id."""
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except (TypeError, ValueError, AttributeError):
        return None
