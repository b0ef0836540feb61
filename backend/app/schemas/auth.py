# app/schemas/auth.py
"""
Pydantic schemas for account endpoints.
Defines request/response models for registration and login.
"""
from pydantic import BaseModel

class CredentialsIn(BaseModel):
    """
    Request model shared by register and login.
    Missing fields default to empty strings so the services can answer with
    a 400 instead of a schema error.
    """
    username: str = ""  # Login name
    password: str = ""  # Plain text password (hashed server-side)

class RegisterOut(BaseModel):
    message: str
    id: str  # New account identifier

class LoginOut(BaseModel):
    """
    Response model for successful login.
    """
    token: str  # JWT to send as "Authorization: Bearer <token>"

class MessageOut(BaseModel):
    message: str
