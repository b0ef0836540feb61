# app/core/security.py
"""
Security module for authentication and authorization.
Handles password hashing, JWT token creation/validation and the
author-only check applied to post mutations.
"""
import datetime as dt
import logging

import jwt  # PyJWT
from passlib.context import CryptContext

from app.core.errors import (
    Forbidden,
    InternalError,
    InvalidSignature,
    MalformedToken,
    MissingToken,
    TokenExpired,
)

logger = logging.getLogger("uvicorn.error")

# Password hashing context
# Argon2 is a modern, salted and deliberately slow password hashing algorithm
pwd_context = CryptContext(
    schemes=["argon2"],
    deprecated="auto",
)

def hash_password(plain: str) -> str:
    """
    Hash a plain text password using Argon2.

    Args:
        plain: Plain text password to hash

    Returns:
        Hashed password string (salted, so two calls never return the same value)

    Raises:
        InternalError: If the hashing backend itself fails
    """
    try:
        return pwd_context.hash(plain)
    except Exception as exc:
        raise InternalError("Password hashing failed", detail=str(exc)) from exc

def verify_password(plain: str, hashed: str) -> bool:
    """
    Verify a plain text password against a hashed password.

    Returns False (never raises) for empty input or a digest that is not a
    recognizable hash.
    """
    if plain is None or not hashed:
        return False
    try:
        return pwd_context.verify(plain, hashed)
    except (TypeError, ValueError):
        return False


class TokenService:
    """
    Issues and verifies signed, time-limited bearer tokens.

    The secret is injected at construction and never changes afterwards;
    verification is stateless, so expiry is the only way a token stops
    being valid.
    """

    def __init__(self, secret: str, ttl_minutes: int = 60, algorithm: str = "HS256"):
        self.secret = secret
        self.ttl = dt.timedelta(minutes=ttl_minutes)
        self.algorithm = algorithm

    def issue(self, subject_id: str, now: dt.datetime | None = None) -> str:
        """
        Create a JWT for an account id.

        Token payload includes:
            - sub: Subject (account ID)
            - iat: Issued at timestamp
            - exp: Expiration timestamp (iat + ttl)
        """
        now = now or dt.datetime.now(dt.timezone.utc)
        payload = {
            "sub": str(subject_id),
            "iat": now,
            "exp": now + self.ttl,
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> str:
        """
        Verify a token and return its subject id.

        Raises:
            MalformedToken: Token is not a parseable JWT or lacks required claims
            InvalidSignature: Signature does not match under our secret
            TokenExpired: Current time is at or past exp
        """
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"require": ["sub", "exp"]},
            )
        except jwt.ExpiredSignatureError as exc:
            raise TokenExpired(detail=str(exc)) from exc
        # InvalidSignatureError subclasses DecodeError, so it has to come first
        except jwt.InvalidSignatureError as exc:
            raise InvalidSignature(detail=str(exc)) from exc
        except jwt.InvalidTokenError as exc:
            raise MalformedToken(detail=str(exc)) from exc
        return payload["sub"]


def extract_bearer_token(authorization: str | None) -> str | None:
    """Return the token part of an ``Authorization: Bearer xxx`` header, if any."""
    if authorization and authorization.lower().startswith("bearer "):
        token = authorization.split(" ", 1)[1].strip()
        return token or None
    return None

def authenticate(authorization: str | None, tokens: TokenService) -> str:
    """
    Resolve the acting account id from an Authorization header.

    Raises MissingToken when no bearer token is present; token verification
    errors propagate unchanged.
    """
    token = extract_bearer_token(authorization)
    if not token:
        raise MissingToken()
    return tokens.verify(token)

def authorize_mutation(subject_id: str, author_id: str) -> None:
    """Only the author of a resource may change or delete it."""
    if str(subject_id) != str(author_id):
        logger.warning("[auth] forbidden mutation subject=%s author=%s", subject_id, author_id)
        raise Forbidden()
