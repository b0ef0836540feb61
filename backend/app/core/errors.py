# app/core/errors.py
"""
Application error hierarchy.

Every failure raised by the services and the authorization layer derives from
BoardError. The exception handler registered in app.main turns these into a
JSON body of the form {"message": ..., "code": ..., "error": ...} with the
HTTP status carried by the class.
"""
from fastapi import status


class BoardError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    code: str = "INTERNAL_ERROR"
    message: str = "Internal server error"

    def __init__(self, message: str | None = None, *, detail: str | None = None):
        self.message = message or self.message
        self.detail = detail  # Original error text, echoed back to the caller
        super().__init__(self.message)

    def to_dict(self) -> dict:
        body = {"message": self.message, "code": self.code}
        if self.detail:
            body["error"] = self.detail
        return body


class ValidationError(BoardError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "BAD_REQUEST"
    message = "Invalid request"


class BadCredential(ValidationError):
    code = "BAD_CREDENTIAL"
    message = "Password does not match"


class NotFound(BoardError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "NOT_FOUND"
    message = "Resource not found"


class AccountNotFound(NotFound):
    """Login with an unknown username; reported as a bad request."""

    status_code = status.HTTP_400_BAD_REQUEST
    code = "USER_NOT_FOUND"
    message = "User not found"


class Unauthorized(BoardError):
    status_code = status.HTTP_401_UNAUTHORIZED
    code = "AUTH_REQUIRED"
    message = "Authentication required"


class MissingToken(Unauthorized):
    code = "AUTH_REQUIRED"
    message = "No bearer token provided"


class MalformedToken(Unauthorized):
    code = "AUTH_MALFORMED_TOKEN"
    message = "Token could not be parsed"


class InvalidSignature(Unauthorized):
    code = "AUTH_INVALID_SIGNATURE"
    message = "Token signature is invalid"


class TokenExpired(Unauthorized):
    code = "AUTH_TOKEN_EXPIRED"
    message = "Token has expired"


class AccountGone(Unauthorized):
    """Valid token whose account has since been deleted."""

    code = "AUTH_USER_NOT_FOUND"
    message = "Account no longer exists"


class Forbidden(BoardError):
    status_code = status.HTTP_403_FORBIDDEN
    code = "FORBIDDEN"
    message = "Not allowed to modify this resource"


class Conflict(BoardError):
    # Duplicate registration has always been answered with a 500
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    code = "USERNAME_EXISTS"
    message = "Username already exists"


class InternalError(BoardError):
    pass
