# app/api/v1/deps.py
from fastapi import Depends, Header, Request

from app.core.security import TokenService, authenticate

def get_token_service(request: Request) -> TokenService:
    """
    The TokenService built from settings at startup (stored on app.state).
    Override this dependency to sign tokens with another secret or ttl.
    """
    return request.app.state.token_service

async def get_current_account_id(
    authorization: str | None = Header(default=None),
    tokens: TokenService = Depends(get_token_service),
) -> str:
    """
    FastAPI dependency resolving the acting account id.

    Extracts the JWT from the ``Authorization: Bearer xxx`` header and
    verifies it. The account is not loaded: routes that need it look it up
    themselves.

    Raises:
        MissingToken (401): No bearer token in the request
        MalformedToken / InvalidSignature / TokenExpired (401): Token rejected

    Usage:
        @router.post("/posts")
        async def create(account_id: str = Depends(get_current_account_id)):
            ...
    """
    return authenticate(authorization, tokens)
