# app/api/v1/routers/auth.py
from fastapi import APIRouter, Depends, status

from app.api.v1.deps import get_current_account_id, get_token_service
from app.core.security import TokenService
from app.schemas.auth import CredentialsIn, LoginOut, MessageOut, RegisterOut
from app.services import accounts

router = APIRouter(tags=["auth"])

@router.post("/register", response_model=RegisterOut, status_code=status.HTTP_201_CREATED)
async def register(body: CredentialsIn):
    """
    Register a new account.

    The password is hashed before storage; usernames are unique.

    Returns:
        201 {"message", "id"}

    Errors:
        400 BAD_REQUEST: Missing username or password
        500 USERNAME_EXISTS: Username already taken
    """
    account = await accounts.create_account(body.username, body.password)
    return RegisterOut(message="Registration successful", id=str(account.id))

@router.post("/login", response_model=LoginOut)
async def login(body: CredentialsIn, tokens: TokenService = Depends(get_token_service)):
    """
    Authenticate and return a bearer token.

    Errors:
        400 USER_NOT_FOUND: No account with that username
        400 BAD_CREDENTIAL: Wrong password
    """
    token = await accounts.login(body.username, body.password, tokens)
    return LoginOut(token=token)

@router.delete("/users", response_model=MessageOut)
async def delete_user(account_id: str = Depends(get_current_account_id)):
    """
    Delete the calling account and every post it wrote.
    Comments are not removed.

    Errors:
        401: Missing or invalid token
        404 NOT_FOUND: The account no longer exists
    """
    await accounts.delete_account(account_id)
    return MessageOut(message="Account deleted")
