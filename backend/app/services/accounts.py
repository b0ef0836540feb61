"""
Account store: registration, login and account removal.
"""
import logging

from starlette.concurrency import run_in_threadpool
from tortoise.exceptions import IntegrityError

from app.core.errors import AccountGone, AccountNotFound, BadCredential, Conflict, NotFound, ValidationError
from app.core.security import TokenService, hash_password, verify_password
from app.models.account import Account
from app.models.post import Post
from app.services.ids import parse_id

logger = logging.getLogger("uvicorn.error")

async def create_account(username: str, password: str) -> Account:
    """
    Register a new account.

    Raises:
        ValidationError: username or password missing
        Conflict: username already taken
    """
    if not username or not password:
        raise ValidationError("username/password required")
    if await Account.filter(username=username).exists():
        raise Conflict()
    # Argon2 is slow on purpose, keep it off the event loop
    digest = await run_in_threadpool(hash_password, password)
    try:
        account = await Account.create(username=username, password_hash=digest)
    except IntegrityError as exc:
        # Lost a race against a concurrent registration of the same name
        raise Conflict(detail=str(exc)) from exc
    logger.info("[accounts] registered username=%s id=%s", account.username, account.id)
    return account

async def login(username: str, password: str, tokens: TokenService) -> str:
    """
    Check credentials and issue a fresh token for the account.

    Raises:
        AccountNotFound: no account with that username
        BadCredential: password does not match
    """
    account = await Account.get_or_none(username=username) if username else None
    if not account:
        raise AccountNotFound()
    if not await run_in_threadpool(verify_password, password, account.password_hash):
        logger.warning("[accounts] bad password for username=%s", username)
        raise BadCredential()
    return tokens.issue(str(account.id))

async def require_account(account_id: str) -> None:
    """
    A token outlives its account, so writes check the author still exists.

    Raises:
        AccountGone: the account behind the token was deleted
    """
    aid = parse_id(account_id)
    if not aid or not await Account.filter(id=aid).exists():
        logger.warning("[accounts] token for missing account id=%s", account_id)
        raise AccountGone()

async def delete_account(subject_id: str) -> None:
    """
    Remove an account together with the posts it authored.
    Comments written by the account, and comments on its posts, are kept.
    """
    account_id = parse_id(subject_id)
    account = await Account.get_or_none(id=account_id) if account_id else None
    if not account:
        raise NotFound("User not found")
    deleted_posts = await Post.filter(author_id=account.id).delete()
    await account.delete()
    logger.info("[accounts] deleted id=%s posts=%s", account.id, deleted_posts)
