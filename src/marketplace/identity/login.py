"""Credential checks and token issue."""

import structlog
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from marketplace.identity.account import Account
from marketplace.identity.security import create_token, verify_password
from marketplace.shared.errors import NotAuthenticated

logger = structlog.get_logger(__name__)


def find_by_username(username: str) -> Account:
    matches = current_domain.repository_for(Account)._dao.query.filter(username=username).all().items
    if not matches:
        raise ObjectNotFoundError(f"Account {username!r} does not exist")
    return matches[0]


def login(username: str, password: str) -> dict:
    """Exchange a username and password for a bearer token."""
    try:
        account = find_by_username(username)
    except ObjectNotFoundError:
        logger.info("Login rejected", username=username, reason="unknown_user")
        raise NotAuthenticated("Invalid username or password") from None

    if not verify_password(password, account.password_hash):
        logger.info("Login rejected", username=username, reason="bad_password")
        raise NotAuthenticated("Invalid username or password")

    return {
        "access_token": create_token(account.id, account.role, account.username),
        "token_type": "bearer",
        "account_id": str(account.id),
        "username": account.username,
        "role": account.role,
    }
