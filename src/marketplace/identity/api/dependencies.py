"""FastAPI dependencies resolving the authenticated principal."""

from fastapi import Depends, Header

from marketplace.identity.security import decode_token
from marketplace.shared.access import Principal, require_buyer, require_seller
from marketplace.shared.errors import NotAuthenticated


async def get_principal(authorization: str | None = Header(default=None)) -> Principal:
    """Resolve the caller from an `Authorization: Bearer <token>` header."""
    if not authorization:
        raise NotAuthenticated("Missing Authorization header")

    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise NotAuthenticated("Authorization header must be a bearer token")

    return decode_token(token.strip())


async def get_seller(principal: Principal = Depends(get_principal)) -> Principal:
    require_seller(principal)
    return principal


async def get_buyer(principal: Principal = Depends(get_principal)) -> Principal:
    require_buyer(principal)
    return principal
