"""Password hashing and bearer tokens."""

import os
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from passlib.context import CryptContext

from marketplace.shared.access import Principal, Role
from marketplace.shared.errors import NotAuthenticated

JWT_ALG = "HS256"
DEFAULT_TOKEN_TTL_MINUTES = 60

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def _jwt_secret() -> str:
    return os.getenv("MARKETPLACE_JWT_SECRET", "dev-secret-change-me")


def _token_ttl() -> timedelta:
    return timedelta(minutes=int(os.getenv("MARKETPLACE_TOKEN_TTL_MINUTES", DEFAULT_TOKEN_TTL_MINUTES)))


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    return pwd_context.verify(password, password_hash)


def create_token(account_id: str, role: str, username: str | None = None) -> str:
    now = datetime.now(UTC)
    payload = {
        "sub": str(account_id),
        "role": role,
        "username": username,
        "iat": now,
        "exp": now + _token_ttl(),
    }
    return jwt.encode(payload, _jwt_secret(), algorithm=JWT_ALG)


def decode_token(token: str) -> Principal:
    """Verify a bearer token and return the principal it was issued to."""
    try:
        payload = jwt.decode(token, _jwt_secret(), algorithms=[JWT_ALG])
    except JWTError as exc:
        raise NotAuthenticated("Invalid or expired token") from exc

    account_id = payload.get("sub")
    role = payload.get("role")
    if not account_id or role not in {r.value for r in Role}:
        raise NotAuthenticated("Invalid token claims")

    return Principal(id=account_id, role=role)
