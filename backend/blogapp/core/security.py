from datetime import datetime, timedelta, timezone
from typing import NamedTuple

import jwt
from passlib.hash import bcrypt

from blogapp.core.config import Settings
from blogapp.core.errors import ForbiddenError


class Identity(NamedTuple):
    user_id: int
    email: str


def hash_password(password: str) -> str:
    return bcrypt.hash(password)

def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.verify(password, password_hash)
    except (ValueError, TypeError):
        return False

def create_access_token(user_id: int, email: str, settings: Settings,
                        now: datetime | None = None) -> str:
    issued = now or datetime.now(timezone.utc)
    payload = {
        "sub": str(user_id),
        "email": email,
        "iat": issued,
        "exp": issued + timedelta(days=settings.TOKEN_TTL_DAYS),
    }
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)

def decode_access_token(token: str, settings: Settings) -> Identity:
    """Any failure (signature, expiry, missing claims) means an invalid token."""
    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.JWT_ALGORITHM],
            options={"require": ["exp", "sub"]},
        )
        return Identity(user_id=int(payload["sub"]), email=payload.get("email") or "")
    except (jwt.InvalidTokenError, ValueError) as e:
        raise ForbiddenError("Invalid token") from e
