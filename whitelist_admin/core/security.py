from datetime import datetime, timedelta, timezone
from typing import Any

import jwt
from passlib.context import CryptContext

from whitelist_admin.core import config

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return pwd_context.verify(password, password_hash)
    except (ValueError, TypeError):
        # Unrecognised or corrupted hash in configuration.
        return False


def create_access_token(
    claims: dict[str, Any],
    secret: str,
    expires_in: int = config.TOKEN_TTL_SECONDS,
) -> str:
    issued_at = datetime.now(timezone.utc)
    payload = claims.copy()
    payload.update(
        {"iat": issued_at, "exp": issued_at + timedelta(seconds=expires_in)}
    )
    return jwt.encode(payload, secret, algorithm=config.JWT_ALGORITHM)


def decode_access_token(token: str, secret: str) -> dict[str, Any]:
    return jwt.decode(token, secret, algorithms=[config.JWT_ALGORITHM])
