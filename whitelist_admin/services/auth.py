import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

import jwt
from fastapi import Header

from whitelist_admin.core import config
from whitelist_admin.core.errors import (Forbidden,
                                         InternalConfigurationError,
                                         InvalidTokenError, TokenExpiredError,
                                         Unauthorized)
from whitelist_admin.core.security import (create_access_token,
                                           decode_access_token,
                                           verify_password)
from whitelist_admin.core.time import from_timestamp

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


@dataclass(frozen=True)
class AdminPrincipal:
    username: str
    issued_at: datetime
    expires_at: datetime
    role: str = config.ADMIN_ROLE


def _require_secret() -> str:
    if not config.JWT_SECRET:
        logger.error("JWT_SECRET not configured in environment variables")
        raise InternalConfigurationError()
    return config.JWT_SECRET


def login(username: str, password: str) -> tuple[str, int]:
    """Check the admin credential pair and issue a signed session token.

    Returns ``(token, expires_in_seconds)``. Both a wrong username and a
    wrong password raise the same ``Unauthorized`` error.
    """
    if not config.ADMIN_USERNAME or not config.ADMIN_PASSWORD_HASH:
        logger.error(
            "Admin credentials not configured in environment variables"
        )
        raise InternalConfigurationError()
    secret = _require_secret()

    # Hash on every attempt so timing does not reveal a wrong username.
    password_ok = verify_password(password, config.ADMIN_PASSWORD_HASH)

    if username != config.ADMIN_USERNAME:
        logger.warning(
            "Failed login attempt", extra={"attempted_username": username}
        )
        raise Unauthorized("Invalid credentials")

    if not password_ok:
        logger.warning(
            "Failed login attempt for admin user",
            extra={"attempted_username": username},
        )
        raise Unauthorized("Invalid credentials")

    token = create_access_token(
        {"username": config.ADMIN_USERNAME, "role": config.ADMIN_ROLE},
        secret,
        expires_in=config.TOKEN_TTL_SECONDS,
    )
    logger.info("Admin user logged in", extra={"admin_username": username})
    return token, config.TOKEN_TTL_SECONDS


def extract_bearer_token(authorization: Optional[str]) -> str:
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        raise Unauthorized("Access token is required")
    token = authorization[len(BEARER_PREFIX):].strip()
    if not token:
        raise Unauthorized("Access token is required")
    return token


def verify_token(authorization: Optional[str]) -> AdminPrincipal:
    token = extract_bearer_token(authorization)
    secret = _require_secret()

    try:
        claims = decode_access_token(token, secret)
    except jwt.ExpiredSignatureError:
        logger.info("Rejected expired admin token")
        raise TokenExpiredError()
    except jwt.PyJWTError as exc:
        logger.warning(
            "Rejected invalid admin token", extra={"reason": str(exc)}
        )
        raise InvalidTokenError()

    if claims.get("role") != config.ADMIN_ROLE:
        logger.warning(
            "Rejected token without admin role",
            extra={"claimed_role": claims.get("role")},
        )
        raise Forbidden("Invalid token: insufficient permissions")

    try:
        return AdminPrincipal(
            username=str(claims["username"]),
            issued_at=from_timestamp(int(claims["iat"])),
            expires_at=from_timestamp(int(claims["exp"])),
        )
    except (KeyError, TypeError, ValueError):
        logger.warning("Rejected admin token with incomplete claims")
        raise InvalidTokenError()


def require_admin(
    authorization: Optional[str] = Header(default=None),
) -> AdminPrincipal:
    return verify_token(authorization)
