"""
Bearer Token Service

Issues and verifies HS256-signed JWTs (PyJWT) that carry the caller's
identity claims. Tokens cannot be refreshed; once expired the client signs
in again and asks ``POST /jwt`` for a new one.
"""

import logging
import time
from datetime import timedelta
from typing import Any, Optional

import jwt

from app.core.exceptions import BadRequest, Unauthorized

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
DEFAULT_EXPIRES_IN = timedelta(hours=1)


def create_access_token(
    claims: dict[str, Any],
    secret: str,
    expires_in: Optional[timedelta] = None,
) -> str:
    """
    Sign identity claims into a bearer token.

    Args:
        claims: Identity claims; must include a non-empty ``email``
        secret: Signing key
        expires_in: Token lifetime (default: one hour)

    Returns:
        Encoded JWT string

    Raises:
        BadRequest: If ``email`` is missing from the claims
    """
    if not claims.get("email"):
        raise BadRequest("Email is required")

    now = int(time.time())
    lifetime = expires_in if expires_in is not None else DEFAULT_EXPIRES_IN
    payload = {
        **claims,
        "iat": now,
        "exp": now + int(lifetime.total_seconds()),
    }
    return jwt.encode(payload, secret, algorithm=ALGORITHM)


def decode_access_token(token: str, secret: str) -> dict[str, Any]:
    """
    Verify a bearer token and return its claims.

    Raises:
        Unauthorized: If the token is malformed, badly signed or expired
    """
    try:
        claims = jwt.decode(
            token,
            secret,
            algorithms=[ALGORITHM],
            options={"require": ["exp"]},
        )
    except jwt.ExpiredSignatureError:
        logger.debug("Rejected expired token")
        raise Unauthorized()
    except jwt.PyJWTError as e:
        logger.debug(f"Rejected invalid token: {e}")
        raise Unauthorized()

    if not claims.get("email"):
        raise Unauthorized()
    return claims
