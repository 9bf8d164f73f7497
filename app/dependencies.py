"""
Request Dependencies

Authorization gate and shared-state injection for route handlers.

Gate checks, each a hard stop:
    1. verify_token: a bearer token must be present and valid
    2. verify_admin: the token's email must belong to an admin user,
       looked up on every request so role changes apply immediately
    3. require_self: self-scoped routes only serve the token's own email
"""

import logging
from typing import Any, Optional

from fastapi import Depends, Header, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import Settings
from app.core.exceptions import Forbidden, Unauthorized
from app.core.security import decode_access_token
from app.database import get_db
from app.repositories import UserRepository
from app.services.payment import BasePaymentService

logger = logging.getLogger(__name__)

Claims = dict[str, Any]


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_payment_gateway(request: Request) -> BasePaymentService:
    return request.app.state.payment_service


async def verify_token(
    authorization: Optional[str] = Header(None),
    settings: Settings = Depends(get_app_settings),
) -> Claims:
    """
    Authenticate the request from its ``Authorization: Bearer`` header.

    A request without the header is refused with "Forbidden access"; a token
    that does not verify is refused with "Unauthorized access". Both are 401.
    """
    if not authorization:
        raise Unauthorized("Forbidden access")

    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise Unauthorized()

    return decode_access_token(token.strip(), settings.access_token_secret)


async def verify_admin(
    claims: Claims = Depends(verify_token),
    db: AsyncSession = Depends(get_db),
) -> Claims:
    email = claims["email"]
    if not await UserRepository(db).is_admin(email):
        logger.warning(f"Admin route refused for {email}")
        raise Forbidden()
    return claims


def require_self(email: str, claims: Claims) -> None:
    """Refuse access to another identity's email-scoped resources."""
    if email != claims.get("email"):
        raise Forbidden()
