"""Token issuing endpoint."""

import logging
from datetime import timedelta

from fastapi import APIRouter, Depends

from app.core.config import Settings
from app.core.security import create_access_token
from app.dependencies import get_app_settings
from app.schemas import ErrorResponse, TokenRequest, TokenResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Auth"])


@router.post(
    "/jwt",
    response_model=TokenResponse,
    responses={400: {"model": ErrorResponse}},
    summary="Issue Bearer Token",
)
async def issue_token(
    payload: TokenRequest,
    settings: Settings = Depends(get_app_settings),
) -> TokenResponse:
    """Sign the supplied identity claims into a short-lived bearer token."""
    token = create_access_token(
        payload.model_dump(exclude_none=True),
        settings.access_token_secret,
        expires_in=timedelta(minutes=settings.access_token_expire_minutes),
    )
    logger.debug(f"Token issued for {payload.email}")
    return TokenResponse(token=token)
