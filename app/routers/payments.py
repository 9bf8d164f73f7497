"""
Payment Endpoints

Checkout runs in two steps: the browser gets a client secret from
``/create-payment-intent``, confirms the card with Stripe.js, then posts the
completed payment to ``/payments``, which also empties the paid cart rows.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.dependencies import Claims, get_payment_gateway, require_self, verify_token
from app.repositories import PaymentRepository
from app.schemas import (
    DeleteResult,
    ErrorResponse,
    InsertResult,
    PaymentCreate,
    PaymentIntentRequest,
    PaymentIntentResponse,
    PaymentRecordResponse,
    PaymentResponse,
)
from app.services import checkout
from app.services.payment import BasePaymentService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Payments"])

AUTH_ERRORS = {
    400: {"model": ErrorResponse},
    401: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.get(
    "/payments/{email}",
    response_model=List[PaymentResponse],
    responses={401: {"model": ErrorResponse}, 403: {"model": ErrorResponse}},
    summary="Own Payment History",
)
async def payment_history(
    email: str,
    claims: Claims = Depends(verify_token),
    db: AsyncSession = Depends(get_db),
):
    require_self(email, claims)
    return await PaymentRepository(db).list_for_email(email)


@router.post(
    "/create-payment-intent",
    response_model=PaymentIntentResponse,
    responses=AUTH_ERRORS,
    summary="Create Payment Intent",
)
async def create_payment_intent(
    payload: PaymentIntentRequest,
    claims: Claims = Depends(verify_token),
    gateway: BasePaymentService = Depends(get_payment_gateway),
) -> PaymentIntentResponse:
    logger.info(f"Creating payment intent of ${payload.price:.2f} for {claims['email']}")
    client_secret = await checkout.create_intent(gateway, payload.price)
    return PaymentIntentResponse(client_secret=client_secret)


@router.post(
    "/payments",
    response_model=PaymentRecordResponse,
    responses={**AUTH_ERRORS, 403: {"model": ErrorResponse}},
    summary="Record Payment And Purge Cart",
)
async def record_payment(
    payload: PaymentCreate,
    claims: Claims = Depends(verify_token),
    db: AsyncSession = Depends(get_db),
) -> PaymentRecordResponse:
    require_self(payload.email, claims)
    result = await checkout.record_payment(db, payload.model_dump())
    return PaymentRecordResponse(
        payment_result=InsertResult(inserted_id=result["payment"].id),
        delete_result=DeleteResult(deleted_count=result["deleted_count"]),
    )
