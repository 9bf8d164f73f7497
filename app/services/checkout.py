"""
Checkout Service

Turns a cart into a payment: asks the gateway for a payment intent, then,
once the browser has confirmed the card payment, records the payment and
purges the cart rows it paid for.
"""

import logging
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import GatewayError, InternalError
from app.repositories import CartRepository, PaymentRepository
from app.services.payment import BasePaymentService

logger = logging.getLogger(__name__)


async def create_intent(gateway: BasePaymentService, amount: float) -> str:
    """
    Create a payment intent for ``amount`` dollars.

    Returns:
        The intent's client secret

    Raises:
        GatewayError: If the gateway rejected or failed the request
    """
    result = await gateway.create_payment_intent(amount)
    if not result.success:
        logger.error(
            f"Error creating payment intent via {gateway.provider_name}: "
            f"{result.error_code} - {result.error_message}"
        )
        raise GatewayError()

    logger.info(
        f"Payment intent {result.payment_intent_id} created "
        f"({result.amount} {result.currency}, {result.response_time_ms:.0f}ms)"
    )
    return result.client_secret


async def record_payment(session: AsyncSession, payment: dict[str, Any]) -> dict[str, Any]:
    """
    Insert a payment and delete the cart items it replaces.

    Both writes share one transaction: the cart is only purged if the payment
    row is stored, and a failed purge rolls the payment back.

    Args:
        session: Request-scoped database session
        payment: Validated payment fields (snake_case)

    Returns:
        {"payment": Payment, "deleted_count": int}

    Raises:
        InternalError: If the store rejected either write
    """
    payments = PaymentRepository(session)
    carts = CartRepository(session)

    try:
        created = await payments.create(payment, commit=False)
        deleted_count = await carts.delete_many(payment.get("cart_ids") or [], commit=False)
        await session.commit()
    except SQLAlchemyError as e:
        await session.rollback()
        logger.error(f"Error recording payment for {payment.get('email')}: {e}")
        raise InternalError("Failed to process payment")
    except Exception:
        await session.rollback()
        raise

    logger.info(
        f"Payment {created.id} recorded for {created.email} "
        f"(${created.price:.2f}, {deleted_count} cart items purged)"
    )
    return {"payment": created, "deleted_count": deleted_count}
