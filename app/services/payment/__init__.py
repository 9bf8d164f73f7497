"""
Payment Gateway Factory

Provides a single entry point for building the payment gateway. The rest of
the application only sees BasePaymentService.

Usage:
    from app.services.payment import create_payment_service

    # Built once in the application lifespan and kept on app.state
    gateway = create_payment_service(settings)
    result = await gateway.create_payment_intent(29.99)

Environment Switching:
    - ENV_MODE=development → MockPaymentService (no API calls)
    - ENV_MODE=staging → StripePaymentService (test keys)
    - ENV_MODE=production → StripePaymentService (live keys)

Author: Khalil Bannouri
Version: 4.0.0
"""

import logging

from app.core.config import Settings
from app.services.payment.base import (
    BasePaymentService,
    PaymentIntentResult,
    to_minor_units,
)
from app.services.payment.mock import MockPaymentService
from app.services.payment.stripe import StripePaymentService

logger = logging.getLogger(__name__)


def create_payment_service(settings: Settings) -> BasePaymentService:
    """
    Build the configured payment gateway.

    Returns:
        BasePaymentService: MockPaymentService in development mode,
        StripePaymentService otherwise

    Raises:
        ValueError: If a real-service mode has no Stripe key configured
    """
    if settings.is_development:
        logger.info("Payment Service: Using MockPaymentService (development mode)")
        return MockPaymentService(
            failure_rate=settings.mock_payment_failure_rate,
            latency_ms=settings.mock_payment_latency_ms,
            currency=settings.stripe_currency,
        )

    logger.info(
        f"Payment Service: Using StripePaymentService "
        f"({settings.env_mode.value} mode)"
    )
    return StripePaymentService(
        secret_key=settings.stripe_secret_key,
        currency=settings.stripe_currency,
    )


__all__ = [
    "create_payment_service",
    "to_minor_units",
    "BasePaymentService",
    "PaymentIntentResult",
    "MockPaymentService",
    "StripePaymentService",
]
