"""
Stripe Payment Gateway Implementation

Production implementation using the official Stripe Python SDK.
Used when ENV_MODE=production or ENV_MODE=staging.

Requirements:
    - STRIPE_SECRET_KEY must be set in environment

Security Notes:
    - Card details never reach this server; the browser confirms the
      intent with the returned client_secret

Author: Khalil Bannouri
Version: 4.0.0
"""

import logging
from datetime import datetime

import stripe

from app.services.payment.base import (
    BasePaymentService,
    PaymentIntentResult,
    to_minor_units,
)

logger = logging.getLogger(__name__)


class StripePaymentService(BasePaymentService):
    """
    Production Stripe gateway.

    Creates card-only PaymentIntents in a single fixed currency.

    Example:
        >>> service = StripePaymentService("sk_test_...", currency="usd")
        >>> result = await service.create_payment_intent(29.99)
    """

    def __init__(self, secret_key: str, currency: str = "usd"):
        """
        Initialize Stripe with the API key.

        Raises:
            ValueError: If no secret key is given
        """
        if not secret_key:
            raise ValueError(
                "STRIPE_SECRET_KEY is required for production mode. "
                "Set it in your .env file or environment variables."
            )

        # Configure Stripe SDK
        stripe.api_key = secret_key
        stripe.api_version = "2023-10-16"  # Pin API version for stability

        self._currency = currency

        logger.info(
            f"StripePaymentService initialized "
            f"(api_version={stripe.api_version}, currency={currency})"
        )

    @property
    def provider_name(self) -> str:
        """Return the provider name."""
        return "stripe"

    async def create_payment_intent(self, amount: float) -> PaymentIntentResult:
        """
        Create a PaymentIntent for client-side confirmation.

        Returns a client_secret that the frontend uses with Stripe.js
        to complete the card payment.
        """
        start_time = datetime.now()
        cents = to_minor_units(amount)

        try:
            intent = stripe.PaymentIntent.create(
                amount=cents,
                currency=self._currency,
                payment_method_types=["card"],
            )

            elapsed_ms = (datetime.now() - start_time).total_seconds() * 1000

            logger.info(
                f"Stripe: PaymentIntent created - {intent.id} - "
                f"{cents} {self._currency}"
            )

            return PaymentIntentResult(
                success=True,
                payment_intent_id=intent.id,
                client_secret=intent.client_secret,
                amount=intent.amount,
                currency=intent.currency,
                response_time_ms=elapsed_ms,
            )

        except stripe.AuthenticationError as e:
            # API key issues
            logger.critical(f"Stripe: Authentication failed - {e}")

            return PaymentIntentResult(
                success=False,
                error_message="Payment service configuration error",
                error_code="authentication_error",
            )

        except stripe.APIConnectionError as e:
            # Network issues
            elapsed_ms = (datetime.now() - start_time).total_seconds() * 1000
            logger.error(f"Stripe: Connection error - {e}")

            return PaymentIntentResult(
                success=False,
                error_message="Payment service temporarily unavailable",
                error_code="connection_error",
                response_time_ms=elapsed_ms,
            )

        except stripe.StripeError as e:
            elapsed_ms = (datetime.now() - start_time).total_seconds() * 1000
            logger.error(f"Stripe: Failed to create PaymentIntent - {e}")

            return PaymentIntentResult(
                success=False,
                error_message=str(e),
                error_code=getattr(e, "code", None) or "stripe_error",
                response_time_ms=elapsed_ms,
            )

    async def health_check(self) -> bool:
        """
        Verify Stripe API connectivity.

        Makes a lightweight API call to verify credentials and connectivity.
        """
        try:
            stripe.Account.retrieve()
            logger.debug("Stripe: Health check passed")
            return True

        except stripe.StripeError as e:
            logger.error(f"Stripe: Health check failed - {e}")
            return False
