"""
Mock Payment Gateway Implementation

Simulates Stripe payment intent creation without making real API calls.
Used in development mode (ENV_MODE=development) to:
    - Exercise the complete checkout flow locally
    - Run the test suite without network access or a Stripe key

Behavior:
    - Optional simulated response time
    - Fails a configurable share of requests (default: none)
    - Generates Stripe-like IDs and client secrets (pi_xxx_secret_xxx)

Author: Khalil Bannouri
Version: 4.0.0
"""

import asyncio
import random
import uuid
import logging

from app.services.payment.base import (
    BasePaymentService,
    PaymentIntentResult,
    to_minor_units,
)

logger = logging.getLogger(__name__)


class MockPaymentService(BasePaymentService):
    """
    Mock implementation of the payment gateway.

    Attributes:
        failure_rate: Probability of a simulated gateway failure (0.0-1.0)
        latency_ms: Simulated response time in milliseconds
        currency: Currency reported on created intents

    Example:
        >>> service = MockPaymentService(failure_rate=0.1)
        >>> result = await service.create_payment_intent(29.99)
        >>> print(result.success)  # True ~90% of the time
    """

    # Simulated failure reasons (mimics real Stripe error codes)
    FAILURE_REASONS = [
        ("api_connection_error", "Could not connect to the payment gateway."),
        ("rate_limit", "Too many requests hit the API too quickly."),
        ("api_error", "An error occurred while creating the payment intent."),
    ]

    def __init__(
        self,
        failure_rate: float = 0.0,
        latency_ms: int = 0,
        currency: str = "usd",
    ):
        self.failure_rate = failure_rate
        self.latency_ms = latency_ms
        self.currency = currency

        logger.info(
            f"MockPaymentService initialized "
            f"(failure_rate={failure_rate:.0%}, latency={latency_ms}ms)"
        )

    @property
    def provider_name(self) -> str:
        """Return the provider name."""
        return "mock"

    def _generate_payment_intent_id(self) -> str:
        """Generate a Stripe-like payment intent ID."""
        return f"pi_mock_{uuid.uuid4().hex[:24]}"

    async def _simulate_latency(self) -> float:
        if self.latency_ms:
            await asyncio.sleep(self.latency_ms / 1000)
        return float(self.latency_ms)

    def _should_fail(self) -> bool:
        """Determine if this request should simulate a failure."""
        return random.random() < self.failure_rate

    async def create_payment_intent(self, amount: float) -> PaymentIntentResult:
        """
        Simulate creating a payment intent.

        The fake client_secret follows Stripe's format but won't work with
        Stripe.js.
        """
        latency_ms = await self._simulate_latency()
        cents = to_minor_units(amount)

        if cents <= 0:
            return PaymentIntentResult(
                success=False,
                error_message="Amount must be greater than 0",
                error_code="invalid_amount",
                response_time_ms=latency_ms,
            )

        if self._should_fail():
            error_code, error_message = random.choice(self.FAILURE_REASONS)
            logger.debug(f"Mock: Payment intent failed - {error_code}")
            return PaymentIntentResult(
                success=False,
                amount=cents,
                currency=self.currency,
                error_message=error_message,
                error_code=error_code,
                response_time_ms=latency_ms,
            )

        payment_intent_id = self._generate_payment_intent_id()
        logger.debug(f"Mock: Created payment intent {payment_intent_id} for {cents} cents")

        return PaymentIntentResult(
            success=True,
            payment_intent_id=payment_intent_id,
            client_secret=f"{payment_intent_id}_secret_mock",
            amount=cents,
            currency=self.currency,
            response_time_ms=latency_ms,
        )

    async def health_check(self) -> bool:
        """The mock gateway is always available."""
        logger.debug("Mock: Health check passed")
        return True
