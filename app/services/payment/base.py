"""
Payment Gateway Abstract Base Class

Defines the interface contract for all payment gateway implementations.
Both MockPaymentService and StripePaymentService implement these methods,
so checkout behaves identically regardless of which one is active.

Design Pattern: Strategy Pattern
    - Runtime switching between gateways via ENV_MODE
    - Facilitates testing with the mock implementation

Author: Khalil Bannouri
Version: 4.0.0
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal, ROUND_DOWN
from typing import Optional


def to_minor_units(amount: float) -> int:
    """
    Convert a major-unit amount (dollars) to minor units (cents).

    Multiplies by 100 and truncates toward zero; the decimal conversion keeps
    binary floating point noise from eating a cent (19.99 -> 1999).

    Args:
        amount: Amount in dollars (e.g., 29.99)

    Returns:
        int: Amount in cents (e.g., 2999)
    """
    cents = Decimal(str(amount)) * 100
    return int(cents.to_integral_value(rounding=ROUND_DOWN))


@dataclass
class PaymentIntentResult:
    """
    Standardized result from payment intent creation.

    Attributes:
        success: Whether the gateway accepted the request
        payment_intent_id: Gateway identifier (Stripe format: pi_xxx)
        client_secret: Secret the browser uses to confirm the card payment
        amount: Amount in minor units (cents)
        currency: Currency code (e.g., "usd")
        error_message: Error description if creation failed
        error_code: Machine-readable error code
        response_time_ms: Time taken by the gateway call
    """
    success: bool
    payment_intent_id: Optional[str] = None
    client_secret: Optional[str] = None
    amount: Optional[int] = None
    currency: str = "usd"
    error_message: Optional[str] = None
    error_code: Optional[str] = None
    response_time_ms: float = 0.0


class BasePaymentService(ABC):
    """
    Abstract base class for payment gateways.

    Example:
        >>> service = create_payment_service(settings)  # Mock or Stripe
        >>> result = await service.create_payment_intent(29.99)
        >>> if result.success:
        ...     print(result.client_secret)
    """

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """
        Return the name of the payment provider.

        Returns:
            str: Provider name (e.g., "mock", "stripe")
        """
        pass

    @abstractmethod
    async def create_payment_intent(self, amount: float) -> PaymentIntentResult:
        """
        Create a card-only payment intent for client-side confirmation.

        Args:
            amount: Amount in dollars; converted with ``to_minor_units``

        Returns:
            PaymentIntentResult: Contains client_secret for the frontend
        """
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """
        Verify connectivity to the payment gateway.

        Returns:
            bool: True if the gateway is reachable and operational
        """
        pass
