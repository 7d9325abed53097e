"""
Client factory.

Builds the NetworkClient/TransformingNetworkClient pair and one binder per
resource, in the same configuration-driven way for API keys and OAuth
access tokens.
"""

from typing import Any

from mollie_client.binders import (
    ChargebacksBinder,
    CustomerPaymentsBinder,
    CustomerSubscriptionsBinder,
    CustomersBinder,
    OrderPaymentsBinder,
    OrderShipmentsBinder,
    OrdersBinder,
    OrganizationsBinder,
    PaymentCapturesBinder,
    PaymentChargebacksBinder,
    PaymentRefundsBinder,
    PaymentsBinder,
    SubscriptionPaymentsBinder,
)
from mollie_client.clients import NetworkClient, TransformingNetworkClient
from mollie_client.config import settings
from mollie_client.logging_config import get_logger
from mollie_client.models.exceptions import LocalValidationError

logger = get_logger(__name__)

API_KEY_PREFIXES = ("test_", "live_")
ACCESS_TOKEN_PREFIX = "access_"


class MollieClient:
    """
    Entry point holding one binder per resource.

    Usage:
        async with create_mollie_client(api_key="test_...") as mollie:
            payment = await mollie.payments.create(
                amount={"value": "10.00", "currency": "EUR"},
                description="Order #12345",
                redirect_url="https://webshop.example.org/order/12345/",
            )
            print(payment.get_checkout_url())
    """

    def __init__(self, network_client: NetworkClient) -> None:
        self.network_client = network_client
        transforming = TransformingNetworkClient(network_client)
        self.transforming_client = transforming

        self.payments = PaymentsBinder(transforming)
        self.payment_captures = PaymentCapturesBinder(transforming)
        self.payment_chargebacks = PaymentChargebacksBinder(transforming)
        self.payment_refunds = PaymentRefundsBinder(transforming)

        self.orders = OrdersBinder(transforming)
        self.order_payments = OrderPaymentsBinder(transforming)
        self.order_shipments = OrderShipmentsBinder(transforming)

        self.chargebacks = ChargebacksBinder(transforming)

        self.customers = CustomersBinder(transforming)
        self.customer_payments = CustomerPaymentsBinder(transforming)
        self.customer_subscriptions = CustomerSubscriptionsBinder(transforming)
        self.subscription_payments = SubscriptionPaymentsBinder(transforming)

        self.organizations = OrganizationsBinder(transforming)

    async def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        await self.network_client.close()

    async def __aenter__(self) -> "MollieClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()


def _resolve_bearer_token(api_key: str | None, access_token: str | None) -> str:
    if api_key and access_token:
        raise LocalValidationError("Pass either api_key or access_token, not both")

    if access_token:
        if not access_token.startswith(ACCESS_TOKEN_PREFIX):
            raise LocalValidationError(
                f"Access token must start with '{ACCESS_TOKEN_PREFIX}'"
            )
        return access_token

    if api_key:
        if not api_key.startswith(API_KEY_PREFIXES):
            raise LocalValidationError(
                "API key must start with 'test_' or 'live_'"
            )
        return api_key

    raise LocalValidationError("Missing parameter: api_key or access_token")


def create_mollie_client(
    api_key: str | None = None,
    access_token: str | None = None,
    api_endpoint: str | None = None,
    timeout_seconds: float | None = None,
    version_strings: list[str] | None = None,
    network_client: NetworkClient | None = None,
) -> MollieClient:
    """
    Create a Mollie API client.

    Arguments left out fall back to MOLLIE_* settings. Credentials given as
    arguments take precedence over credentials from the environment.

    Args:
        api_key: API key (test_... or live_...)
        access_token: OAuth access token (access_...)
        api_endpoint: Override the API base URL
        timeout_seconds: Request timeout in seconds
        version_strings: Extra User-Agent product tokens, e.g. ["Shop/1.2"]
        network_client: Pre-configured transport (for testing); credentials
            are not required when one is given

    Returns:
        MollieClient ready to issue requests

    Raises:
        LocalValidationError: If credentials are missing, doubled, or malformed
    """
    if network_client is None:
        if api_key is None and access_token is None:
            api_key, access_token = settings.api_key, settings.access_token

        bearer_token = _resolve_bearer_token(api_key, access_token)
        network_client = NetworkClient(
            api_endpoint=api_endpoint or settings.api_endpoint,
            bearer_token=bearer_token,
            timeout_seconds=timeout_seconds or settings.timeout_seconds,
            version_strings=version_strings or settings.version_strings,
        )

    logger.debug(
        "mollie_client_created",
        api_endpoint=network_client.api_endpoint,
        oauth=access_token is not None,
    )

    return MollieClient(network_client)
