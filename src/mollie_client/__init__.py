"""Async client library for the Mollie payments API."""

__version__ = "0.1.0"

from mollie_client.client import MollieClient, create_mollie_client
from mollie_client.logging_config import configure_logging
from mollie_client.models import (
    Amount,
    ApiRequestError,
    Capture,
    Chargeback,
    Customer,
    List,
    LocalValidationError,
    MollieError,
    NoSuchPageError,
    Order,
    OrderLine,
    Organization,
    Payment,
    Refund,
    Shipment,
    Subscription,
)

__all__ = [
    "Amount",
    "ApiRequestError",
    "Capture",
    "Chargeback",
    "Customer",
    "List",
    "LocalValidationError",
    "MollieClient",
    "MollieError",
    "NoSuchPageError",
    "Order",
    "OrderLine",
    "Organization",
    "Payment",
    "Refund",
    "Shipment",
    "Subscription",
    "configure_logging",
    "create_mollie_client",
    "__version__",
]
