"""Resource models for the Mollie API client."""

from mollie_client.models.base import Amount, Link, Model
from mollie_client.models.capture import Capture
from mollie_client.models.chargeback import Chargeback, ChargebackEmbedded
from mollie_client.models.customer import Customer
from mollie_client.models.exceptions import (
    ApiRequestError,
    LocalValidationError,
    MollieError,
    NoSuchPageError,
)
from mollie_client.models.list import List
from mollie_client.models.order import Order, OrderEmbedded, OrderLine, OrderStatus
from mollie_client.models.organization import Organization
from mollie_client.models.payment import (
    Payment,
    PaymentEmbedded,
    PaymentStatus,
    SequenceType,
)
from mollie_client.models.refund import Refund, RefundStatus
from mollie_client.models.shipment import Shipment, ShipmentTracking
from mollie_client.models.subscription import Subscription, SubscriptionStatus

# Embedded resources refer to each other (a payment embeds its chargebacks, a
# chargeback embeds its payment), so the forward references are resolved here
# once every class exists.
_NAMESPACE = {
    "Capture": Capture,
    "Chargeback": Chargeback,
    "Customer": Customer,
    "Order": Order,
    "OrderLine": OrderLine,
    "Payment": Payment,
    "Refund": Refund,
    "Shipment": Shipment,
    "Subscription": Subscription,
}

for _model in (
    PaymentEmbedded,
    Payment,
    ChargebackEmbedded,
    Chargeback,
    OrderEmbedded,
    Order,
):
    _model.model_rebuild(force=True, _types_namespace=_NAMESPACE)

# Resource kind tag -> model class used by TransformingNetworkClient
TRANSFORMERS: dict[str, type[Model]] = {
    model.resource_name: model
    for model in (
        Capture,
        Chargeback,
        Customer,
        Order,
        OrderLine,
        Organization,
        Payment,
        Refund,
        Shipment,
        Subscription,
    )
}

__all__ = [
    "Amount",
    "ApiRequestError",
    "Capture",
    "Chargeback",
    "Customer",
    "Link",
    "List",
    "LocalValidationError",
    "Model",
    "MollieError",
    "NoSuchPageError",
    "Order",
    "OrderLine",
    "OrderStatus",
    "Organization",
    "Payment",
    "PaymentStatus",
    "Refund",
    "RefundStatus",
    "SequenceType",
    "Shipment",
    "ShipmentTracking",
    "Subscription",
    "SubscriptionStatus",
    "TRANSFORMERS",
]
