"""
Resource binders.

One binder per API resource; nested resources (shipments of an order,
refunds of a payment, ...) derive from InnerBinder and take their parent id
as an explicit keyword argument.
"""

from mollie_client.binders.base import Binder, InnerBinder, operation
from mollie_client.binders.chargebacks import ChargebacksBinder
from mollie_client.binders.customer_payments import CustomerPaymentsBinder
from mollie_client.binders.customer_subscriptions import CustomerSubscriptionsBinder
from mollie_client.binders.customers import CustomersBinder
from mollie_client.binders.order_payments import OrderPaymentsBinder
from mollie_client.binders.order_shipments import OrderShipmentsBinder
from mollie_client.binders.orders import OrdersBinder
from mollie_client.binders.organizations import OrganizationsBinder
from mollie_client.binders.payment_captures import PaymentCapturesBinder
from mollie_client.binders.payment_chargebacks import PaymentChargebacksBinder
from mollie_client.binders.payment_refunds import PaymentRefundsBinder
from mollie_client.binders.payments import PaymentsBinder
from mollie_client.binders.subscription_payments import SubscriptionPaymentsBinder

__all__ = [
    "Binder",
    "ChargebacksBinder",
    "CustomerPaymentsBinder",
    "CustomerSubscriptionsBinder",
    "CustomersBinder",
    "InnerBinder",
    "OrderPaymentsBinder",
    "OrderShipmentsBinder",
    "OrdersBinder",
    "OrganizationsBinder",
    "PaymentCapturesBinder",
    "PaymentChargebacksBinder",
    "PaymentRefundsBinder",
    "PaymentsBinder",
    "SubscriptionPaymentsBinder",
    "operation",
]
