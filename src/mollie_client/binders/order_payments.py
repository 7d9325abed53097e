"""Payments created on an existing order."""

from collections.abc import Awaitable
from typing import Any

from mollie_client.binders.base import InnerBinder, operation
from mollie_client.models.payment import Payment


class OrderPaymentsBinder(InnerBinder[Payment]):
    """
    Create a new payment for an order whose earlier payment failed or expired.

    Reference: https://docs.mollie.com/reference/v2/orders-api/create-order-payment
    """

    @operation
    def create(self, *, idempotency_key: str | None = None, **parameters: Any) -> Awaitable[Payment]:
        order_id = self._parent_id(parameters, "order_id", "order")
        return self.network_client.post(
            f"orders/{order_id}/payments", parameters, idempotency_key=idempotency_key
        )
