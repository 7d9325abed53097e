"""Orders API binder."""

from collections.abc import Awaitable, Sequence
from typing import Any

from mollie_client.binders.base import Binder, operation
from mollie_client.models.list import List
from mollie_client.models.order import Order
from mollie_client.validation import require_id

PATH = "orders"


class OrdersBinder(Binder[Order]):
    """
    Create, fetch, list, update and cancel orders.

    Reference: https://docs.mollie.com/reference/v2/orders-api/create-order
    """

    @operation
    def create(
        self,
        *,
        embed: str | Sequence[str] | None = None,
        idempotency_key: str | None = None,
        **parameters: Any,
    ) -> Awaitable[Order]:
        """
        Create an order.

        Args:
            embed: Related resources to embed, e.g. "payments" (sent as query)
            idempotency_key: Explicit Idempotency-Key header value
            **parameters: Order fields, e.g. amount, order_number, lines,
                billing_address, redirect_url, locale
        """
        query = {"embed": embed} if embed is not None else None
        return self.network_client.post(
            PATH, parameters, query, idempotency_key=idempotency_key
        )

    @operation
    def get(self, id: str, **parameters: Any) -> Awaitable[Order]:
        """
        Fetch a single order.

        Args:
            id: Order id (ord_...)
            **parameters: Query parameters such as embed ("payments,refunds,shipments")
        """
        require_id(id, "order")
        return self.network_client.get(f"{PATH}/{id}", parameters)

    @operation
    def list(self, **parameters: Any) -> Awaitable[List[Order]]:
        return self._paginated(PATH, "orders", parameters)

    @operation
    def update(self, id: str, **parameters: Any) -> Awaitable[Order]:
        """Update billing/shipping address, order number or redirect/webhook URLs."""
        require_id(id, "order")
        return self.network_client.patch(f"{PATH}/{id}", parameters)

    @operation
    def cancel(self, id: str, **parameters: Any) -> Awaitable[Order]:
        """
        Cancel an order. Only orders with is_cancelable set can be canceled.

        Raises:
            LocalValidationError: If the order id is malformed
        """
        require_id(id, "order")
        return self.network_client.delete(f"{PATH}/{id}", parameters or None)

    all = list
    page = list
