"""Shipments of an order."""

from collections.abc import Awaitable
from typing import Any

from mollie_client.binders.base import InnerBinder, operation
from mollie_client.models.list import List
from mollie_client.models.shipment import Shipment
from mollie_client.validation import require_id


def get_path_segments(order_id: str) -> str:
    return f"orders/{order_id}/shipments"


class OrderShipmentsBinder(InnerBinder[Shipment]):
    """
    Create, fetch, list and update the shipments of an order.

    Every operation requires order_id. Example:

        shipment = await client.order_shipments.create(
            order_id="ord_pbjz8x",
            lines=[],
            tracking={"carrier": "PostNL", "code": "3SKABA000000000"},
        )
    """

    @operation
    def create(self, *, idempotency_key: str | None = None, **parameters: Any) -> Awaitable[Shipment]:
        """
        Ship (part of) an order.

        Args:
            idempotency_key: Explicit Idempotency-Key header value
            **parameters: order_id plus shipment fields (lines, tracking).
                An empty lines list ships all remaining lines.

        Raises:
            LocalValidationError: If order_id is missing or malformed
        """
        order_id = self._parent_id(parameters, "order_id", "order")
        return self.network_client.post(
            get_path_segments(order_id), parameters, idempotency_key=idempotency_key
        )

    @operation
    def get(self, id: str, **parameters: Any) -> Awaitable[Shipment]:
        """
        Fetch a single shipment.

        Raises:
            LocalValidationError: If the shipment id, or order_id, is missing or malformed
        """
        require_id(id, "shipment")
        order_id = self._parent_id(parameters, "order_id", "order")
        return self.network_client.get(f"{get_path_segments(order_id)}/{id}", parameters)

    @operation
    def update(self, id: str, **parameters: Any) -> Awaitable[Shipment]:
        """Update the tracking information of a shipment."""
        require_id(id, "shipment")
        order_id = self._parent_id(parameters, "order_id", "order")
        return self.network_client.patch(f"{get_path_segments(order_id)}/{id}", parameters)

    @operation
    def list(self, **parameters: Any) -> Awaitable[List[Shipment]]:
        order_id = self._parent_id(parameters, "order_id", "order")
        return self._paginated(get_path_segments(order_id), "shipments", parameters)

    all = list
    page = list
