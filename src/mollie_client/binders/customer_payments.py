"""Payments of a customer."""

from collections.abc import Awaitable
from typing import Any

from mollie_client.binders.base import InnerBinder, operation
from mollie_client.models.list import List
from mollie_client.models.payment import Payment


def get_path_segments(customer_id: str) -> str:
    return f"customers/{customer_id}/payments"


class CustomerPaymentsBinder(InnerBinder[Payment]):
    """
    Create and list payments linked to a customer, e.g. the first payment of
    a recurring sequence. Every operation requires customer_id.
    """

    @operation
    def create(self, *, idempotency_key: str | None = None, **parameters: Any) -> Awaitable[Payment]:
        customer_id = self._parent_id(parameters, "customer_id", "customer")
        return self.network_client.post(
            get_path_segments(customer_id), parameters, idempotency_key=idempotency_key
        )

    @operation
    def list(self, **parameters: Any) -> Awaitable[List[Payment]]:
        customer_id = self._parent_id(parameters, "customer_id", "customer")
        return self._paginated(get_path_segments(customer_id), "payments", parameters)

    all = list
    page = list
