"""Subscriptions of a customer."""

from collections.abc import Awaitable
from typing import Any

from mollie_client.binders.base import InnerBinder, operation
from mollie_client.models.list import List
from mollie_client.models.subscription import Subscription
from mollie_client.validation import require_id


def get_path_segments(customer_id: str) -> str:
    return f"customers/{customer_id}/subscriptions"


class CustomerSubscriptionsBinder(InnerBinder[Subscription]):
    """
    Create, fetch, list, update and cancel the subscriptions of a customer.

    Every operation requires customer_id. Example:

        subscription = await client.customer_subscriptions.create(
            customer_id="cst_8wmqcHMN4U",
            amount={"value": "25.00", "currency": "EUR"},
            interval="1 month",
            description="Monthly plan",
        )
    """

    @operation
    def create(
        self, *, idempotency_key: str | None = None, **parameters: Any
    ) -> Awaitable[Subscription]:
        customer_id = self._parent_id(parameters, "customer_id", "customer")
        return self.network_client.post(
            get_path_segments(customer_id), parameters, idempotency_key=idempotency_key
        )

    @operation
    def get(self, id: str, **parameters: Any) -> Awaitable[Subscription]:
        require_id(id, "subscription")
        customer_id = self._parent_id(parameters, "customer_id", "customer")
        return self.network_client.get(f"{get_path_segments(customer_id)}/{id}", parameters)

    @operation
    def list(self, **parameters: Any) -> Awaitable[List[Subscription]]:
        customer_id = self._parent_id(parameters, "customer_id", "customer")
        return self._paginated(get_path_segments(customer_id), "subscriptions", parameters)

    @operation
    def update(self, id: str, **parameters: Any) -> Awaitable[Subscription]:
        require_id(id, "subscription")
        customer_id = self._parent_id(parameters, "customer_id", "customer")
        return self.network_client.patch(f"{get_path_segments(customer_id)}/{id}", parameters)

    @operation
    def cancel(self, id: str, **parameters: Any) -> Awaitable[Subscription]:
        require_id(id, "subscription")
        customer_id = self._parent_id(parameters, "customer_id", "customer")
        return self.network_client.delete(
            f"{get_path_segments(customer_id)}/{id}", parameters or None
        )

    all = list
    page = list
