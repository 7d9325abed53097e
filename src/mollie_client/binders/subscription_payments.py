"""Payments generated by a subscription."""

from collections.abc import Awaitable
from typing import Any

from mollie_client.binders.base import InnerBinder, operation
from mollie_client.models.list import List
from mollie_client.models.payment import Payment


class SubscriptionPaymentsBinder(InnerBinder[Payment]):
    """List the payments of a subscription. Requires customer_id and subscription_id."""

    @operation
    def list(self, **parameters: Any) -> Awaitable[List[Payment]]:
        customer_id = self._parent_id(parameters, "customer_id", "customer")
        subscription_id = self._parent_id(parameters, "subscription_id", "subscription")
        return self._paginated(
            f"customers/{customer_id}/subscriptions/{subscription_id}/payments",
            "payments",
            parameters,
        )

    all = list
    page = list
