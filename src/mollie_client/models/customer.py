"""Customer resource."""

from typing import TYPE_CHECKING, Any

from mollie_client.models.base import Model

if TYPE_CHECKING:
    from mollie_client.models.list import List
    from mollie_client.models.payment import Payment
    from mollie_client.models.subscription import Subscription


class Customer(Model):
    """A customer, e.g. cst_8wmqcHMN4U."""

    resource_name = "customer"

    name: str | None = None
    email: str | None = None
    locale: str | None = None
    metadata: Any = None
    recently_used_methods: tuple[str, ...] | None = None
    created_at: str | None = None

    async def get_payments(self) -> "List[Payment]":
        return await self._follow_list("payments", "payments")

    async def get_subscriptions(self) -> "List[Subscription]":
        return await self._follow_list("subscriptions", "subscriptions")
