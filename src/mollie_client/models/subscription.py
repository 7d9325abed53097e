"""Subscription resource."""

from enum import Enum
from typing import TYPE_CHECKING, Any

from mollie_client.models.base import Amount, Model

if TYPE_CHECKING:
    from mollie_client.models.customer import Customer
    from mollie_client.models.list import List
    from mollie_client.models.payment import Payment


class SubscriptionStatus(str, Enum):
    PENDING = "pending"
    ACTIVE = "active"
    CANCELED = "canceled"
    SUSPENDED = "suspended"
    COMPLETED = "completed"


class Subscription(Model):
    """A recurring payment schedule of a customer, e.g. sub_rVKGtNd6s3."""

    resource_name = "subscription"

    status: str | None = None
    amount: Amount | None = None
    times: int | None = None
    times_remaining: int | None = None
    interval: str | None = None
    start_date: str | None = None
    next_payment_date: str | None = None
    description: str | None = None
    method: str | None = None
    mandate_id: str | None = None
    customer_id: str | None = None
    webhook_url: str | None = None
    metadata: Any = None
    created_at: str | None = None
    canceled_at: str | None = None

    def is_pending(self) -> bool:
        return self.status == SubscriptionStatus.PENDING

    def is_active(self) -> bool:
        return self.status == SubscriptionStatus.ACTIVE

    def is_canceled(self) -> bool:
        return self.status == SubscriptionStatus.CANCELED

    def is_suspended(self) -> bool:
        return self.status == SubscriptionStatus.SUSPENDED

    def is_completed(self) -> bool:
        return self.status == SubscriptionStatus.COMPLETED

    def get_webhook_url(self) -> str | None:
        return self.webhook_url

    async def get_customer(self) -> "Customer":
        return await self._follow("customer")

    async def get_payments(self) -> "List[Payment]":
        return await self._follow_list("payments", "payments")
