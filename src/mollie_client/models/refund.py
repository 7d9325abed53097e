"""Refund resource."""

from enum import Enum
from typing import TYPE_CHECKING, Any

from mollie_client.models.base import Amount, Model
from mollie_client.models.order import OrderLine

if TYPE_CHECKING:
    from mollie_client.models.payment import Payment


class RefundStatus(str, Enum):
    QUEUED = "queued"
    PENDING = "pending"
    PROCESSING = "processing"
    REFUNDED = "refunded"
    FAILED = "failed"
    CANCELED = "canceled"


class Refund(Model):
    resource_name = "refund"

    status: str | None = None
    amount: Amount | None = None
    settlement_amount: Amount | None = None
    description: str | None = None
    metadata: Any = None
    payment_id: str | None = None
    order_id: str | None = None
    settlement_id: str | None = None
    created_at: str | None = None
    lines: tuple[OrderLine, ...] | None = None

    def is_queued(self) -> bool:
        return self.status == RefundStatus.QUEUED

    def is_pending(self) -> bool:
        return self.status == RefundStatus.PENDING

    def is_processing(self) -> bool:
        return self.status == RefundStatus.PROCESSING

    def is_refunded(self) -> bool:
        return self.status == RefundStatus.REFUNDED

    def is_failed(self) -> bool:
        return self.status == RefundStatus.FAILED

    def is_canceled(self) -> bool:
        return self.status == RefundStatus.CANCELED

    async def get_payment(self) -> "Payment":
        return await self._follow("payment")
