"""Payment resource."""

from enum import Enum
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field

from mollie_client.models.base import Amount, Model

if TYPE_CHECKING:
    from mollie_client.models.capture import Capture
    from mollie_client.models.chargeback import Chargeback
    from mollie_client.models.list import List
    from mollie_client.models.refund import Refund


class PaymentStatus(str, Enum):
    """Lifecycle states of a payment."""

    OPEN = "open"
    CANCELED = "canceled"
    PENDING = "pending"
    AUTHORIZED = "authorized"
    EXPIRED = "expired"
    FAILED = "failed"
    PAID = "paid"


class SequenceType(str, Enum):
    ONEOFF = "oneoff"
    FIRST = "first"
    RECURRING = "recurring"


class PaymentEmbedded(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")

    refunds: tuple["Refund", ...] | None = None
    chargebacks: tuple["Chargeback", ...] | None = None
    captures: tuple["Capture", ...] | None = None


class Payment(Model):
    """A payment, e.g. tr_7UhSN1zuXS."""

    resource_name = "payment"

    # Plain strings: the API may add states; predicates compare against PaymentStatus
    status: str | None = None
    amount: Amount | None = None
    description: str | None = None
    method: str | None = None
    metadata: Any = None
    redirect_url: str | None = None
    webhook_url: str | None = None
    created_at: str | None = None
    paid_at: str | None = None
    authorized_at: str | None = None
    canceled_at: str | None = None
    expires_at: str | None = None
    expired_at: str | None = None
    failed_at: str | None = None
    is_cancelable: bool | None = None
    sequence_type: str | None = None
    profile_id: str | None = None
    customer_id: str | None = None
    mandate_id: str | None = None
    subscription_id: str | None = None
    order_id: str | None = None
    settlement_id: str | None = None
    amount_refunded: Amount | None = None
    amount_remaining: Amount | None = None
    amount_captured: Amount | None = None
    amount_charged_back: Amount | None = None
    settlement_amount: Amount | None = None
    details: dict[str, Any] | None = None
    embedded: PaymentEmbedded | None = Field(default=None, alias="_embedded")

    def is_open(self) -> bool:
        return self.status == PaymentStatus.OPEN

    def is_canceled(self) -> bool:
        return self.status == PaymentStatus.CANCELED

    def is_expired(self) -> bool:
        return self.status == PaymentStatus.EXPIRED

    def is_failed(self) -> bool:
        return self.status == PaymentStatus.FAILED

    def is_pending(self) -> bool:
        return self.status == PaymentStatus.PENDING

    def is_authorized(self) -> bool:
        return self.status == PaymentStatus.AUTHORIZED

    def is_paid(self) -> bool:
        """True once the payment has been paid, even if it was refunded since."""
        return self.paid_at is not None

    def has_refunds(self) -> bool:
        return self.has_link("refunds")

    def has_chargebacks(self) -> bool:
        return self.has_link("chargebacks")

    def has_sequence_type_first(self) -> bool:
        return self.sequence_type == SequenceType.FIRST

    def has_sequence_type_recurring(self) -> bool:
        return self.sequence_type == SequenceType.RECURRING

    def get_checkout_url(self) -> str | None:
        """URL the customer should be redirected to, while the payment is open."""
        return self.get_link("checkout")

    def can_be_refunded(self) -> bool:
        return self.amount_remaining is not None

    def can_be_partially_refunded(self) -> bool:
        return self.amount_remaining is not None

    def get_amount_remaining(self) -> Amount | None:
        return self.amount_remaining

    def get_amount_refunded(self) -> Amount | None:
        return self.amount_refunded

    def get_settlement_amount(self) -> Amount | None:
        return self.settlement_amount

    async def get_refunds(self) -> "List[Refund]":
        return await self._follow_list("refunds", "refunds")

    async def get_chargebacks(self) -> "List[Chargeback]":
        return await self._follow_list("chargebacks", "chargebacks")

    async def get_captures(self) -> "List[Capture]":
        return await self._follow_list("captures", "captures")
