"""Capture resource."""

from typing import TYPE_CHECKING

from mollie_client.models.base import Amount, Model

if TYPE_CHECKING:
    from mollie_client.models.payment import Payment


class Capture(Model):
    """A capture of an authorized payment, e.g. cpt_4qqhO89gsT."""

    resource_name = "capture"

    amount: Amount | None = None
    settlement_amount: Amount | None = None
    payment_id: str | None = None
    shipment_id: str | None = None
    settlement_id: str | None = None
    created_at: str | None = None

    async def get_payment(self) -> "Payment":
        return await self._follow("payment")
