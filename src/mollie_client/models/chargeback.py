"""Chargeback resource."""

from pydantic import BaseModel, ConfigDict, Field

from mollie_client.models.base import Amount, Model
from mollie_client.models.payment import Payment


class ChargebackEmbedded(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")

    payments: tuple[Payment, ...] | None = None


class Chargeback(Model):
    """A chargeback on a payment, e.g. chb_n9z0tp."""

    resource_name = "chargeback"

    amount: Amount | None = None
    settlement_amount: Amount | None = None
    created_at: str | None = None
    reversed_at: str | None = None
    payment_id: str | None = None
    embedded: ChargebackEmbedded | None = Field(default=None, alias="_embedded")

    def is_reversed(self) -> bool:
        return self.reversed_at is not None

    async def get_payment(self) -> Payment:
        return await self._follow("payment")
