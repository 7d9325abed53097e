"""Order and order line resources."""

from enum import Enum
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field

from mollie_client.models.base import Amount, Model

if TYPE_CHECKING:
    from mollie_client.models.payment import Payment
    from mollie_client.models.refund import Refund
    from mollie_client.models.shipment import Shipment


class OrderStatus(str, Enum):
    """Lifecycle states of an order."""

    CREATED = "created"
    PAID = "paid"
    AUTHORIZED = "authorized"
    CANCELED = "canceled"
    SHIPPING = "shipping"
    COMPLETED = "completed"
    EXPIRED = "expired"
    PENDING = "pending"


class OrderLine(Model):
    """A line of an order; also used for the lines of shipments and refunds."""

    resource_name = "orderline"

    order_id: str | None = None
    type: str | None = None
    name: str | None = None
    status: str | None = None
    is_cancelable: bool | None = None
    quantity: int | None = None
    quantity_shipped: int | None = None
    quantity_refunded: int | None = None
    quantity_canceled: int | None = None
    shippable_quantity: int | None = None
    refundable_quantity: int | None = None
    cancelable_quantity: int | None = None
    unit_price: Amount | None = None
    discount_amount: Amount | None = None
    total_amount: Amount | None = None
    vat_rate: str | None = None
    vat_amount: Amount | None = None
    sku: str | None = None
    metadata: Any = None
    created_at: str | None = None


class OrderEmbedded(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")

    payments: tuple["Payment", ...] | None = None
    refunds: tuple["Refund", ...] | None = None
    shipments: tuple["Shipment", ...] | None = None


class Order(Model):
    """An order, e.g. ord_pbjz8x."""

    resource_name = "order"

    status: str | None = None
    amount: Amount | None = None
    amount_captured: Amount | None = None
    amount_refunded: Amount | None = None
    order_number: str | None = None
    method: str | None = None
    locale: str | None = None
    metadata: Any = None
    profile_id: str | None = None
    is_cancelable: bool | None = None
    billing_address: dict[str, Any] | None = None
    shipping_address: dict[str, Any] | None = None
    consumer_date_of_birth: str | None = None
    redirect_url: str | None = None
    webhook_url: str | None = None
    created_at: str | None = None
    expires_at: str | None = None
    expired_at: str | None = None
    paid_at: str | None = None
    authorized_at: str | None = None
    canceled_at: str | None = None
    completed_at: str | None = None
    lines: tuple[OrderLine, ...] = ()
    embedded: OrderEmbedded | None = Field(default=None, alias="_embedded")

    def is_created(self) -> bool:
        return self.status == OrderStatus.CREATED

    def is_paid(self) -> bool:
        return self.status == OrderStatus.PAID

    def is_authorized(self) -> bool:
        return self.status == OrderStatus.AUTHORIZED

    def is_canceled(self) -> bool:
        return self.status == OrderStatus.CANCELED

    def is_shipping(self) -> bool:
        return self.status == OrderStatus.SHIPPING

    def is_completed(self) -> bool:
        return self.status == OrderStatus.COMPLETED

    def is_expired(self) -> bool:
        return self.status == OrderStatus.EXPIRED

    def is_pending(self) -> bool:
        return self.status == OrderStatus.PENDING

    def get_checkout_url(self) -> str | None:
        return self.get_link("checkout")
