"""Shipment resource."""

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

from mollie_client.models.base import Model
from mollie_client.models.order import OrderLine

if TYPE_CHECKING:
    from mollie_client.models.order import Order


class ShipmentTracking(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")

    carrier: str
    code: str
    url: str | None = None


class Shipment(Model):
    """A shipment of (part of) an order, e.g. shp_3wmsgCJN4U."""

    resource_name = "shipment"

    order_id: str | None = None
    created_at: str | None = None
    tracking: ShipmentTracking | None = None
    lines: tuple[OrderLine, ...] = ()

    def has_tracking(self) -> bool:
        return self.tracking is not None

    def has_tracking_url(self) -> bool:
        return self.tracking is not None and self.tracking.url is not None

    def get_tracking_url(self) -> str | None:
        if self.tracking is None:
            return None
        return self.tracking.url

    async def get_order(self) -> "Order":
        return await self._follow("order")
