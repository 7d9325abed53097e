"""Captures of a payment."""

from collections.abc import Awaitable
from typing import Any

from mollie_client.binders.base import InnerBinder, operation
from mollie_client.models.capture import Capture
from mollie_client.models.list import List
from mollie_client.validation import require_id


def get_path_segments(payment_id: str) -> str:
    return f"payments/{payment_id}/captures"


class PaymentCapturesBinder(InnerBinder[Capture]):
    """Fetch and list the captures of a payment. Every operation requires payment_id."""

    @operation
    def get(self, id: str, **parameters: Any) -> Awaitable[Capture]:
        require_id(id, "capture")
        payment_id = self._parent_id(parameters, "payment_id", "payment")
        return self.network_client.get(f"{get_path_segments(payment_id)}/{id}", parameters)

    @operation
    def list(self, **parameters: Any) -> Awaitable[List[Capture]]:
        payment_id = self._parent_id(parameters, "payment_id", "payment")
        return self._paginated(get_path_segments(payment_id), "captures", parameters)

    all = list
    page = list
