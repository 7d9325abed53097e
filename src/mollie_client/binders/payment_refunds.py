"""Refunds of a payment."""

from collections.abc import Awaitable
from typing import Any

from mollie_client.binders.base import InnerBinder, operation
from mollie_client.models.list import List
from mollie_client.models.refund import Refund
from mollie_client.validation import require_id


def get_path_segments(payment_id: str) -> str:
    return f"payments/{payment_id}/refunds"


class PaymentRefundsBinder(InnerBinder[Refund]):
    """
    Create, fetch, list and cancel the refunds of a payment.

    Every operation requires payment_id.
    """

    @operation
    def create(self, *, idempotency_key: str | None = None, **parameters: Any) -> Awaitable[Refund]:
        """
        Refund (part of) a payment.

        Args:
            idempotency_key: Explicit Idempotency-Key header value
            **parameters: payment_id plus refund fields (amount, description, metadata)
        """
        payment_id = self._parent_id(parameters, "payment_id", "payment")
        return self.network_client.post(
            get_path_segments(payment_id), parameters, idempotency_key=idempotency_key
        )

    @operation
    def get(self, id: str, **parameters: Any) -> Awaitable[Refund]:
        require_id(id, "refund")
        payment_id = self._parent_id(parameters, "payment_id", "payment")
        return self.network_client.get(f"{get_path_segments(payment_id)}/{id}", parameters)

    @operation
    def cancel(self, id: str, **parameters: Any) -> Awaitable[bool]:
        """
        Cancel a refund that is still queued or pending.

        Returns:
            Awaitable resolving to True (the API answers 204 No Content)
        """
        require_id(id, "refund")
        payment_id = self._parent_id(parameters, "payment_id", "payment")
        return self.network_client.delete(f"{get_path_segments(payment_id)}/{id}", parameters or None)

    @operation
    def list(self, **parameters: Any) -> Awaitable[List[Refund]]:
        payment_id = self._parent_id(parameters, "payment_id", "payment")
        return self._paginated(get_path_segments(payment_id), "refunds", parameters)

    all = list
    page = list
