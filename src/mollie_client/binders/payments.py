"""Payments API binder."""

from collections.abc import Awaitable, Sequence
from typing import Any

from mollie_client.binders.base import Binder, operation
from mollie_client.models.list import List
from mollie_client.models.payment import Payment
from mollie_client.validation import require_id

PATH = "payments"


class PaymentsBinder(Binder[Payment]):
    """
    Create, fetch, list, update and cancel payments.

    Reference: https://docs.mollie.com/reference/v2/payments-api/create-payment
    """

    @operation
    def create(
        self,
        *,
        include: str | Sequence[str] | None = None,
        idempotency_key: str | None = None,
        **parameters: Any,
    ) -> Awaitable[Payment]:
        """
        Create a payment.

        Args:
            include: Extra data to include, e.g. "details.qrCode" (sent as query)
            idempotency_key: Explicit Idempotency-Key header value
            **parameters: Payment fields, e.g. amount, description, redirect_url

        Returns:
            Awaitable resolving to the created Payment
        """
        query = {"include": include} if include is not None else None
        return self.network_client.post(
            PATH, parameters, query, idempotency_key=idempotency_key
        )

    @operation
    def get(self, id: str, **parameters: Any) -> Awaitable[Payment]:
        """
        Fetch a single payment.

        Args:
            id: Payment id (tr_...)
            **parameters: Query parameters such as include, embed, testmode

        Raises:
            LocalValidationError: If the payment id is malformed
        """
        require_id(id, "payment")
        return self.network_client.get(f"{PATH}/{id}", parameters)

    @operation
    def list(self, **parameters: Any) -> Awaitable[List[Payment]]:
        """
        List payments, newest first.

        Args:
            **parameters: from_ (cursor id), limit, profile_id, testmode
        """
        return self._paginated(PATH, "payments", parameters)

    @operation
    def update(self, id: str, **parameters: Any) -> Awaitable[Payment]:
        require_id(id, "payment")
        return self.network_client.patch(f"{PATH}/{id}", parameters)

    @operation
    def cancel(self, id: str, **parameters: Any) -> Awaitable[Payment]:
        """
        Cancel a payment. Only payments with is_cancelable set can be canceled.

        Raises:
            LocalValidationError: If the payment id is malformed
        """
        require_id(id, "payment")
        return self.network_client.delete(f"{PATH}/{id}", parameters or None)

    delete = cancel
    all = list
    page = list
