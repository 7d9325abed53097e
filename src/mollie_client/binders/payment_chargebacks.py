"""Chargebacks of a payment."""

from collections.abc import Awaitable
from typing import Any

from mollie_client.binders.base import InnerBinder, operation
from mollie_client.models.chargeback import Chargeback
from mollie_client.models.list import List
from mollie_client.validation import require_id


def get_path_segments(payment_id: str) -> str:
    return f"payments/{payment_id}/chargebacks"


class PaymentChargebacksBinder(InnerBinder[Chargeback]):
    """Fetch and list the chargebacks of a payment. Every operation requires payment_id."""

    @operation
    def get(self, id: str, **parameters: Any) -> Awaitable[Chargeback]:
        """
        Fetch a single chargeback.

        Args:
            id: Chargeback id (chb_...)
            **parameters: payment_id, plus query parameters such as embed="payment"
        """
        require_id(id, "chargeback")
        payment_id = self._parent_id(parameters, "payment_id", "payment")
        return self.network_client.get(f"{get_path_segments(payment_id)}/{id}", parameters)

    @operation
    def list(self, **parameters: Any) -> Awaitable[List[Chargeback]]:
        payment_id = self._parent_id(parameters, "payment_id", "payment")
        return self._paginated(get_path_segments(payment_id), "chargebacks", parameters)

    all = list
    page = list
