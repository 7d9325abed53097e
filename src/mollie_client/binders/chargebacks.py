"""Chargebacks across all payments."""

from collections.abc import Awaitable
from typing import Any

from mollie_client.binders.base import Binder, operation
from mollie_client.models.chargeback import Chargeback
from mollie_client.models.list import List


class ChargebacksBinder(Binder[Chargeback]):
    @operation
    def list(self, **parameters: Any) -> Awaitable[List[Chargeback]]:
        """
        List all chargebacks of the organization or profile.

        Args:
            **parameters: from_, limit, embed, profile_id, testmode
        """
        return self._paginated("chargebacks", "chargebacks", parameters)

    all = list
    page = list
