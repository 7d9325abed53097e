"""Customers API binder."""

from collections.abc import Awaitable
from typing import Any

from mollie_client.binders.base import Binder, operation
from mollie_client.models.customer import Customer
from mollie_client.models.list import List
from mollie_client.validation import require_id

PATH = "customers"


class CustomersBinder(Binder[Customer]):
    """Create, fetch, list, update and delete customers."""

    @operation
    def create(self, *, idempotency_key: str | None = None, **parameters: Any) -> Awaitable[Customer]:
        return self.network_client.post(PATH, parameters, idempotency_key=idempotency_key)

    @operation
    def get(self, id: str, **parameters: Any) -> Awaitable[Customer]:
        require_id(id, "customer")
        return self.network_client.get(f"{PATH}/{id}", parameters)

    @operation
    def list(self, **parameters: Any) -> Awaitable[List[Customer]]:
        return self._paginated(PATH, "customers", parameters)

    @operation
    def update(self, id: str, **parameters: Any) -> Awaitable[Customer]:
        require_id(id, "customer")
        return self.network_client.patch(f"{PATH}/{id}", parameters)

    @operation
    def delete(self, id: str, **parameters: Any) -> Awaitable[bool]:
        """
        Delete a customer. Its subscriptions are canceled.

        Returns:
            Awaitable resolving to True (the API answers 204 No Content)
        """
        require_id(id, "customer")
        return self.network_client.delete(f"{PATH}/{id}", parameters or None)

    all = list
    page = list
