"""Organizations API binder."""

from collections.abc import Awaitable

from mollie_client.binders.base import Binder, operation
from mollie_client.models.organization import Organization
from mollie_client.validation import require_id

PATH = "organizations"


class OrganizationsBinder(Binder[Organization]):
    """Fetch organizations. Requires an OAuth access token."""

    @operation
    def get(self, id: str) -> Awaitable[Organization]:
        require_id(id, "organization")
        return self.network_client.get(f"{PATH}/{id}")

    @operation
    def get_current(self) -> Awaitable[Organization]:
        """Fetch the organization the access token belongs to."""
        return self.network_client.get(f"{PATH}/me")
