"""Organization resource."""

from typing import Any

from mollie_client.models.base import Model


class Organization(Model):
    resource_name = "organization"

    name: str | None = None
    email: str | None = None
    locale: str | None = None
    address: dict[str, Any] | None = None
    registration_number: str | None = None
    vat_number: str | None = None
    vat_regulation: str | None = None
