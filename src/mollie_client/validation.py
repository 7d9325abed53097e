"""Identifier checks performed before any request is issued."""

import re

from mollie_client.models.exceptions import LocalValidationError

ID_PREFIXES: dict[str, str] = {
    "capture": "cpt_",
    "chargeback": "chb_",
    "customer": "cst_",
    "mandate": "mdt_",
    "order": "ord_",
    "orderline": "odl_",
    "organization": "org_",
    "payment": "tr_",
    "profile": "pfl_",
    "refund": "re_",
    "shipment": "shp_",
    "subscription": "sub_",
}

_ID_PATTERNS = {
    resource: re.compile(rf"{re.escape(prefix)}[A-Za-z0-9]+")
    for resource, prefix in ID_PREFIXES.items()
}


def check_id(value: object, resource: str) -> bool:
    """Return True if value is a well-formed id for the given resource type."""
    if not isinstance(value, str):
        return False
    return _ID_PATTERNS[resource].fullmatch(value) is not None


def require_id(value: object, resource: str) -> str:
    """
    Return value unchanged if it is a valid id, raise otherwise.

    Raises:
        LocalValidationError: If the id is missing or has the wrong shape
    """
    if not check_id(value, resource):
        raise LocalValidationError(f"The {resource} id is invalid")
    return value  # type: ignore[return-value]
