"""Conversion of Python keyword arguments into Mollie wire payloads."""

import re
from typing import Any

_SNAKE_SEGMENT = re.compile(r"_([a-z0-9])")

# Keys whose values are caller-defined and must reach the API untouched
OPAQUE_KEYS = frozenset({"metadata"})


def camelize(key: str) -> str:
    """
    Convert a snake_case keyword into the camelCase key the API expects.

    Keys that are already camelCase pass through unchanged. A trailing
    underscore is dropped so reserved words can be used as keywords
    (from_ -> from).
    """
    key = key.rstrip("_")
    return _SNAKE_SEGMENT.sub(lambda match: match.group(1).upper(), key)


def to_wire(value: Any) -> Any:
    """Recursively camelCase the keys of a request body."""
    if isinstance(value, dict):
        return {
            camelize(key): (item if key in OPAQUE_KEYS else to_wire(item))
            for key, item in value.items()
        }
    if isinstance(value, (list, tuple)):
        return [to_wire(item) for item in value]
    return value


def build_query(parameters: dict[str, Any] | None) -> dict[str, str]:
    """
    Flatten query parameters into strings.

    None values are dropped, lists are comma-joined (e.g. include=details.qrCode,
    details.remainderDetails) and booleans are lowercased.
    """
    if not parameters:
        return {}

    query: dict[str, str] = {}
    for key, value in parameters.items():
        if value is None:
            continue
        if isinstance(value, bool):
            query[camelize(key)] = "true" if value else "false"
        elif isinstance(value, (list, tuple)):
            query[camelize(key)] = ",".join(str(item) for item in value)
        else:
            query[camelize(key)] = str(value)
    return query
