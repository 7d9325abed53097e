"""Custom exceptions for the Mollie API client."""

from typing import Any


class MollieError(Exception):
    """Base exception for all client errors."""

    pass


class LocalValidationError(MollieError):
    """
    Raised when a call is rejected before any network I/O.

    Examples:
    - Resource id with the wrong prefix (e.g. "ord_..." passed as a payment id)
    - Missing parent id for a nested resource
    - Missing or malformed credentials
    - Following a link the resource does not carry
    """

    pass


class NoSuchPageError(LocalValidationError):
    """
    Raised when next_page()/previous_page() is called on a List whose
    corresponding pagination link is absent.
    """

    pass


class ApiRequestError(MollieError):
    """
    Raised when the Mollie API returns a non-2xx response or the request
    could not be completed at all.

    For transport failures (timeouts, connection errors) status_code is None
    and the original httpx exception is chained as __cause__.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        title: str | None = None,
        field: str | None = None,
        links: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.detail = message
        self.status_code = status_code
        self.title = title
        self.field = field
        self.links = links or {}

    @classmethod
    def from_response(cls, status_code: int, payload: Any) -> "ApiRequestError":
        """
        Build an error from an error response body.

        Mollie error bodies look like
        {"status": 422, "title": "Unprocessable Entity", "detail": "...",
         "field": "amount", "_links": {"documentation": {...}}}.
        """
        if not isinstance(payload, dict):
            return cls(
                f"Mollie API returned status {status_code}",
                status_code=status_code,
            )

        return cls(
            payload.get("detail") or f"Mollie API returned status {status_code}",
            status_code=payload.get("status", status_code),
            title=payload.get("title"),
            field=payload.get("field"),
            links=payload.get("_links"),
        )

    def _link_href(self, name: str) -> str | None:
        link = self.links.get(name)
        if isinstance(link, dict):
            return link.get("href")
        return None

    @property
    def documentation_url(self) -> str | None:
        return self._link_href("documentation")

    @property
    def dashboard_url(self) -> str | None:
        return self._link_href("dashboard")

    def __str__(self) -> str:
        if self.status_code is None:
            return self.detail
        return f"{self.status_code} {self.title or 'Error'}: {self.detail}"
