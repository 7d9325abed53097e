"""HTTP transport for the Mollie REST API."""

import platform
import uuid
from typing import Any

import httpx

from mollie_client import __version__
from mollie_client.logging_config import get_logger
from mollie_client.models.exceptions import ApiRequestError
from mollie_client.payload import build_query, to_wire

logger = get_logger(__name__)


class NetworkClient:
    """
    Client issuing authenticated JSON requests against the Mollie API.

    Paths are relative to the configured endpoint ("payments/tr_..."); the
    *_url methods take absolute URLs as returned by the API in _links and
    request them verbatim.

    Every method returns decoded JSON or raises ApiRequestError. There are no
    retries: a single attempt, a single failure surfaced.
    """

    def __init__(
        self,
        api_endpoint: str,
        bearer_token: str,
        timeout_seconds: float = 30.0,
        version_strings: list[str] | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        """
        Initialize the network client.

        Args:
            api_endpoint: Base URL of the API (e.g., "https://api.mollie.com/v2/")
            bearer_token: API key or OAuth access token for the Authorization header
            timeout_seconds: Request timeout in seconds (default: 30.0)
            version_strings: Extra User-Agent product tokens (e.g., ["Shop/1.2"])
            http_client: Pre-configured httpx client (for testing)
        """
        self.api_endpoint = api_endpoint.rstrip("/") + "/"
        self.timeout_seconds = timeout_seconds
        self.user_agent = " ".join(
            [
                f"Python/{platform.python_version()}",
                f"Httpx/{httpx.__version__}",
                f"MollieClient/{__version__}",
                *(version_strings or []),
            ]
        )
        self.http_client = http_client or httpx.AsyncClient(
            base_url=self.api_endpoint,
            timeout=timeout_seconds,
            headers={
                "Authorization": f"Bearer {bearer_token}",
                "Accept": "application/hal+json",
                "User-Agent": self.user_agent,
            },
        )

        logger.debug(
            "mollie_network_client_initialized",
            api_endpoint=self.api_endpoint,
            timeout_seconds=timeout_seconds,
        )

    async def close(self) -> None:
        """Close the HTTP client connection pool."""
        await self.http_client.aclose()

    async def get(self, path: str, query: dict[str, Any] | None = None) -> dict[str, Any]:
        return await self._request("GET", path, query=query)

    async def list(self, path: str, query: dict[str, Any] | None = None) -> dict[str, Any]:
        """
        Fetch one page of a collection.

        Returns the raw list response:
        {"_embedded": {"<resource>": [...]}, "count": n, "_links": {...}}
        """
        return await self._request("GET", path, query=query)

    async def post(
        self,
        path: str,
        data: dict[str, Any] | None = None,
        query: dict[str, Any] | None = None,
        idempotency_key: str | None = None,
    ) -> dict[str, Any]:
        """
        Create a resource.

        Every POST carries an Idempotency-Key header so a request replayed by
        the caller is not executed twice by the API. A key is generated when
        none is given.
        """
        return await self._request(
            "POST",
            path,
            data=data,
            query=query,
            headers={"Idempotency-Key": idempotency_key or str(uuid.uuid4())},
        )

    async def patch(self, path: str, data: dict[str, Any] | None = None) -> dict[str, Any]:
        return await self._request("PATCH", path, data=data)

    async def delete(
        self, path: str, data: dict[str, Any] | None = None
    ) -> dict[str, Any] | bool:
        """
        Delete or cancel a resource.

        Returns True when the API answers 204 No Content, otherwise the
        decoded body (e.g. a canceled payment).
        """
        result = await self._request("DELETE", path, data=data)
        if result is None:
            return True
        return result

    async def get_url(self, url: str) -> dict[str, Any]:
        """GET an absolute URL taken from a _links entry, verbatim."""
        return await self._request("GET", url)

    async def list_url(self, url: str) -> dict[str, Any]:
        """GET a pagination URL taken from a list's _links, verbatim."""
        return await self._request("GET", url)

    async def _request(
        self,
        method: str,
        url: str,
        *,
        data: dict[str, Any] | None = None,
        query: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        request_id = str(uuid.uuid4())
        request_headers = {"X-Request-ID": request_id, **(headers or {})}
        params = build_query(query)

        logger.debug(
            "mollie_api_request",
            method=method,
            url=url,
            request_id=request_id,
        )

        try:
            response = await self.http_client.request(
                method,
                url,
                params=params or None,
                json=to_wire(data) if data is not None else None,
                headers=request_headers,
            )
        except httpx.TimeoutException as e:
            raise ApiRequestError(f"Mollie API request timed out: {method} {url}") from e
        except httpx.RequestError as e:
            # Network errors, connection errors, etc.
            raise ApiRequestError(f"Mollie API request failed: {e}") from e

        logger.debug(
            "mollie_api_response",
            method=method,
            url=url,
            request_id=request_id,
            status_code=response.status_code,
        )

        if response.status_code == 204:
            return None

        try:
            payload = response.json()
        except ValueError:
            payload = None

        if response.status_code >= 400:
            raise ApiRequestError.from_response(response.status_code, payload)

        if not isinstance(payload, dict):
            raise ApiRequestError(
                "Received an unexpected response body from the Mollie API",
                status_code=response.status_code,
            )

        return payload

    async def __aenter__(self) -> "NetworkClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()
