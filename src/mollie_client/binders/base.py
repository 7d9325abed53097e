"""
Base classes for resource binders.

A binder is the public façade for one resource type. Each operation
validates its identifiers synchronously (so a malformed id raises
LocalValidationError at call time, before any coroutine exists), shapes the
query and body, and returns an awaitable from the TransformingNetworkClient.

Operations are declared with @operation, which gives every operation two
explicit entry points:

    payment = await client.payments.get("tr_WDqYK6vllg")
    client.payments.get.with_callback("tr_WDqYK6vllg", callback=on_done)
"""

import asyncio
import functools
from collections.abc import Awaitable, Callable
from typing import Any, Generic, TypeVar

from mollie_client.callbacks import Callback, deliver
from mollie_client.clients.transforming_client import TransformingNetworkClient
from mollie_client.models.base import Model
from mollie_client.models.exceptions import LocalValidationError
from mollie_client.models.list import List
from mollie_client.validation import require_id

M = TypeVar("M", bound=Model)


class BoundOperation:
    """An operation bound to a binder instance."""

    def __init__(self, func: Callable[..., Awaitable[Any]], binder: "Binder[Any]") -> None:
        self._func = func
        self._binder = binder
        functools.update_wrapper(self, func)

    def __call__(self, *args: Any, **kwargs: Any) -> Awaitable[Any]:
        return self._func(self._binder, *args, **kwargs)

    def with_callback(self, *args: Any, callback: Callback, **kwargs: Any) -> None:
        """
        Run the operation and hand the outcome to callback(error, result).

        Returns None. Local validation errors reach the callback immediately;
        everything else is delivered when the request completes. Must be
        called from within a running event loop.
        """
        try:
            awaitable = self(*args, **kwargs)
        except LocalValidationError as e:
            callback(e, None)
            return None
        deliver(awaitable, callback, self._binder._pending)
        return None


class operation:
    """Descriptor declaring a binder method as a dual-entry operation."""

    def __init__(self, func: Callable[..., Awaitable[Any]]) -> None:
        self._func = func
        functools.update_wrapper(self, func)

    def __get__(self, binder: "Binder[Any] | None", owner: type | None = None) -> Any:
        if binder is None:
            return self
        return BoundOperation(self._func, binder)


class Binder(Generic[M]):
    """Base for top-level resource binders."""

    def __init__(self, network_client: TransformingNetworkClient) -> None:
        self.network_client = network_client
        self._pending: set[asyncio.Future[Any]] = set()

    def _paginated(
        self, path: str, embedded_key: str, query: dict[str, Any] | None = None
    ) -> Awaitable[List[M]]:
        """Fetch a page and make next_page()/previous_page() load through this binder."""
        return self._load_page(
            self.network_client.list(path, embedded_key, query), embedded_key
        )

    async def _load_page(self, request: Awaitable[List[M]], embedded_key: str) -> List[M]:
        page = await request
        return page.with_page_loader(functools.partial(self._load_cursor, embedded_key))

    def _load_cursor(self, embedded_key: str, url: str) -> Awaitable[List[M]]:
        return self._load_page(self.network_client.list_url(url, embedded_key), embedded_key)


class InnerBinder(Binder[M]):
    """
    Base for binders of nested resources (shipments of an order, refunds of a
    payment, ...). The parent id is an explicit keyword argument of every
    operation; a missing or malformed parent id fails before any request.
    """

    @staticmethod
    def _parent_id(parameters: dict[str, Any], key: str, resource: str) -> str:
        """Pop the parent id out of parameters and validate it."""
        return require_id(parameters.pop(key, None), resource)
