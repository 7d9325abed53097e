"""Completion-handler delivery for the callback entry point of operations."""

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any

Callback = Callable[[BaseException | None, Any], None]


def deliver(
    awaitable: Awaitable[Any],
    callback: Callback,
    pending: set[asyncio.Future[Any]],
) -> None:
    """
    Schedule awaitable on the running event loop and report its outcome.

    callback is invoked exactly once, as callback(None, result) on success or
    callback(error, None) on failure. The scheduled task is kept in pending
    until it completes so it is not garbage collected mid-flight.

    Must be called from within a running event loop.
    """
    task = asyncio.ensure_future(awaitable)
    pending.add(task)

    def _complete(finished: asyncio.Future[Any]) -> None:
        pending.discard(finished)
        if finished.cancelled():
            callback(asyncio.CancelledError(), None)
            return
        error = finished.exception()
        if error is not None:
            callback(error, None)
        else:
            callback(None, finished.result())

    task.add_done_callback(_complete)
