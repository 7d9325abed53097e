"""Unit tests for the awaitable and callback entry points of operations."""

import asyncio
import inspect

import pytest

from mollie_client.models import ApiRequestError, LocalValidationError, Payment
from tests.factories import make_list, make_payment


def collecting_callback():
    """Return (callback, future) where the future resolves to (error, result)."""
    done = asyncio.get_running_loop().create_future()

    def callback(error, result):
        done.set_result((error, result))

    return callback, done


class TestAwaitableEntryPoint:
    """Test suite for operations called without a callback."""

    @pytest.mark.asyncio
    async def test_returns_awaitable(self, mollie, network_client):
        network_client.get.return_value = make_payment()

        pending = mollie.payments.get("tr_WDqYK6vllg")

        assert inspect.isawaitable(pending)
        payment = await pending
        assert isinstance(payment, Payment)

    @pytest.mark.asyncio
    async def test_api_error_raised_on_await(self, mollie, network_client):
        network_client.get.side_effect = ApiRequestError(
            "No payment exists with token tr_WDqYK6vllg.", status_code=404, title="Not Found"
        )

        with pytest.raises(ApiRequestError) as exc_info:
            await mollie.payments.get("tr_WDqYK6vllg")

        assert exc_info.value.status_code == 404

    def test_local_error_raised_at_call_time(self, mollie, network_client):
        with pytest.raises(LocalValidationError):
            mollie.payments.get("ord_pbjz8x")

        network_client.get.assert_not_called()

    def test_operation_keeps_name_and_docstring(self, mollie):
        assert mollie.payments.get.__name__ == "get"
        assert "Fetch a single payment" in mollie.payments.get.__doc__


class TestCallbackEntryPoint:
    """Test suite for operations called through with_callback."""

    @pytest.mark.asyncio
    async def test_callback_receives_result(self, mollie, network_client):
        network_client.get.return_value = make_payment()
        callback, done = collecting_callback()

        returned = mollie.payments.get.with_callback("tr_WDqYK6vllg", callback=callback)
        error, payment = await done

        assert returned is None
        assert error is None
        assert isinstance(payment, Payment)
        assert payment.id == "tr_WDqYK6vllg"

    @pytest.mark.asyncio
    async def test_callback_receives_api_error(self, mollie, network_client):
        failure = ApiRequestError("Unauthorized request", status_code=401, title="Unauthorized")
        network_client.get.side_effect = failure
        callback, done = collecting_callback()

        mollie.payments.get.with_callback("tr_WDqYK6vllg", callback=callback)
        error, result = await done

        assert error is failure
        assert result is None

    @pytest.mark.asyncio
    async def test_callback_receives_local_error_immediately(self, mollie, network_client):
        outcomes = []

        mollie.order_shipments.get.with_callback(
            "invalid_id", order_id="ord_abc", callback=lambda error, result: outcomes.append((error, result))
        )

        assert len(outcomes) == 1
        error, result = outcomes[0]
        assert isinstance(error, LocalValidationError)
        assert result is None
        network_client.get.assert_not_called()

    @pytest.mark.asyncio
    async def test_callback_with_list_operation(self, mollie, network_client):
        network_client.list.return_value = make_list("payments", [make_payment()], "payments")
        callback, done = collecting_callback()

        mollie.payments.list.with_callback(limit=1, callback=callback)
        error, page = await done

        assert error is None
        assert len(page) == 1
        network_client.list.assert_awaited_once_with("payments", {"limit": 1})

    @pytest.mark.asyncio
    async def test_callback_called_once_and_task_released(self, mollie, network_client):
        network_client.post.return_value = make_payment()
        calls = []
        done = asyncio.Event()

        def callback(error, result):
            calls.append((error, result))
            done.set()

        mollie.payments.create.with_callback(
            amount={"value": "10.00", "currency": "EUR"}, callback=callback
        )
        assert len(mollie.payments._pending) == 1
        await done.wait()
        await asyncio.sleep(0)

        assert len(calls) == 1
        assert not mollie.payments._pending
