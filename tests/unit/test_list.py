"""Unit tests for paginated lists."""

import pytest

from mollie_client.models import List, NoSuchPageError, Payment
from tests.factories import API, make_list, make_payment

NEXT_URL = f"{API}/payments?from=tr_third&limit=2"
PREVIOUS_URL = f"{API}/payments?from=tr_zeroth&limit=2"


@pytest.fixture
def first_page():
    return make_list(
        "payments",
        [make_payment("tr_first"), make_payment("tr_second")],
        "payments?limit=2",
        next_href=NEXT_URL,
    )


@pytest.fixture
def last_page():
    return make_list(
        "payments",
        [make_payment("tr_third")],
        "payments?from=tr_third&limit=2",
        previous_href=f"{API}/payments?from=tr_first&limit=2",
    )


class TestListSequence:
    """Test suite for the sequence behaviour of a page."""

    def test_sequence_protocol(self):
        page = List(["a", "b", "c"], count=3)

        assert len(page) == 3
        assert page[1] == "b"
        assert page[-1] == "c"
        assert page[:2] == ("a", "b")
        assert list(page) == ["a", "b", "c"]
        assert "b" in page

    def test_cursors_are_read_from_links(self, transforming_client, first_page):
        page = transforming_client.transform_list(first_page, "payments")

        assert page.next_page_cursor == "tr_third"
        assert page.previous_page_cursor is None
        assert page.has_next_page()
        assert not page.has_previous_page()

    def test_list_without_loader_cannot_navigate(self, transforming_client, first_page):
        page = transforming_client.transform_list(first_page, "payments")

        with pytest.raises(NoSuchPageError, match="cannot load the next page"):
            page.next_page()


class TestListNavigation:
    """Test suite for next_page/previous_page on binder-produced lists."""

    @pytest.mark.asyncio
    async def test_count_matches_items(self, mollie, network_client, first_page):
        network_client.list.return_value = first_page

        page = await mollie.payments.list(limit=2)

        assert isinstance(page, List)
        assert len(page) == page.count == 2
        assert all(isinstance(payment, Payment) for payment in page)
        network_client.list.assert_awaited_once_with("payments", {"limit": 2})

    @pytest.mark.asyncio
    async def test_next_page_requests_next_link_verbatim(
        self, mollie, network_client, first_page, last_page
    ):
        network_client.list.return_value = first_page
        network_client.list_url.return_value = last_page

        page = await mollie.payments.list(limit=2)
        next_page = await page.next_page()

        network_client.list_url.assert_awaited_once_with(NEXT_URL)
        assert [payment.id for payment in next_page] == ["tr_third"]
        assert next_page.has_previous_page()
        assert not next_page.has_next_page()

    @pytest.mark.asyncio
    async def test_previous_page_requests_previous_link(self, mollie, network_client):
        network_client.list.return_value = make_list(
            "payments",
            [make_payment("tr_first")],
            "payments?from=tr_first",
            previous_href=PREVIOUS_URL,
        )
        network_client.list_url.return_value = make_list("payments", [], "payments")

        page = await mollie.payments.list(from_="tr_first")
        await page.previous_page()

        network_client.list_url.assert_awaited_once_with(PREVIOUS_URL)

    @pytest.mark.asyncio
    async def test_next_page_without_link_fails_without_request(
        self, mollie, network_client, last_page
    ):
        network_client.list.return_value = last_page

        page = await mollie.payments.list()

        with pytest.raises(NoSuchPageError, match="There is no next page"):
            page.next_page()
        network_client.list_url.assert_not_called()

    @pytest.mark.asyncio
    async def test_previous_page_without_link_fails_without_request(
        self, mollie, network_client, first_page
    ):
        network_client.list.return_value = first_page

        page = await mollie.payments.list()

        with pytest.raises(NoSuchPageError, match="There is no previous page"):
            page.previous_page()
        network_client.list_url.assert_not_called()

    @pytest.mark.asyncio
    async def test_pages_loaded_through_links_keep_navigating(self, mollie, network_client, first_page):
        middle = make_list(
            "payments",
            [make_payment("tr_third")],
            "payments?from=tr_third",
            next_href=f"{API}/payments?from=tr_fourth&limit=2",
        )
        network_client.list.return_value = first_page
        network_client.list_url.side_effect = [middle, make_list("payments", [make_payment("tr_fourth")], "payments")]

        page = await mollie.payments.list()
        page = await page.next_page()
        page = await page.next_page()

        assert [payment.id for payment in page] == ["tr_fourth"]
        assert network_client.list_url.await_count == 2

    @pytest.mark.asyncio
    async def test_iterate_walks_every_page(self, mollie, network_client, first_page, last_page):
        network_client.list.return_value = first_page
        network_client.list_url.return_value = last_page

        page = await mollie.payments.list(limit=2)
        ids = [payment.id async for payment in page.iterate()]

        assert ids == ["tr_first", "tr_second", "tr_third"]

    @pytest.mark.asyncio
    async def test_nested_list_navigates_with_parent_path(self, mollie, network_client):
        next_url = f"{API}/orders/ord_pbjz8x/shipments?from=shp_second"
        network_client.list.return_value = make_list(
            "shipments", [], "orders/ord_pbjz8x/shipments", next_href=next_url
        )
        network_client.list_url.return_value = make_list("shipments", [], "orders/ord_pbjz8x/shipments")

        page = await mollie.order_shipments.list(order_id="ord_pbjz8x")
        await page.next_page()

        network_client.list_url.assert_awaited_once_with(next_url)
