"""Paginated collection of transformed resources."""

from collections.abc import AsyncIterator, Awaitable, Callable, Iterator, Sequence
from typing import Any, Generic, TypeVar, overload
from urllib.parse import parse_qs, urlsplit

from mollie_client.models.base import Link
from mollie_client.models.exceptions import NoSuchPageError

T = TypeVar("T")

PageLoader = Callable[[str], Awaitable["List[Any]"]]


class List(Sequence[T], Generic[T]):
    """
    One page of a collection returned by a list operation.

    Behaves as an immutable sequence of models. Pagination cursors are the
    opaque URLs the API returned in _links; next_page() and previous_page()
    request them verbatim through the binder that produced this page.
    """

    def __init__(
        self,
        items: Sequence[T],
        count: int,
        links: dict[str, Link | None] | None = None,
        page_loader: PageLoader | None = None,
    ) -> None:
        self._items = tuple(items)
        self.count = count
        self.links = dict(links or {})
        self._page_loader = page_loader

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[T, ...]: ...

    def __getitem__(self, index):
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"List(count={self.count}, items={list(self._items)!r})"

    def with_page_loader(self, page_loader: PageLoader) -> "List[T]":
        """Return a copy of this page whose navigation goes through page_loader."""
        return List(self._items, self.count, self.links, page_loader)

    def _link_href(self, name: str) -> str | None:
        link = self.links.get(name)
        if link is None:
            return None
        return link.href

    def _cursor(self, name: str) -> str | None:
        href = self._link_href(name)
        if href is None:
            return None
        values = parse_qs(urlsplit(href).query).get("from")
        return values[0] if values else None

    @property
    def next_page_cursor(self) -> str | None:
        """The `from` parameter of the next page link, if any."""
        return self._cursor("next")

    @property
    def previous_page_cursor(self) -> str | None:
        """The `from` parameter of the previous page link, if any."""
        return self._cursor("previous")

    def has_next_page(self) -> bool:
        return self._link_href("next") is not None

    def has_previous_page(self) -> bool:
        return self._link_href("previous") is not None

    def next_page(self) -> Awaitable["List[T]"]:
        """
        Fetch the next page.

        Raises:
            NoSuchPageError: Immediately, without a request, if there is no next link
        """
        return self._load("next")

    def previous_page(self) -> Awaitable["List[T]"]:
        """
        Fetch the previous page.

        Raises:
            NoSuchPageError: Immediately, without a request, if there is no previous link
        """
        return self._load("previous")

    def _load(self, name: str) -> Awaitable["List[T]"]:
        href = self._link_href(name)
        if href is None:
            raise NoSuchPageError(f"There is no {name} page")
        if self._page_loader is None:
            raise NoSuchPageError(f"This list cannot load the {name} page")
        return self._page_loader(href)

    async def iterate(self) -> AsyncIterator[T]:
        """Yield every item of this page and of all following pages."""
        page: List[T] = self
        while True:
            for item in page:
                yield item
            if not page.has_next_page():
                return
            page = await page.next_page()
