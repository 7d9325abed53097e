"""Network client that turns raw API responses into models."""

from collections.abc import Mapping
from typing import Any

from mollie_client.clients.network_client import NetworkClient
from mollie_client.models import TRANSFORMERS
from mollie_client.models.base import Link, Model
from mollie_client.models.list import List


class TransformingNetworkClient:
    """
    Wraps a NetworkClient and transforms every response.

    Singular responses are transformed by the model class registered for
    their "resource" tag. List responses become a List of transformed models
    with the response's count and _links. Records with an unknown resource tag
    are wrapped in the plain Model base class.
    """

    def __init__(
        self,
        network_client: NetworkClient,
        transformers: Mapping[str, type[Model]] | None = None,
    ) -> None:
        self.network_client = network_client
        self.transformers = dict(TRANSFORMERS if transformers is None else transformers)

    def transform(self, data: dict[str, Any]) -> Model:
        model_class = self.transformers.get(data.get("resource", ""), Model)
        return model_class.transform(self, data)

    def transform_list(self, data: dict[str, Any], embedded_key: str) -> List[Any]:
        records = (data.get("_embedded") or {}).get(embedded_key) or []
        links = {
            name: Link.model_validate(link) if link is not None else None
            for name, link in (data.get("_links") or {}).items()
        }
        return List(
            [self.transform(record) for record in records],
            count=data.get("count", len(records)),
            links=links,
        )

    async def get(self, path: str, query: dict[str, Any] | None = None) -> Any:
        return self.transform(await self.network_client.get(path, query))

    async def list(
        self, path: str, embedded_key: str, query: dict[str, Any] | None = None
    ) -> List[Any]:
        return self.transform_list(await self.network_client.list(path, query), embedded_key)

    async def post(
        self,
        path: str,
        data: dict[str, Any] | None = None,
        query: dict[str, Any] | None = None,
        idempotency_key: str | None = None,
    ) -> Any:
        return self.transform(
            await self.network_client.post(path, data, query, idempotency_key=idempotency_key)
        )

    async def patch(self, path: str, data: dict[str, Any] | None = None) -> Any:
        return self.transform(await self.network_client.patch(path, data))

    async def delete(self, path: str, data: dict[str, Any] | None = None) -> Any:
        """Returns True for 204 No Content, otherwise the transformed body."""
        result = await self.network_client.delete(path, data)
        if result is True:
            return True
        return self.transform(result)

    async def get_url(self, url: str) -> Any:
        return self.transform(await self.network_client.get_url(url))

    async def list_url(self, url: str, embedded_key: str) -> List[Any]:
        return self.transform_list(await self.network_client.list_url(url), embedded_key)
