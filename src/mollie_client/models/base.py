"""Base model for transformed API resources.

A model is a frozen pydantic wrapper around one API record. It keeps the
record's fields (snake_case in Python, camelCase on the wire), any fields it
does not know about, and a private reference to the client that fetched it so
helper methods can follow the record's _links.
"""

from typing import TYPE_CHECKING, Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr
from pydantic.alias_generators import to_camel

from mollie_client.models.exceptions import LocalValidationError

if TYPE_CHECKING:
    from mollie_client.clients.transforming_client import TransformingNetworkClient
    from mollie_client.models.list import List


class Link(BaseModel):
    """A URL object from _links."""

    model_config = ConfigDict(frozen=True, extra="allow")

    href: str
    type: str | None = None


class Amount(BaseModel):
    """A monetary amount, e.g. {"value": "10.00", "currency": "EUR"}."""

    model_config = ConfigDict(frozen=True)

    value: str
    currency: str


class Model(BaseModel):
    """
    Base for every API resource.

    Subclasses set `resource_name` to the kind tag the API puts in the record's
    "resource" field; TransformingNetworkClient uses it to pick the class.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="allow",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    resource_name: ClassVar[str] = ""

    resource: str | None = None
    id: str | None = None
    mode: str | None = None
    links: dict[str, Link | None] = Field(default_factory=dict, alias="_links")

    _network_client: Any = PrivateAttr(default=None)

    @classmethod
    def transform(
        cls, network_client: "TransformingNetworkClient", data: dict[str, Any]
    ) -> "Model":
        """
        Build a model from raw JSON and bind it (and every embedded model)
        to the client. The input is not modified.
        """
        model = cls.model_validate(data)
        model._bind(network_client)
        return model

    def _bind(self, network_client: "TransformingNetworkClient") -> None:
        self._network_client = network_client
        for name in type(self).model_fields:
            _bind_value(getattr(self, name), network_client)

    def get_link(self, name: str) -> str | None:
        """Return the href of the named link, or None if absent."""
        link = self.links.get(name)
        if link is None:
            return None
        return link.href

    def has_link(self, name: str) -> bool:
        return self.get_link(name) is not None

    def to_dict(self) -> dict[str, Any]:
        """Return the record in wire form (camelCase keys, _links, _embedded)."""
        return self.model_dump(by_alias=True, exclude_unset=True, mode="json")

    async def _follow(self, name: str) -> "Model":
        url = self._require_link(name)
        return await self._client().get_url(url)

    async def _follow_list(self, name: str, embedded_key: str) -> "List[Any]":
        url = self._require_link(name)
        return await self._client().list_url(url, embedded_key)

    def _require_link(self, name: str) -> str:
        url = self.get_link(name)
        if url is None:
            raise LocalValidationError(
                f"The {type(self).resource_name or self.resource} has no {name} link"
            )
        return url

    def _client(self) -> "TransformingNetworkClient":
        if self._network_client is None:
            raise LocalValidationError(
                f"The {type(self).resource_name or self.resource} is not bound to a client"
            )
        return self._network_client


def _bind_value(value: Any, network_client: "TransformingNetworkClient") -> None:
    if isinstance(value, Model):
        value._bind(network_client)
    elif isinstance(value, BaseModel):
        for name in type(value).model_fields:
            _bind_value(getattr(value, name), network_client)
    elif isinstance(value, (list, tuple)):
        for item in value:
            _bind_value(item, network_client)
