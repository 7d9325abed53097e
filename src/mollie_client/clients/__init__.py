"""HTTP clients for the Mollie API."""

from mollie_client.clients.network_client import NetworkClient
from mollie_client.clients.transforming_client import TransformingNetworkClient

__all__ = [
    "NetworkClient",
    "TransformingNetworkClient",
]
