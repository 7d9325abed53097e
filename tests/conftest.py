"""Pytest configuration and shared fixtures for all tests.

This module provides shared test fixtures including:
- A NetworkClient mock standing in for the HTTP transport
- A TransformingNetworkClient wired to that mock
- A MollieClient whose binders use that mock

Wire-format payload builders live in tests/factories.py.
"""

from unittest.mock import AsyncMock

import pytest

from mollie_client.client import MollieClient
from mollie_client.clients import NetworkClient, TransformingNetworkClient
from tests.factories import API


@pytest.fixture
def network_client():
    """NetworkClient mock; every transport method is an AsyncMock."""
    mock = AsyncMock(spec=NetworkClient)
    mock.api_endpoint = f"{API}/"
    return mock


@pytest.fixture
def transforming_client(network_client):
    return TransformingNetworkClient(network_client)


@pytest.fixture
def mollie(network_client):
    """MollieClient whose binders all talk to the mocked transport."""
    return MollieClient(network_client)
