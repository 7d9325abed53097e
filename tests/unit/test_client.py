"""Unit tests for client construction and settings."""

from unittest.mock import AsyncMock

import pytest

from mollie_client.client import MollieClient, create_mollie_client
from mollie_client.clients import NetworkClient
from mollie_client.config import MollieSettings
from mollie_client.models import LocalValidationError


class TestCreateMollieClient:
    """Test suite for credential handling in create_mollie_client."""

    def test_api_key(self):
        mollie = create_mollie_client(api_key="test_dHar4XY7LxsDOtmnkVtjNVWXLSlXsM")

        assert isinstance(mollie, MollieClient)
        headers = mollie.network_client.http_client.headers
        assert headers["Authorization"] == "Bearer test_dHar4XY7LxsDOtmnkVtjNVWXLSlXsM"

    def test_access_token(self):
        mollie = create_mollie_client(access_token="access_Wwvu7egPcJLLJ9Kb7J632x8wJ2zMeJ")

        headers = mollie.network_client.http_client.headers
        assert headers["Authorization"] == "Bearer access_Wwvu7egPcJLLJ9Kb7J632x8wJ2zMeJ"

    def test_custom_endpoint_and_version_strings(self):
        mollie = create_mollie_client(
            api_key="live_dHar4XY7LxsDOtmnkVtjNVWXLSlXsM",
            api_endpoint="https://api.example.org/v2",
            version_strings=["Webshop/1.2"],
        )

        assert mollie.network_client.api_endpoint == "https://api.example.org/v2/"
        assert "Webshop/1.2" in mollie.network_client.user_agent

    @pytest.mark.parametrize(
        "kwargs,message",
        [
            ({}, "Missing parameter"),
            ({"api_key": "dHar4XY7LxsDOtmnkVtjNVWXLSlXsM"}, "API key must start with"),
            ({"access_token": "test_dHar4XY7LxsDOtmnkVtjNVWXLSlXsM"}, "Access token must start with"),
            (
                {"api_key": "test_dHar4XY7LxsDOtmnkVtjNVWXLSlXsM", "access_token": "access_Wwvu7egPcJ"},
                "not both",
            ),
        ],
    )
    def test_invalid_credentials(self, monkeypatch, kwargs, message):
        monkeypatch.delenv("MOLLIE_API_KEY", raising=False)
        monkeypatch.delenv("MOLLIE_ACCESS_TOKEN", raising=False)
        monkeypatch.setattr("mollie_client.client.settings", MollieSettings(_env_file=None))

        with pytest.raises(LocalValidationError, match=message):
            create_mollie_client(**kwargs)

    def test_credentials_from_settings(self, monkeypatch):
        monkeypatch.setattr(
            "mollie_client.client.settings",
            MollieSettings(_env_file=None, api_key="test_fromEnvironment1234", timeout_seconds=7.5),
        )

        mollie = create_mollie_client()

        assert mollie.network_client.http_client.headers["Authorization"] == "Bearer test_fromEnvironment1234"
        assert mollie.network_client.http_client.timeout.read == 7.5

    def test_injected_network_client_skips_credentials(self, network_client):
        mollie = create_mollie_client(network_client=network_client)

        assert mollie.network_client is network_client

    @pytest.mark.asyncio
    async def test_context_manager_closes_transport(self):
        network_client = AsyncMock(spec=NetworkClient)
        network_client.api_endpoint = "https://api.mollie.com/v2/"

        async with create_mollie_client(network_client=network_client) as mollie:
            assert mollie.payments is not None

        network_client.close.assert_awaited_once()


class TestSettings:
    """Test suite for environment-driven settings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("MOLLIE_API_KEY", raising=False)
        monkeypatch.delenv("MOLLIE_TIMEOUT_SECONDS", raising=False)
        monkeypatch.delenv("MOLLIE_LOGGING__LEVEL", raising=False)

        settings = MollieSettings(_env_file=None)

        assert settings.api_key is None
        assert settings.api_endpoint == "https://api.mollie.com/v2/"
        assert settings.timeout_seconds == 30.0
        assert settings.logging.level == "INFO"
        assert settings.logging.json_output is True

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("MOLLIE_API_KEY", "live_dHar4XY7LxsDOtmnkVtjNVWXLSlXsM")
        monkeypatch.setenv("MOLLIE_TIMEOUT_SECONDS", "10")
        monkeypatch.setenv("MOLLIE_LOGGING__LEVEL", "DEBUG")
        monkeypatch.setenv("MOLLIE_LOGGING__JSON_OUTPUT", "false")

        settings = MollieSettings(_env_file=None)

        assert settings.api_key == "live_dHar4XY7LxsDOtmnkVtjNVWXLSlXsM"
        assert settings.timeout_seconds == 10.0
        assert settings.logging.level == "DEBUG"
        assert settings.logging.json_output is False
