"""
Unit tests for LicenseRegistryClient.
"""

import base64
import json
from unittest import mock

import pytest
import requests
from django.core.exceptions import ImproperlyConfigured
from django.test import override_settings
from requests.auth import HTTPBasicAuth

from activations.infrastructure.registry_client import LicenseRegistryClient, RegistrySettings
from core.domain.exceptions import RegistryTransportError

SERIAL = "AAAAA-AAAAA-AAAAA-AAAAA-AAAAA-AAAAA"
TOKEN = "0123456789abcdef0123456789abcdef01234567"


def make_response(payload=None, status_code=200, text=None):
    """Build a requests.Response with a JSON or raw body."""
    response = requests.Response()
    response.status_code = status_code
    response._content = (text if text is not None else json.dumps(payload)).encode()
    response.url = "https://registry.test"
    return response


@pytest.fixture
def registry_settings():
    """Fixture for explicit registry settings."""
    return RegistrySettings(
        base_url="https://registry.test/wp-json/lmfwc/v2/",
        api_key="ck_key",
        api_secret="cs_secret",
        timeout=3.0,
    )


@pytest.fixture
def session():
    """Fixture for a mocked requests session."""
    return mock.create_autospec(requests.Session, instance=True)


class TestRegistrySettings:
    """Tests for RegistrySettings."""

    def test_validate_url(self, registry_settings):
        """Test the validate URL is built from the base URL and serial."""
        assert (
            registry_settings.validate_url(SERIAL)
            == f"https://registry.test/wp-json/lmfwc/v2/licenses/validate/{SERIAL}"
        )

    def test_from_settings(self):
        """Test settings are read from the LICENSE_REGISTRY setting."""
        config = {
            "BASE_URL": "https://example.test/api",
            "API_KEY": "key",
            "API_SECRET": "secret",
            "TIMEOUT": 7,
        }
        with override_settings(LICENSE_REGISTRY=config):
            registry_settings = RegistrySettings.from_settings()

        assert registry_settings.base_url == "https://example.test/api"
        assert registry_settings.timeout == 7.0

    def test_default_timeout(self):
        """Test a missing timeout falls back to the default."""
        registry_settings = RegistrySettings.from_settings(
            {"BASE_URL": "https://example.test", "API_KEY": "k", "API_SECRET": "s"}
        )

        assert registry_settings.timeout == 10.0

    @pytest.mark.parametrize(
        "config",
        [
            {"BASE_URL": "", "API_KEY": "k", "API_SECRET": "s"},
            {"BASE_URL": "https://example.test", "API_KEY": "", "API_SECRET": "s"},
            {"BASE_URL": "https://example.test", "API_KEY": "k", "API_SECRET": ""},
            {"BASE_URL": "https://example.test", "API_KEY": "k", "API_SECRET": "s", "TIMEOUT": -1},
        ],
    )
    def test_incomplete_settings(self, config):
        """Test missing credentials or URL are a configuration error."""
        with pytest.raises(ImproperlyConfigured):
            RegistrySettings.from_settings(config)


@pytest.mark.asyncio
class TestLicenseRegistryClient:
    """Tests for LicenseRegistryClient."""

    async def test_fetch_activations(self, registry_settings, session):
        """Test activations are parsed from data.activationData."""
        session.get.return_value = make_response(
            {
                "success": True,
                "data": {
                    "activationData": [
                        {"token": TOKEN, "source": 1},
                        {"token": "b" * 40, "source": 2},
                    ]
                },
            }
        )
        client = LicenseRegistryClient(registry_settings, session=session)

        activations = await client.fetch_activations(SERIAL)

        assert [activation.token for activation in activations] == [TOKEN, "b" * 40]
        assert activations[0].metadata == {"source": 1}

    async def test_request_uses_basic_auth_and_timeout(self, registry_settings, session):
        """Test the registry is called with Basic credentials and the configured timeout."""
        session.get.return_value = make_response({"data": {"activationData": []}})
        client = LicenseRegistryClient(registry_settings, session=session)

        await client.fetch_activations(SERIAL)

        session.get.assert_called_once()
        args, kwargs = session.get.call_args
        assert args[0] == f"https://registry.test/wp-json/lmfwc/v2/licenses/validate/{SERIAL}"
        assert kwargs["auth"] == HTTPBasicAuth("ck_key", "cs_secret")
        assert kwargs["timeout"] == 3.0

    async def test_basic_auth_header(self, registry_settings):
        """Test the Authorization header is Basic base64(key:secret)."""
        request = requests.Request(
            "GET",
            registry_settings.validate_url(SERIAL),
            auth=HTTPBasicAuth(registry_settings.api_key, registry_settings.api_secret),
        ).prepare()

        expected = base64.b64encode(b"ck_key:cs_secret").decode()
        assert request.headers["Authorization"] == f"Basic {expected}"

    @pytest.mark.parametrize(
        "payload",
        [
            {},
            {"data": None},
            {"data": {}},
            {"data": {"activationData": None}},
            {"data": {"activationData": "not-a-list"}},
            {"data": {"activationData": []}},
            [],
        ],
    )
    async def test_missing_activation_data(self, registry_settings, session, payload):
        """Test missing or malformed activation data yields no activations."""
        session.get.return_value = make_response(payload)
        client = LicenseRegistryClient(registry_settings, session=session)

        assert await client.fetch_activations(SERIAL) == []

    async def test_invalid_json(self, registry_settings, session):
        """Test an undecodable body yields no activations."""
        session.get.return_value = make_response(text="<html>oops</html>")
        client = LicenseRegistryClient(registry_settings, session=session)

        assert await client.fetch_activations(SERIAL) == []

    async def test_entries_without_token_skipped(self, registry_settings, session):
        """Test entries lacking a token are ignored."""
        session.get.return_value = make_response(
            {"data": {"activationData": [{"source": 1}, "junk", {"token": TOKEN}]}}
        )
        client = LicenseRegistryClient(registry_settings, session=session)

        activations = await client.fetch_activations(SERIAL)

        assert [activation.token for activation in activations] == [TOKEN]

    async def test_connection_error(self, registry_settings, session):
        """Test connection failures raise a transport error with the error text."""
        session.get.side_effect = requests.exceptions.ConnectionError("connection refused")
        client = LicenseRegistryClient(registry_settings, session=session)

        with pytest.raises(RegistryTransportError, match="connection refused"):
            await client.fetch_activations(SERIAL)

    async def test_timeout(self, registry_settings, session):
        """Test timeouts raise a transport error."""
        session.get.side_effect = requests.exceptions.Timeout("read timed out")
        client = LicenseRegistryClient(registry_settings, session=session)

        with pytest.raises(RegistryTransportError, match="HTTP Request Error: read timed out"):
            await client.fetch_activations(SERIAL)

    async def test_non_2xx_status(self, registry_settings, session):
        """Test non-2xx responses raise a transport error."""
        session.get.return_value = make_response({"message": "nope"}, status_code=404)
        client = LicenseRegistryClient(registry_settings, session=session)

        with pytest.raises(RegistryTransportError, match="404"):
            await client.fetch_activations(SERIAL)

    async def test_settings_resolved_on_first_fetch(self, session):
        """Test construction does not read LICENSE_REGISTRY."""
        with override_settings(LICENSE_REGISTRY={}):
            client = LicenseRegistryClient(session=session)

        with override_settings(
            LICENSE_REGISTRY={
                "BASE_URL": "https://example.test",
                "API_KEY": "k",
                "API_SECRET": "s",
            }
        ):
            session.get.return_value = make_response({"data": {"activationData": []}})
            activations = await client.fetch_activations(SERIAL)

        assert activations == []
        assert session.get.call_args.args[0] == (
            f"https://example.test/licenses/validate/{SERIAL}"
        )

    async def test_missing_configuration_is_transport_error(self, session):
        """Test an unconfigured registry fails the fetch without any request."""
        with override_settings(LICENSE_REGISTRY={"BASE_URL": "", "API_KEY": "", "API_SECRET": ""}):
            client = LicenseRegistryClient(session=session)

            with pytest.raises(
                RegistryTransportError,
                match="HTTP Request Error: license registry is not configured",
            ):
                await client.fetch_activations(SERIAL)

        session.get.assert_not_called()
