"""
License registry client.

HTTP adapter for the TokenVerificationClient port. Asks the remote
license registry which activations it holds for a serial number.
"""
import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import requests
from asgiref.sync import sync_to_async
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from requests.auth import HTTPBasicAuth

from activations.domain.activation import Activation
from activations.ports.token_verification_client import TokenVerificationClient
from core.domain.exceptions import RegistryTransportError
from core.metrics import license_registry_errors_total, license_registry_request_duration_seconds

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0
VALIDATE_PATH = "licenses/validate/{serial_number}"


@dataclass(frozen=True)
class RegistrySettings:
    """Connection settings for the license registry."""

    base_url: str
    api_key: str
    api_secret: str
    timeout: float = DEFAULT_TIMEOUT_SECONDS

    def __post_init__(self):
        """Validate registry settings."""
        if not self.base_url:
            raise ImproperlyConfigured("LICENSE_REGISTRY BASE_URL is not configured")
        if not self.api_key or not self.api_secret:
            raise ImproperlyConfigured("LICENSE_REGISTRY API_KEY/API_SECRET are not configured")
        if self.timeout <= 0:
            raise ImproperlyConfigured("LICENSE_REGISTRY TIMEOUT must be positive")

    @classmethod
    def from_settings(cls, config: Optional[Dict[str, Any]] = None) -> "RegistrySettings":
        """
        Build settings from the Django ``LICENSE_REGISTRY`` dict.

        Args:
            config: Explicit config dict (defaults to settings.LICENSE_REGISTRY)

        Returns:
            RegistrySettings instance
        """
        config = config if config is not None else getattr(settings, "LICENSE_REGISTRY", {})
        return cls(
            base_url=config.get("BASE_URL", ""),
            api_key=config.get("API_KEY", ""),
            api_secret=config.get("API_SECRET", ""),
            timeout=float(config.get("TIMEOUT") or DEFAULT_TIMEOUT_SECONDS),
        )

    def validate_url(self, serial_number: str) -> str:
        """Return the registry validate URL for a serial number."""
        path = VALIDATE_PATH.format(serial_number=serial_number)
        return f"{self.base_url.rstrip('/')}/{path}"


class LicenseRegistryClient(TokenVerificationClient):
    """
    requests-based implementation of TokenVerificationClient.

    Sends ``GET {base_url}/licenses/validate/{serial}`` with HTTP Basic
    credentials and reads ``data.activationData`` from the JSON body.
    """

    def __init__(
        self,
        registry_settings: Optional[RegistrySettings] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize client with registry settings and an HTTP session.

        Without explicit settings, ``settings.LICENSE_REGISTRY`` is read on
        the first fetch, not here.
        """
        self._settings = registry_settings
        self.session = session or requests.Session()

    @property
    def settings(self) -> RegistrySettings:
        """Registry settings, resolved on first use."""
        if self._settings is None:
            self._settings = RegistrySettings.from_settings()
        return self._settings

    @sync_to_async
    def fetch_activations(self, serial_number: str) -> List[Activation]:
        """
        Fetch activations for a serial number.

        Args:
            serial_number: Sanitized serial number

        Returns:
            List of Activation entities

        Raises:
            RegistryTransportError: On missing configuration, connection
                failure, timeout or non-2xx status
        """
        try:
            registry = self.settings
        except ImproperlyConfigured as e:
            license_registry_errors_total.labels(error_type="ImproperlyConfigured").inc()
            logger.error("License registry is not configured: %s", e)
            raise RegistryTransportError(
                "HTTP Request Error: license registry is not configured"
            ) from e

        url = registry.validate_url(serial_number)
        start_time = time.time()
        try:
            response = self.session.get(
                url,
                auth=HTTPBasicAuth(registry.api_key, registry.api_secret),
                headers={"Accept": "application/json"},
                timeout=registry.timeout,
            )
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            license_registry_errors_total.labels(error_type=type(e).__name__).inc()
            logger.warning("License registry request failed for %s...: %s", serial_number[:5], e)
            raise RegistryTransportError(f"HTTP Request Error: {e}") from e
        finally:
            license_registry_request_duration_seconds.observe(time.time() - start_time)

        return self._parse_activations(response)

    def _parse_activations(self, response: requests.Response) -> List[Activation]:
        """
        Extract activations from a registry response.

        Args:
            response: Successful registry response

        Returns:
            List of Activation entities (empty if body is unusable)
        """
        try:
            payload = response.json()
        except ValueError:
            license_registry_errors_total.labels(error_type="InvalidJSON").inc()
            logger.warning("License registry returned a non-JSON body")
            return []

        data = payload.get("data") if isinstance(payload, dict) else None
        entries = data.get("activationData") if isinstance(data, dict) else None
        if not isinstance(entries, list):
            logger.debug("License registry response has no activationData list")
            return []

        activations = []
        for entry in entries:
            activation = Activation.from_registry(entry)
            if activation is not None:
                activations.append(activation)
        return activations
