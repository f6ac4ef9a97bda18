"""
Pytest configuration and shared fixtures.
"""

from typing import Dict, List, Optional

import pytest
from asgiref.sync import async_to_sync

from activations.application.handlers.verify_activation_handler import VerifyActivationHandler
from activations.domain.activation import Activation
from activations.ports.token_verification_client import TokenVerificationClient
from licenses.domain.license import License
from licenses.infrastructure.repositories.django_license_repository import DjangoLicenseRepository
from licenses.ports.license_repository import LicenseRepository

VALID_SERIAL = "AB3CD-EF4GH-JK5LM-NP6QR-ST7UV-WX8YZ"
VALID_TOKEN = "0123456789abcdef0123456789abcdef01234567"


class InMemoryLicenseRepository(LicenseRepository):
    """License store fake that counts lookups or raises a canned error."""

    def __init__(
        self,
        licenses: Optional[List[License]] = None,
        error: Optional[Exception] = None,
    ):
        self.licenses: Dict[str, License] = {
            license.serial_number.upper(): license for license in licenses or []
        }
        self.error = error
        self.lookups: List[str] = []

    async def find_by_serial(self, serial_number: str) -> Optional[License]:
        self.lookups.append(serial_number)
        if self.error is not None:
            raise self.error
        return self.licenses.get(serial_number.upper())


class StubTokenVerificationClient(TokenVerificationClient):
    """Registry fake returning canned activations or raising a canned error."""

    def __init__(
        self,
        activations: Optional[List[Activation]] = None,
        error: Optional[Exception] = None,
    ):
        self.activations = activations or []
        self.error = error
        self.calls: List[str] = []

    async def fetch_activations(self, serial_number: str) -> List[Activation]:
        self.calls.append(serial_number)
        if self.error is not None:
            raise self.error
        return list(self.activations)


@pytest.fixture
def license_repository():
    """Fixture for the Django LicenseRepository."""
    return DjangoLicenseRepository()


@pytest.fixture
def assigned_license():
    """Fixture for a fully assigned License entity."""
    return License.create(
        serial_number=VALID_SERIAL,
        customer_id=17,
        product_id=42,
        order_id=1001,
    )


@pytest.fixture
def memory_license_repository(assigned_license):
    """Fixture for an in-memory license store holding the assigned license."""
    return InMemoryLicenseRepository([assigned_license])


@pytest.fixture
def registry_client():
    """Fixture for a registry fake holding the valid token."""
    return StubTokenVerificationClient(activations=[Activation(token=VALID_TOKEN)])


@pytest.fixture
def verify_handler(memory_license_repository, registry_client):
    """Fixture for a VerifyActivationHandler wired to fakes."""
    return VerifyActivationHandler(
        license_repository=memory_license_repository,
        token_verification_client=registry_client,
    )


@pytest.fixture
def make_verify_handler():
    """Factory fixture building a handler plus its fakes."""

    def _make(
        licenses: Optional[List[License]] = None,
        activations: Optional[List[Activation]] = None,
        error: Optional[Exception] = None,
        lookup_error: Optional[Exception] = None,
    ):
        repository = InMemoryLicenseRepository(licenses, error=lookup_error)
        client = StubTokenVerificationClient(activations=activations, error=error)
        handler = VerifyActivationHandler(
            license_repository=repository,
            token_verification_client=client,
        )
        return handler, repository, client

    return _make


@pytest.fixture
def db_license(db, license_repository, assigned_license):
    """Fixture for a fully assigned License saved in database."""
    return async_to_sync(license_repository.save)(assigned_license)


@pytest.fixture
def api_client():
    """Fixture for DRF API client."""
    from rest_framework.test import APIClient

    return APIClient()
