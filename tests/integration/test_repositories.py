"""
Integration tests for repository implementations.
"""

import pytest
from asgiref.sync import async_to_sync

from licenses.domain.license import License
from licenses.infrastructure.models import License as LicenseModel


@pytest.mark.django_db
@pytest.mark.integration
class TestLicenseRepository:
    """Integration tests for DjangoLicenseRepository."""

    def test_save_and_find_by_serial(self, license_repository, assigned_license):
        """Test saving and finding a license by serial number."""
        saved = async_to_sync(license_repository.save)(assigned_license)

        found = async_to_sync(license_repository.find_by_serial)(assigned_license.serial_number)

        assert found is not None
        assert found.id == saved.id
        assert found.customer_id == 17
        assert found.product_id == 42
        assert found.order_id == 1001
        assert found.is_fully_assigned is True

    def test_find_by_serial_ignores_case(self, license_repository, db_license):
        """Test lookup is case-insensitive."""
        found = async_to_sync(license_repository.find_by_serial)(db_license.serial_number.lower())

        assert found is not None
        assert found.id == db_license.id

    def test_find_by_serial_not_found(self, license_repository):
        """Test finding a non-existent serial."""
        found = async_to_sync(license_repository.find_by_serial)(
            "ZZZZZ-ZZZZZ-ZZZZZ-ZZZZZ-ZZZZZ-ZZZZZ"
        )

        assert found is None

    def test_unassigned_fields_round_trip_as_none(self, license_repository):
        """Test missing assignments come back as None."""
        license = License.create("CCCCC-CCCCC-CCCCC-CCCCC-CCCCC-CCCCC", customer_id=5)
        async_to_sync(license_repository.save)(license)

        found = async_to_sync(license_repository.find_by_serial)(license.serial_number)

        assert found.customer_id == 5
        assert found.product_id is None
        assert found.order_id is None
        assert found.is_fully_assigned is False

    def test_save_updates_existing(self, license_repository, db_license):
        """Test saving an existing license updates its assignments."""
        updated = License(
            id=db_license.id,
            serial_number=db_license.serial_number,
            customer_id=db_license.customer_id,
            product_id=db_license.product_id,
            order_id=None,
            created_at=db_license.created_at,
            updated_at=db_license.updated_at,
        )

        async_to_sync(license_repository.save)(updated)

        assert LicenseModel.objects.get(id=db_license.id).order_id is None
        assert LicenseModel.objects.count() == 1
