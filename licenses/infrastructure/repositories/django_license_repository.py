"""
Django implementation of LicenseRepository port.

This adapter converts between domain entities and Django ORM models.
"""
from typing import Optional

from asgiref.sync import sync_to_async

from licenses.domain.license import License
from licenses.infrastructure.models import License as LicenseModel
from licenses.ports.license_repository import LicenseRepository


class DjangoLicenseRepository(LicenseRepository):
    """
    Django ORM implementation of LicenseRepository.

    This adapter:
    1. Converts Django models to domain entities
    2. Converts domain entities to Django models
    3. Implements repository interface
    """

    def _to_domain(self, model: LicenseModel) -> License:
        """
        Convert Django model to domain entity.

        Args:
            model: Django License model

        Returns:
            License domain entity
        """
        return License(
            id=model.id,
            serial_number=model.serial_number,
            customer_id=model.customer_id,
            product_id=model.product_id,
            order_id=model.order_id,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, license: License) -> LicenseModel:
        """
        Convert domain entity to Django model.

        Args:
            license: License domain entity

        Returns:
            Django License model
        """
        model, created = LicenseModel.objects.get_or_create(
            id=license.id,
            defaults={
                "serial_number": license.serial_number,
                "customer_id": license.customer_id,
                "product_id": license.product_id,
                "order_id": license.order_id,
            },
        )
        # Update if exists
        if not created:
            model.serial_number = license.serial_number
            model.customer_id = license.customer_id
            model.product_id = license.product_id
            model.order_id = license.order_id
        return model

    @sync_to_async
    def find_by_serial(self, serial_number: str) -> Optional[License]:
        """
        Find a license by serial number (case-insensitive).

        Args:
            serial_number: Sanitized serial number

        Returns:
            License entity or None if not found
        """
        model = LicenseModel.objects.filter(serial_number__iexact=serial_number).first()
        if model is None:
            return None
        return self._to_domain(model)

    @sync_to_async
    def save(self, license: License) -> License:
        """
        Save a license entity.

        Adapter-only write used to seed the store; the lookup port has no
        write operation.

        Args:
            license: License entity to save

        Returns:
            Saved license entity
        """
        model = self._to_model(license)
        model.save()
        return self._to_domain(model)
