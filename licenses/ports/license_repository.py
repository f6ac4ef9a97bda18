"""
License repository port (interface).

This defines the contract for license lookup operations.
Implementations are in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import Optional

from licenses.domain.license import License


class LicenseRepository(ABC):
    """
    Abstract repository for License entities.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    The port is read-only; lookups have no side effects and a
    missing serial is a negative result, not an error.
    """

    @abstractmethod
    async def find_by_serial(self, serial_number: str) -> Optional[License]:
        """
        Find a license by serial number.

        Args:
            serial_number: Sanitized serial number

        Returns:
            License entity or None if not found
        """
        pass
