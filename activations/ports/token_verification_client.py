"""
Token verification client port (interface).

This defines the contract for querying the remote license registry.
Implementations are in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import List

from activations.domain.activation import Activation


class TokenVerificationClient(ABC):
    """
    Abstract client for the remote license registry.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    """

    @abstractmethod
    async def fetch_activations(self, serial_number: str) -> List[Activation]:
        """
        Fetch the activations the registry holds for a serial number.

        Args:
            serial_number: Sanitized serial number

        Returns:
            List of Activation entities (empty when the registry
            has no usable activation data)

        Raises:
            RegistryTransportError: If the registry cannot be reached,
                times out or answers with a non-2xx status
        """
        pass
