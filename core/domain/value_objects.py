"""
Value objects for the domain.

Value objects are immutable objects that are defined by their attributes
rather than their identity. They have no identity and are compared by value.
"""
import re
from abc import ABC
from dataclasses import dataclass
from enum import Enum

# Six groups of five, I and O excluded
SERIAL_NUMBER_PATTERN = re.compile(
    r"^([A-HJ-NP-Z0-9]{5}-){5}[A-HJ-NP-Z0-9]{5}$", re.IGNORECASE
)
ACTIVATION_TOKEN_PATTERN = re.compile(r"^[a-f0-9]{40}$", re.IGNORECASE)


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for value objects.

    Value objects are immutable and compared by value.
    """

    def __eq__(self, other):
        """Compare value objects by their attributes."""
        if not isinstance(other, self.__class__):
            return False
        return self.__dict__ == other.__dict__

    def __hash__(self):
        """Make value objects hashable."""
        return hash(tuple(sorted(self.__dict__.items())))


@dataclass(frozen=True)
class SerialNumber(ValueObject):
    """License serial number in XXXXX-XXXXX-XXXXX-XXXXX-XXXXX-XXXXX form."""

    value: str

    def __post_init__(self):
        """Validate serial number format."""
        if not self.value or not SERIAL_NUMBER_PATTERN.fullmatch(self.value):
            raise ValueError(f"Invalid serial number format: {self.value}")

    def __str__(self) -> str:
        """Return serial number as string."""
        return self.value


@dataclass(frozen=True)
class ActivationToken(ValueObject):
    """Activation token: 40 hexadecimal characters."""

    value: str

    def __post_init__(self):
        """Validate token format."""
        if not self.value or not ACTIVATION_TOKEN_PATTERN.fullmatch(self.value):
            raise ValueError(f"Invalid activation token format: {self.value}")

    def matches(self, other: str) -> bool:
        """Compare against another token, ignoring case."""
        return self.value.lower() == (other or "").lower()

    def __str__(self) -> str:
        """Return token as string."""
        return self.value


class VerificationStatus(Enum):
    """Status tag returned to the caller for a verification."""

    ACTIVATED = "Activated"
    INVALID = "invalid"

    def __str__(self) -> str:
        """Return status as string."""
        return self.value
