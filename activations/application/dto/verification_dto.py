"""
Verification DTOs for API responses.
"""
from dataclasses import dataclass
from typing import Optional

from core.domain.value_objects import VerificationStatus

ACTIVATED_MESSAGE = "Both serial and token are still valid and registered! All good!"


@dataclass(frozen=True)
class VerificationOutcome:
    """
    Result of one activation verification.

    On success ``message`` echoes the matched registry token; on failure it
    is the message of the failing step and ``code`` names the failure kind.
    """

    success: bool
    message: str
    code: Optional[str] = None

    @classmethod
    def passed(cls, matched_token: str) -> "VerificationOutcome":
        """Successful outcome for a matched token."""
        return cls(success=True, message=matched_token)

    @classmethod
    def failed(cls, message: str, code: str) -> "VerificationOutcome":
        """Failed outcome with the failing step's message."""
        return cls(success=False, message=message, code=code)

    @property
    def status(self) -> VerificationStatus:
        """Status tag reported to the caller."""
        return VerificationStatus.ACTIVATED if self.success else VerificationStatus.INVALID

    def to_response(self) -> "ActivationVerifyResponseDTO":
        """
        Build the caller-facing response.

        Returns:
            ActivationVerifyResponseDTO with fixed text on success
        """
        message = ACTIVATED_MESSAGE if self.success else self.message
        return ActivationVerifyResponseDTO(message=message, response=self.status.value)


@dataclass(frozen=True)
class ActivationVerifyResponseDTO:
    """DTO for the activation verify endpoint response."""

    message: str
    response: str
