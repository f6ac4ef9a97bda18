"""
Domain exceptions.

Domain exceptions represent business rule violations
and domain-specific error conditions.

Every verification failure is an expected outcome: the activation
verification handler converts them into a failed VerificationOutcome
and they never reach the transport layer.
"""


class DomainException(Exception):
    """Base exception for all domain exceptions."""

    def __init__(self, message: str, code: str = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class VerificationFailure(DomainException):
    """Base exception for activation verification failures."""

    pass


class InvalidFormatError(VerificationFailure):
    """Raised when a serial number or token fails its format check."""

    def __init__(self, message: str = "Incorrect format"):
        super().__init__(message, code="INVALID_FORMAT")


class SerialNotFoundError(VerificationFailure):
    """Raised when the serial number is not in the license store."""

    def __init__(self, message: str = "Serial number is not in the database"):
        super().__init__(message, code="NOT_FOUND")


class LicenseLookupError(VerificationFailure):
    """Raised when the license store cannot answer a lookup."""

    def __init__(self, message: str = "Not valid! Serial number could not be looked up!"):
        super().__init__(message, code="LOOKUP_ERROR")


class IncompleteAssignmentError(VerificationFailure):
    """Raised when a license lacks a customer, product or order."""

    def __init__(self, message: str = "Serial number is not fully assigned"):
        super().__init__(message, code="INCOMPLETE_ASSIGNMENT")


class RegistryTransportError(VerificationFailure):
    """Raised when the license registry cannot be reached."""

    def __init__(self, message: str = "HTTP Request Error"):
        super().__init__(message, code="TRANSPORT_ERROR")


class NoActivationDataError(VerificationFailure):
    """Raised when the registry returns no usable activation list."""

    def __init__(self, message: str = "No activation data available!"):
        super().__init__(message, code="NO_ACTIVATION_DATA")


class TokenMismatchError(VerificationFailure):
    """Raised when no registry activation matches the supplied token."""

    def __init__(self, message: str = "No activation data found for the provided token!"):
        super().__init__(message, code="TOKEN_MISMATCH")
