"""
VerifyActivationHandler.

Handler for verifying a license activation: format check, license
lookup, assignment check, then token confirmation with the registry.
"""

import logging
from typing import Callable, List, Tuple

from activations.application.dto.verification_dto import VerificationOutcome
from activations.application.queries.verify_activation import VerifyActivationQuery
from activations.domain.activation import Activation
from activations.ports.token_verification_client import TokenVerificationClient
from core.domain.exceptions import (
    IncompleteAssignmentError,
    InvalidFormatError,
    LicenseLookupError,
    NoActivationDataError,
    RegistryTransportError,
    SerialNotFoundError,
    TokenMismatchError,
    VerificationFailure,
)
from core.domain.value_objects import ActivationToken, SerialNumber
from core.metrics import activation_verifications_total
from licenses.domain.license import License
from licenses.domain.services import InputValidator, LicenseAssignmentChecker
from licenses.ports.license_repository import LicenseRepository

logger = logging.getLogger(__name__)


class VerifyActivationHandler:
    """Handler for VerifyActivationQuery."""

    def __init__(
        self,
        license_repository: LicenseRepository,
        token_verification_client: TokenVerificationClient,
    ):
        """Initialize handler with license store and registry client."""
        self.license_repository = license_repository
        self.token_verification_client = token_verification_client

    async def handle(self, query: VerifyActivationQuery) -> VerificationOutcome:
        """
        Handle verify activation query.

        Never raises: every failure is returned as a failed outcome.

        Args:
            query: VerifyActivationQuery with raw serial and token

        Returns:
            VerificationOutcome
        """
        try:
            self._check_format(query.serial, query.token)

            serial = SerialNumber(InputValidator.sanitize(query.serial))
            token = ActivationToken(InputValidator.sanitize(query.token))

            license = await self._lookup(serial)
            self._check_assignment(license)
            matched = await self._confirm_token(serial, token)
        except VerificationFailure as e:
            logger.info(
                "Activation verification failed: %s (serial %s...)",
                e.code,
                (query.serial or "")[:5],
            )
            activation_verifications_total.labels(result="invalid", code=e.code).inc()
            return VerificationOutcome.failed(e.message, e.code)

        activation_verifications_total.labels(result="activated", code="OK").inc()
        return VerificationOutcome.passed(matched.token)

    def _check_format(self, serial: str, token: str) -> None:
        """Check raw serial, then raw token, against their formats."""
        checks: List[Tuple[Callable[[str], bool], str, str]] = [
            (InputValidator.validate_serial_format, serial, "Incorrect serial format: "),
            (InputValidator.validate_token_format, token, "Incorrect token format: "),
        ]
        for is_valid, value, message in checks:
            if not is_valid(value):
                raise InvalidFormatError(f"{message}{value}")

    async def _lookup(self, serial: SerialNumber) -> License:
        """Find the license for a sanitized serial number."""
        try:
            license = await self.license_repository.find_by_serial(str(serial))
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.error("License store lookup failed: %s", e, exc_info=True)
            raise LicenseLookupError() from e

        if license is None:
            raise SerialNotFoundError(
                f"Not valid! Serial number is not in the database: {serial}"
            )
        return license

    def _check_assignment(self, license: License) -> None:
        """Require a customer, product and order, in that order."""
        violation = LicenseAssignmentChecker.first_violation(license)
        if violation:
            raise IncompleteAssignmentError(violation)

    async def _confirm_token(self, serial: SerialNumber, token: ActivationToken) -> Activation:
        """
        Ask the registry for the serial's activations and find the token.

        Args:
            serial: Sanitized serial number
            token: Sanitized activation token

        Returns:
            The matching Activation

        Raises:
            RegistryTransportError: If the registry call failed
            NoActivationDataError: If the registry returned no activations
            TokenMismatchError: If no activation holds the token
        """
        try:
            activations = await self.token_verification_client.fetch_activations(str(serial))
        except RegistryTransportError:
            raise
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.error("Unexpected license registry error: %s", e, exc_info=True)
            raise RegistryTransportError(f"HTTP Request Error: {e}") from e

        if not activations:
            raise NoActivationDataError()

        for activation in activations:
            if activation.matches_token(token):
                return activation

        raise TokenMismatchError()
