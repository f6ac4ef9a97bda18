"""
License domain services.

Domain services contain business logic that doesn't naturally
fit within a single entity.
"""
import re
from typing import Callable, List, Optional, Tuple

from core.domain.value_objects import ACTIVATION_TOKEN_PATTERN, SERIAL_NUMBER_PATTERN
from licenses.domain.license import License

_UNSAFE_CHARACTERS = re.compile(r"[^a-zA-Z0-9\-_]")


class InputValidator:
    """Domain service for serial number and token input checks."""

    @staticmethod
    def sanitize(raw: str) -> str:
        """
        Strip every character outside [A-Za-z0-9_-].

        Args:
            raw: Raw input string

        Returns:
            Sanitized string (never raises)
        """
        return _UNSAFE_CHARACTERS.sub("", raw or "")

    @staticmethod
    def validate_serial_format(serial: str) -> bool:
        """
        Check a raw serial number against the grouped format.

        Args:
            serial: Raw serial number

        Returns:
            True if serial is six groups of five (no I or O)
        """
        return bool(serial) and SERIAL_NUMBER_PATTERN.fullmatch(serial) is not None

    @staticmethod
    def validate_token_format(token: str) -> bool:
        """
        Check a raw activation token.

        Args:
            token: Raw activation token

        Returns:
            True if token is exactly 40 hex characters
        """
        return bool(token) and ACTIVATION_TOKEN_PATTERN.fullmatch(token) is not None


class LicenseAssignmentChecker:
    """Domain service for checking license assignment."""

    # Checked in order, first failure wins
    RULES: List[Tuple[Callable[[License], bool], str]] = [
        (
            lambda license: license.customer_id is not None,
            "Not valid! Serial number is not assigned to any customer!",
        ),
        (
            lambda license: license.product_id is not None,
            "Not valid! Serial number is not assigned to any product!",
        ),
        (
            lambda license: license.order_id is not None,
            "Not valid! Serial number is not assigned to any order!",
        ),
    ]

    @classmethod
    def first_violation(cls, license: License) -> Optional[str]:
        """
        Find the first missing assignment.

        Args:
            license: License entity

        Returns:
            Failure message, or None if fully assigned
        """
        if license.is_fully_assigned:
            return None
        for predicate, message in cls.RULES:
            if not predicate(license):
                return message
        return None
