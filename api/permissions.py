"""
Access policies for public verification endpoints.

The verification endpoint takes its permission classes from the
``ACTIVATION_VERIFY_PERMISSION_CLASSES`` setting so the policy is an
explicit deployment decision.
"""

import hashlib
import logging
import secrets
from typing import List

from django.conf import settings
from django.utils.module_loading import import_string
from rest_framework.permissions import BasePermission

logger = logging.getLogger(__name__)

CLIENT_API_KEY_HEADER = "X-API-Key"


def _hash_key(raw_key: str) -> str:
    """SHA-256 hex digest of a client API key."""
    return hashlib.sha256(raw_key.encode()).hexdigest()


class HasClientAPIKey(BasePermission):
    """
    Allow requests carrying one of the configured client API keys.

    Keys come from ``VERIFICATION_CLIENT_API_KEYS``. With no keys
    configured every request is denied.
    """

    message = "Invalid or missing client API key."

    def has_permission(self, request, view) -> bool:
        """
        Check the client API key header.

        Args:
            request: DRF request
            view: View being accessed

        Returns:
            True if the key matches a configured key
        """
        raw_key = request.headers.get(CLIENT_API_KEY_HEADER, "")
        if not raw_key:
            return False

        key_hash = _hash_key(raw_key)
        for configured in getattr(settings, "VERIFICATION_CLIENT_API_KEYS", []):
            if configured and secrets.compare_digest(_hash_key(configured), key_hash):
                return True

        logger.warning("Invalid client API key attempted: %s...", raw_key[:4])
        return False


def get_verification_permissions() -> List[BasePermission]:
    """
    Instantiate the configured verification permission classes.

    Returns:
        List of permission instances
    """
    paths = getattr(
        settings,
        "ACTIVATION_VERIFY_PERMISSION_CLASSES",
        ["api.permissions.HasClientAPIKey"],
    )
    return [import_string(path)() for path in paths]
