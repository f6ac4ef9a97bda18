"""
VerifyActivationQuery.

Query to verify that a serial number and activation token are
genuine and currently registered.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class VerifyActivationQuery:
    """Query to verify an activation. Values are raw, unsanitized input."""

    serial: str
    token: str
