"""
Activation domain entity.

Represents one activation held by the remote license registry.
It contains business logic and is independent of infrastructure.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from core.domain.value_objects import ActivationToken


@dataclass(frozen=True)
class Activation:
    """
    Activation domain entity.

    One registry-side record of a token currently considered active
    for a serial number. Registry fields other than the token are kept
    in ``metadata`` untouched.
    """

    token: str
    metadata: Dict[str, Any] = field(default_factory=dict, compare=False, hash=False)

    def __post_init__(self):
        """Validate activation entity."""
        if not isinstance(self.token, str):
            raise ValueError("Activation token must be a string")

    @classmethod
    def from_registry(cls, entry: Dict[str, Any]) -> Optional["Activation"]:
        """
        Build an Activation from a registry ``activationData`` entry.

        Args:
            entry: Raw registry entry

        Returns:
            Activation entity, or None if the entry carries no token
        """
        if not isinstance(entry, dict):
            return None
        token = entry.get("token")
        if not isinstance(token, str):
            return None
        metadata = {key: value for key, value in entry.items() if key != "token"}
        return cls(token=token, metadata=metadata)

    def matches_token(self, token: ActivationToken) -> bool:
        """
        Check whether this activation holds the given token.

        Args:
            token: Validated activation token (compared case-insensitively)

        Returns:
            True if tokens are equal ignoring case
        """
        return token.matches(self.token)
