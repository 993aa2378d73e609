"""Configuration - Immutable settings snapshot read once per command run."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class AuthMethod(Enum):
    """How requests to Gemini are authenticated."""

    API_KEY = "api_key"
    CLOUD_IDENTITY = "cloud_identity"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["AuthMethod"]:
        """
        Parse a configured auth method.

        Accepts "vertex_ai" as an alias for cloud identity. Returns None for
        values that name no known method.
        """
        if value is None:
            return None
        normalized = value.strip().lower()
        if normalized == "vertex_ai":
            return cls.CLOUD_IDENTITY
        for method in cls:
            if method.value == normalized:
                return method
        return None


@dataclass(frozen=True)
class Configuration:
    """Settings for a single run. Only the fields of the active auth method are required."""

    auth_method: Optional[AuthMethod]
    model_id: Optional[str]
    api_key: Optional[str] = None
    project_id: Optional[str] = None
    location: Optional[str] = None
