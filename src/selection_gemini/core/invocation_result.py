"""Invocation results - Success or classified Failure of a command run."""

from dataclasses import dataclass
from enum import Enum
from typing import Union


class FailureKind(Enum):
    """Closed set of failure categories callers branch on."""

    NO_INPUT_SELECTED = "NoInputSelected"
    CONFIGURATION_INVALID = "ConfigurationInvalid"
    AUTHENTICATION_FAILED = "AuthenticationFailed"
    SAFETY_BLOCKED = "SafetyBlocked"
    TRANSPORT_ERROR = "TransportError"
    RESPONSE_MALFORMED = "ResponseMalformed"
    UNKNOWN = "Unknown"

    @property
    def retryable(self) -> bool:
        """False when a refresh cannot succeed until settings are changed."""
        return self is not FailureKind.CONFIGURATION_INVALID


@dataclass(frozen=True)
class Success:
    """Generated text, already trimmed."""

    text: str

    @property
    def is_error(self) -> bool:
        return False


@dataclass(frozen=True)
class Failure:
    """A failed run with a machine-checkable kind and a human message."""

    kind: FailureKind
    message: str

    @property
    def is_error(self) -> bool:
        return True


InvocationResult = Union[Success, Failure]
