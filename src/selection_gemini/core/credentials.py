"""Resolved credentials - one variant per transport."""

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class ApiKeyCredentials:
    """Static Gemini API key."""

    key: str = field(repr=False)


@dataclass(frozen=True)
class CloudIdentityCredentials:
    """Short-lived bearer token plus the Vertex AI project it is used against."""

    token: str = field(repr=False)
    project_id: str
    location: str


ResolvedCredentials = Union[ApiKeyCredentials, CloudIdentityCredentials]
