"""Settings Manager - Reads auth and model configuration from .env and the environment."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from selection_gemini.core import AuthMethod, Configuration


DEFAULT_AUTH_METHOD = "api_key"


class SettingsManager:
    """
    Manages settings for the selection commands.

    Values come from a .env file (project root by default) and
    the process environment; reload_env() lets the file win. Keys:
    AUTH_METHOD, GEMINI_API_KEY, GCP_PROJECT_ID, GCP_LOCATION, GEMINI_MODEL.
    """

    def __init__(self, project_root: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            project_root: Directory containing the .env file.
                         If None, uses the repository root above src/.
        """
        if project_root is None:
            current = Path(__file__).resolve()
            project_root = current.parent.parent.parent.parent

        self._project_root = project_root
        load_dotenv(dotenv_path=self.env_path)

    @property
    def env_path(self) -> Path:
        return self._project_root / ".env"

    def reload_env(self) -> None:
        """Reload environment variables from .env file."""
        load_dotenv(dotenv_path=self.env_path, override=True)

    def load_configuration(self) -> Configuration:
        """Build an immutable configuration snapshot from the current environment."""
        raw_method = _read("AUTH_METHOD") or DEFAULT_AUTH_METHOD
        return Configuration(
            auth_method=AuthMethod.parse(raw_method),
            model_id=_read("GEMINI_MODEL"),
            api_key=_read("GEMINI_API_KEY"),
            project_id=_read("GCP_PROJECT_ID"),
            location=_read("GCP_LOCATION"),
        )


def _read(name: str) -> Optional[str]:
    value = os.getenv(name)
    return value.strip() if value and value.strip() else None
