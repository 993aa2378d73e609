"""Unit tests for SettingsManager."""

import os
import tempfile
from pathlib import Path

import pytest

from selection_gemini.core import AuthMethod
from selection_gemini.services import SettingsManager


SETTING_KEYS = ("AUTH_METHOD", "GEMINI_API_KEY", "GCP_PROJECT_ID", "GCP_LOCATION", "GEMINI_MODEL")


@pytest.fixture
def temp_env_dir():
    """Provide a temporary directory for .env files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def clean_env():
    """Remove every setting from the environment before and after the test."""
    saved = {key: os.environ.pop(key, None) for key in SETTING_KEYS}
    yield
    for key, value in saved.items():
        if value is not None:
            os.environ[key] = value
        else:
            os.environ.pop(key, None)


def write_env(directory: Path, text: str) -> None:
    (directory / ".env").write_text(text)


class TestSettingsManagerConfiguration:
    """Tests for building Configuration from .env."""

    def test_api_key_configuration(self, temp_env_dir, clean_env):
        write_env(temp_env_dir, "AUTH_METHOD=api_key\nGEMINI_API_KEY=k\nGEMINI_MODEL=m\n")

        config = SettingsManager(project_root=temp_env_dir).load_configuration()

        assert config.auth_method is AuthMethod.API_KEY
        assert config.api_key == "k"
        assert config.model_id == "m"
        assert config.project_id is None
        assert config.location is None

    def test_cloud_identity_configuration(self, temp_env_dir, clean_env):
        write_env(
            temp_env_dir,
            "AUTH_METHOD=vertex_ai\nGCP_PROJECT_ID=proj\nGCP_LOCATION=us-central1\nGEMINI_MODEL=m\n",
        )

        config = SettingsManager(project_root=temp_env_dir).load_configuration()

        assert config.auth_method is AuthMethod.CLOUD_IDENTITY
        assert config.project_id == "proj"
        assert config.location == "us-central1"

    def test_auth_method_defaults_to_api_key(self, temp_env_dir, clean_env):
        write_env(temp_env_dir, "GEMINI_MODEL=m\n")

        config = SettingsManager(project_root=temp_env_dir).load_configuration()
        assert config.auth_method is AuthMethod.API_KEY

    def test_unknown_auth_method_is_none(self, temp_env_dir, clean_env):
        write_env(temp_env_dir, "AUTH_METHOD=password\n")

        config = SettingsManager(project_root=temp_env_dir).load_configuration()
        assert config.auth_method is None

    def test_values_strip_whitespace(self, temp_env_dir, clean_env):
        write_env(temp_env_dir, "GEMINI_API_KEY=  test-key  \n")
        os.environ["GEMINI_API_KEY"] = "  test-key  "

        config = SettingsManager(project_root=temp_env_dir).load_configuration()
        assert config.api_key == "test-key"

    def test_whitespace_only_values_are_none(self, temp_env_dir, clean_env):
        write_env(temp_env_dir, "GEMINI_API_KEY=   \nGEMINI_MODEL=\n")
        os.environ["GEMINI_API_KEY"] = "   "

        config = SettingsManager(project_root=temp_env_dir).load_configuration()
        assert config.api_key is None
        assert config.model_id is None

    def test_reload_env_picks_up_edits(self, temp_env_dir, clean_env):
        write_env(temp_env_dir, "GEMINI_API_KEY=old-key\n")
        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.load_configuration().api_key == "old-key"

        write_env(temp_env_dir, "GEMINI_API_KEY=new-key\n")
        settings.reload_env()
        assert settings.load_configuration().api_key == "new-key"

    def test_missing_env_file_yields_empty_configuration(self, temp_env_dir, clean_env):
        settings = SettingsManager(project_root=temp_env_dir)
        config = settings.load_configuration()

        assert config.api_key is None
        assert config.model_id is None
