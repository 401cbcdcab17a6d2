"""
Unit tests for backend/settings.py
"""

import pytest
from pydantic import ValidationError

from backend.settings import Settings, get_settings


# Environment variables that CI might set which we need to clear for default tests
CI_ENV_VARS = [
    "ENVIRONMENT",
    "LOG_LEVEL",
    "STORAGE_BACKEND",
    "STORAGE_DIR",
    "STORAGE_KEY",
    "EXPORT_INDENT",
    "SENTRY_DSN",
    "CORS_ALLOWED_ORIGINS",
]


@pytest.fixture
def clean_env(monkeypatch):
    """Clear CI environment variables to test true defaults."""
    for var in CI_ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.mark.unit
class TestSettingsDefaults:
    """Test that Settings applies correct defaults."""

    def test_environment_default(self, clean_env):
        """Default environment should be development."""
        settings = Settings(_env_file=None)
        assert settings.environment == "development"

    def test_storage_defaults(self, clean_env):
        """Storage defaults to the file backend and the diary slot name."""
        settings = Settings(_env_file=None)
        assert settings.storage_backend == "file"
        assert settings.storage_dir == "./data"
        assert settings.storage_key == "workoutDB_v1"

    def test_policy_defaults(self, clean_env):
        settings = Settings(_env_file=None)
        assert settings.min_password_length == 6
        assert settings.min_name_length == 2
        assert settings.export_indent == 2

    def test_sentry_dsn_default_to_none(self, clean_env):
        """Sentry DSN should default to None."""
        settings = Settings(_env_file=None)
        assert settings.sentry_dsn is None


@pytest.mark.unit
class TestSettingsValidation:
    """Test Settings validation behavior."""

    def test_valid_environments_accepted(self):
        """Valid environment values should be accepted."""
        for env in ["development", "staging", "production", "test"]:
            settings = Settings(environment=env, _env_file=None)
            assert settings.environment == env

    def test_environment_case_insensitive(self):
        """Environment validation should be case-insensitive."""
        settings = Settings(environment="PRODUCTION", _env_file=None)
        assert settings.environment == "production"

    def test_invalid_environment_raises_error(self):
        """Invalid environment should raise ValidationError."""
        with pytest.raises(ValidationError) as exc_info:
            Settings(environment="invalid", _env_file=None)
        assert "Invalid environment" in str(exc_info.value)

    def test_invalid_storage_backend(self):
        with pytest.raises(ValidationError) as exc_info:
            Settings(storage_backend="redis", _env_file=None)
        assert "Invalid storage backend" in str(exc_info.value)

    def test_log_level_normalized(self):
        assert Settings(log_level="debug", _env_file=None).log_level == "DEBUG"

    def test_env_vars_loaded(self, clean_env, monkeypatch):
        monkeypatch.setenv("STORAGE_BACKEND", "MEMORY")
        monkeypatch.setenv("STORAGE_KEY", "customSlot")
        settings = Settings(_env_file=None)
        assert settings.storage_backend == "memory"
        assert settings.storage_key == "customSlot"


@pytest.mark.unit
class TestSettingsProperties:
    """Test Settings computed properties."""

    def test_cors_origins_list(self):
        settings = Settings(cors_allowed_origins=" https://a.example, ,https://b.example", _env_file=None)
        assert settings.cors_origins_list == ["https://a.example", "https://b.example"]


@pytest.mark.unit
class TestGetSettings:

    def test_get_settings_is_cached(self):
        get_settings.cache_clear()
        assert get_settings() is get_settings()
        get_settings.cache_clear()
