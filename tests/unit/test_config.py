"""Unit tests for configuration and credential resolution."""

import pytest

from model_probe.core.config import (
    API_KEY_ENV_VARS,
    MissingCredentialError,
    Settings,
    mask_api_key,
    resolve_api_key,
)


@pytest.mark.unit
class TestResolveApiKey:
    """Test the prioritized credential fallback chain."""

    def test_first_source_wins(self):
        """It should prefer the first configured source."""
        sources = {
            "NEXT_PUBLIC_ANTHROPIC_API_KEY": "public-key",
            "ANTHROPIC_API_KEY": "backend-key",
        }

        assert resolve_api_key(sources) == "public-key"

    def test_falls_back_to_second_source(self):
        """It should use the backend variable when the public one is unset."""
        assert resolve_api_key({"ANTHROPIC_API_KEY": "backend-key"}) == "backend-key"

    def test_empty_values_count_as_unset(self):
        """It should skip empty and whitespace-only values."""
        sources = {
            "NEXT_PUBLIC_ANTHROPIC_API_KEY": "   ",
            "ANTHROPIC_API_KEY": "backend-key",
        }

        assert resolve_api_key(sources) == "backend-key"
        assert resolve_api_key({"NEXT_PUBLIC_ANTHROPIC_API_KEY": ""}) is None

    def test_no_sources_returns_none(self):
        assert resolve_api_key({}) is None

    def test_custom_priority_order(self):
        """It should honor an explicit name order."""
        sources = {"A": "first", "B": "second"}

        assert resolve_api_key(sources, names=("B", "A")) == "second"

    def test_default_order(self):
        assert API_KEY_ENV_VARS == ("NEXT_PUBLIC_ANTHROPIC_API_KEY", "ANTHROPIC_API_KEY")


@pytest.mark.unit
class TestSettings:
    """Test settings loading from environment and .env files."""

    def test_reads_backend_variable_from_environment(self, monkeypatch):
        monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-ant-env")

        settings = Settings()

        assert settings.api_key == "sk-ant-env"

    def test_public_variable_takes_priority(self, monkeypatch):
        monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-ant-backend")
        monkeypatch.setenv("NEXT_PUBLIC_ANTHROPIC_API_KEY", "sk-ant-public")

        settings = Settings()

        assert settings.api_key == "sk-ant-public"
        assert list(settings.api_key_sources()) == list(API_KEY_ENV_VARS)

    def test_loads_env_local_file(self, isolated_env):
        """It should read the credential from .env.local in the working directory."""
        (isolated_env / ".env.local").write_text("ANTHROPIC_API_KEY=sk-ant-from-file\n")

        settings = Settings()

        assert settings.api_key == "sk-ant-from-file"

    def test_env_local_overrides_env(self, isolated_env):
        (isolated_env / ".env").write_text("ANTHROPIC_API_KEY=sk-ant-dotenv\n")
        (isolated_env / ".env.local").write_text("ANTHROPIC_API_KEY=sk-ant-local\n")

        assert Settings().api_key == "sk-ant-local"

    def test_environment_overrides_files(self, isolated_env, monkeypatch):
        (isolated_env / ".env.local").write_text("ANTHROPIC_API_KEY=sk-ant-local\n")
        monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-ant-env")

        assert Settings().api_key == "sk-ant-env"

    def test_require_api_key_raises_when_missing(self):
        """It should raise a configuration error naming both variables."""
        settings = Settings()

        with pytest.raises(MissingCredentialError) as exc_info:
            settings.require_api_key()

        message = str(exc_info.value)
        assert "NEXT_PUBLIC_ANTHROPIC_API_KEY" in message
        assert "ANTHROPIC_API_KEY" in message
        assert isinstance(exc_info.value, ValueError)

    def test_defaults(self):
        settings = Settings()

        assert settings.log_level == "INFO"
        assert settings.api_port == 8000


@pytest.mark.unit
def test_mask_api_key_hides_secret_part():
    """It should only show the key prefix."""
    key = "sk-ant-REDACTED"

    masked = mask_api_key(key)

    assert masked == "sk-ant-api03-ab..."
    assert "xyz" not in masked
