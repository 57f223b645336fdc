"""Configuration management for the model availability probe."""

from typing import Dict, Mapping, Optional, Sequence

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Credential sources, highest priority first
API_KEY_ENV_VARS = ("NEXT_PUBLIC_ANTHROPIC_API_KEY", "ANTHROPIC_API_KEY")

# Later files override earlier ones; real environment variables override both
ENV_FILES = (".env", ".env.local")


class MissingCredentialError(ValueError):
    """Raised when none of the credential sources holds an API key."""

    def __init__(self, names: Sequence[str] = API_KEY_ENV_VARS):
        self.names = tuple(names)
        super().__init__(f"Please set {' or '.join(self.names)} in .env.local")


class Settings(BaseSettings):
    """Application settings from environment variables and .env files."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILES,
        case_sensitive=False,
        extra="ignore",
    )

    # Credentials
    next_public_anthropic_api_key: Optional[str] = Field(default=None)
    anthropic_api_key: Optional[str] = Field(default=None)

    # Application settings
    log_level: str = "INFO"
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    def api_key_sources(self) -> Dict[str, Optional[str]]:
        """Credential values keyed by environment variable name, in priority order."""
        return {
            "NEXT_PUBLIC_ANTHROPIC_API_KEY": self.next_public_anthropic_api_key,
            "ANTHROPIC_API_KEY": self.anthropic_api_key,
        }

    @property
    def api_key(self) -> Optional[str]:
        return resolve_api_key(self.api_key_sources())

    def require_api_key(self) -> str:
        """Return the resolved API key or raise MissingCredentialError."""
        api_key = self.api_key
        if not api_key:
            raise MissingCredentialError()
        return api_key


def resolve_api_key(
    sources: Mapping[str, Optional[str]],
    names: Sequence[str] = API_KEY_ENV_VARS,
) -> Optional[str]:
    """
    Resolve the credential from named sources.

    Args:
        sources: Mapping of variable name to value (missing or empty means unset)
        names: Variable names in priority order

    Returns:
        The first non-empty value, or None if every source is unset
    """
    for name in names:
        value = sources.get(name)
        if value and value.strip():
            return value.strip()
    return None


def mask_api_key(api_key: str, visible: int = 15) -> str:
    """Show only the key prefix, for log output."""
    return api_key[:visible] + "..."


def get_settings() -> Settings:
    """Load settings fresh from the current environment."""
    return Settings()
