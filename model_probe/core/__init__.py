"""Core modules for configuration, the LLM client, and result types."""

from model_probe.core.config import (
    API_KEY_ENV_VARS,
    MissingCredentialError,
    Settings,
    get_settings,
    mask_api_key,
    resolve_api_key
)
from model_probe.core.llm import get_chat_model
from model_probe.core.state import (
    AvailableModel,
    ConfigErrorResponse,
    ProbeReport,
    ProbeResult,
    ProbeSummary,
    UnavailableModel
)

__all__ = [
    "API_KEY_ENV_VARS",
    "MissingCredentialError",
    "Settings",
    "get_settings",
    "mask_api_key",
    "resolve_api_key",
    "get_chat_model",
    "AvailableModel",
    "ConfigErrorResponse",
    "ProbeReport",
    "ProbeResult",
    "ProbeSummary",
    "UnavailableModel"
]
