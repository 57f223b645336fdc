"""Anthropic chat model factory used by the probes."""

from typing import Dict, Optional

from langchain_anthropic import ChatAnthropic

# Opt-in header the API requires before it accepts a key outside a trusted backend
BROWSER_ACCESS_HEADER = "anthropic-dangerous-direct-browser-access"


def get_chat_model(
    model: str,
    api_key: str,
    browser_access: bool = False,
    max_tokens: int = 10,
    default_headers: Optional[Dict[str, str]] = None,
) -> ChatAnthropic:
    """
    Get a chat model bound to a single model id.

    Args:
        model: The model id to bind
        api_key: Anthropic API key
        browser_access: Tag requests as coming directly from a client context
        max_tokens: Output token cap for each request
        default_headers: Extra headers sent with every request

    Returns:
        A configured ChatAnthropic instance that never retries
    """
    if not api_key:
        raise ValueError("An Anthropic API key is required")

    headers = dict(default_headers or {})
    if browser_access:
        headers[BROWSER_ACCESS_HEADER] = "true"

    return ChatAnthropic(
        model=model,
        api_key=api_key,
        max_tokens=max_tokens,
        max_retries=0,
        default_headers=headers or None,
    )
