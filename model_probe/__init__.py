"""Check which Anthropic model ids are available for an API key."""

__version__ = "1.0.0"
