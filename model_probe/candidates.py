"""Model ids probed by both the CLI and the HTTP service."""

MODEL_IDS_TO_TEST = (
    # Claude 4.5 models
    "claude-haiku-4-5-20251001",
    "claude-sonnet-4-5-20250929",

    # Claude 4.1 models
    "claude-opus-4-1-20250805",

    # Claude 3.5 models (known working)
    "claude-3-5-haiku-20241022",
    "claude-3-5-sonnet-20241022",

    # Alternative naming patterns
    "claude-4-5-haiku-20251001",
    "claude-4-5-sonnet-20250929",
    "claude-4-1-opus-20250805",
)
