"""FastAPI service exposing the model availability probe."""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from functools import partial

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse

from model_probe.candidates import MODEL_IDS_TO_TEST
from model_probe.core.config import (
    API_KEY_ENV_VARS,
    MissingCredentialError,
    Settings,
    get_settings,
    mask_api_key,
)
from model_probe.core.llm import get_chat_model
from model_probe.core.state import ConfigErrorResponse, ProbeReport
from model_probe.prober import PROBE_MAX_TOKENS, ModelFactory, probe_models
from model_probe.report import build_report

logger = logging.getLogger(__name__)

ENDPOINTS = ["/health", "/api/test-models", "/docs"]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging and report configuration state on startup."""
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())
    logger.info("Starting Model Availability Probe API")
    if settings.api_key:
        logger.info(f"API key configured: {mask_api_key(settings.api_key)}")
    else:
        logger.warning(f"No API key configured - set {' or '.join(API_KEY_ENV_VARS)}")
    yield


app = FastAPI(
    title="Model Availability Probe API",
    description="Checks which Anthropic model ids are available for the configured API key",
    version="1.0.0",
    lifespan=lifespan,
)


def get_model_factory(settings: Settings = Depends(get_settings)) -> ModelFactory:
    """Chat model factory for server-side probes (no direct-browser-access header)."""
    return partial(get_chat_model, api_key=settings.api_key, max_tokens=PROBE_MAX_TOKENS)


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "service": "model-probe-api",
    }


@app.get(
    "/api/test-models",
    response_model=ProbeReport,
    response_model_by_alias=True,
    response_model_exclude_none=True,
    responses={500: {"model": ConfigErrorResponse}},
)
def check_models(
    settings: Settings = Depends(get_settings),
    model_factory: ModelFactory = Depends(get_model_factory),
):
    """
    Probe every candidate model id once and report availability.

    Runs synchronously; the response is sent after the last probe finishes.
    """
    try:
        api_key = settings.require_api_key()
    except MissingCredentialError as e:
        body = ConfigErrorResponse(error="ANTHROPIC_API_KEY not configured", message=str(e))
        return JSONResponse(status_code=500, content=body.model_dump())

    logger.info("[Model Test] Starting model availability test...")
    logger.info(f"[Model Test] API Key prefix: {mask_api_key(api_key)}")

    results = probe_models(model_factory, MODEL_IDS_TO_TEST)
    return build_report(results)


@app.exception_handler(404)
async def not_found_handler(request, exc):
    """Custom 404 handler."""
    return JSONResponse(
        status_code=404,
        content={
            "detail": "Endpoint not found",
            "available_endpoints": ENDPOINTS,
        },
    )


def main():
    """Serve the API with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "model_probe.api:app",
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
