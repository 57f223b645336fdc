"""Sequential availability probes against the Anthropic Messages API."""

import logging
import time
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import HumanMessage

from model_probe.candidates import MODEL_IDS_TO_TEST
from model_probe.core.state import ProbeResult

logger = logging.getLogger(__name__)

PROBE_PROMPT = "Hi"
PROBE_MAX_TOKENS = 10

ModelFactory = Callable[[str], BaseChatModel]


class ProbeListener:
    """Receives probe progress as it happens. Every hook is a no-op by default."""

    def on_start(self, model_id: str) -> None:
        pass

    def on_success(self, result: ProbeResult, response_id: Optional[str], usage: Optional[Dict[str, Any]]) -> None:
        pass

    def on_failure(self, result: ProbeResult, status_code: Optional[int]) -> None:
        pass


def error_details(exc: BaseException) -> Tuple[str, str]:
    """
    Classify a failed probe.

    Prefers the structured ``{"error": {"type", "message"}}`` body the API
    returns, then the exception itself.

    Returns:
        (error_type, error_message)
    """
    body = getattr(exc, "body", None)
    error = body.get("error") if isinstance(body, dict) else None
    if not isinstance(error, dict):
        error = {}

    error_type = error.get("type") or type(exc).__name__ or "Unknown"
    error_message = error.get("message") or str(exc) or "Unknown error"
    return error_type, error_message


def _response_details(response: Any) -> Tuple[Optional[str], Optional[Dict[str, Any]]]:
    metadata = getattr(response, "response_metadata", None) or {}
    response_id = metadata.get("id") or getattr(response, "id", None)
    usage = getattr(response, "usage_metadata", None) or metadata.get("usage")
    return response_id, usage


def _elapsed_ms(start: float) -> int:
    return int(round((time.perf_counter() - start) * 1000))


def probe_model(
    model_id: str,
    chat_model: BaseChatModel,
    listener: Optional[ProbeListener] = None,
) -> ProbeResult:
    """
    Send one minimal message to a model and record whether it answered.

    Never raises for upstream failures; they are returned as an unavailable result.
    """
    listener = listener or ProbeListener()
    start = time.perf_counter()

    try:
        response = chat_model.invoke([HumanMessage(content=PROBE_PROMPT)])
    except Exception as e:
        response_time = _elapsed_ms(start)
        error_type, error_message = error_details(e)
        status_code = getattr(e, "status_code", None)

        logger.info(f"[Model Test] ❌ {model_id} NOT AVAILABLE")
        logger.info(f"[Model Test]   Error type: {error_type}")
        logger.info(f"[Model Test]   Error message: {error_message}")
        logger.info(f"[Model Test]   Status: {status_code}")

        result = ProbeResult(
            model_id=model_id,
            available=False,
            response_time=response_time,
            error_type=error_type,
            error_message=error_message,
        )
        listener.on_failure(result, status_code)
        return result

    response_time = _elapsed_ms(start)
    response_id, usage = _response_details(response)

    logger.info(f"[Model Test] ✅ {model_id} AVAILABLE ({response_time}ms)")
    logger.info(f"[Model Test]   Response ID: {response_id}")
    logger.info(f"[Model Test]   Usage: {usage}")

    result = ProbeResult(model_id=model_id, available=True, response_time=response_time)
    listener.on_success(result, response_id, usage)
    return result


def probe_models(
    model_factory: ModelFactory,
    model_ids: Sequence[str] = MODEL_IDS_TO_TEST,
    listener: Optional[ProbeListener] = None,
) -> List[ProbeResult]:
    """
    Probe each candidate once, in order.

    Args:
        model_factory: Builds the chat model for a model id
        model_ids: Candidates to probe
        listener: Optional progress hooks

    Returns:
        One result per candidate, in candidate order
    """
    listener = listener or ProbeListener()
    results: List[ProbeResult] = []

    logger.info(f"[Model Test] Testing {len(model_ids)} model IDs")

    for model_id in model_ids:
        logger.info(f"[Model Test] Testing: {model_id}")
        listener.on_start(model_id)

        try:
            chat_model = model_factory(model_id)
        except Exception as e:
            # Client construction failures count against this candidate only
            error_type, error_message = error_details(e)
            logger.warning(f"[Model Test] Could not build client for {model_id}: {error_message}")
            result = ProbeResult(
                model_id=model_id,
                available=False,
                response_time=0,
                error_type=error_type,
                error_message=error_message,
            )
            listener.on_failure(result, None)
            results.append(result)
            continue

        results.append(probe_model(model_id, chat_model, listener))

    available = sum(1 for r in results if r.available)
    logger.info(f"[Model Test] Summary: {available} available, {len(results) - available} unavailable")

    return results
