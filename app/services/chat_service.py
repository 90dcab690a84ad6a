import hashlib
import json
import logging
import time

import openai

from app.ai.config import GatewayConfig
from app.ai.factory import get_ai_client
from app.core.config import settings
from app.core.errors import (
    ChatRelayError,
    ConfigurationError,
    LocalProcessingError,
    UpstreamGenericFailure,
    UpstreamPaymentRequired,
    UpstreamRateLimited,
)
from app.prompts.system import build_chat_messages

logger = logging.getLogger("app.chat")

FALLBACK_REPLY = "I apologize, but I could not generate a response. Please try again."


def _short_hash(value: str | None) -> str:
    normalized = (value or "").strip()
    if not normalized:
        return ""
    return hashlib.sha256(normalized.encode("utf-8")).hexdigest()[:12]


def _preview(value: str) -> str:
    limit = settings.log_message_max_chars
    if limit <= 0:
        return ""
    if len(value) > limit:
        return value[:limit] + "..."
    return value


def _upstream_error(exc: openai.APIStatusError) -> ChatRelayError:
    if exc.status_code == 429:
        return UpstreamRateLimited()
    if exc.status_code == 402:
        return UpstreamPaymentRequired()
    return UpstreamGenericFailure()


async def relay_chat(message: str | None, language: str | None, config: GatewayConfig) -> str:
    """Send one message to the AI gateway and return the assistant's reply.

    Every failure is raised as a ``ChatRelayError`` subclass whose status code and
    message are returned to the caller unchanged.
    """
    started_at = time.perf_counter()
    user_message = "" if message is None else str(message)
    logger.info(
        json.dumps(
            {
                "event": "chat_request",
                "language": language,
                "message_len": len(user_message),
                "message_hash": _short_hash(user_message),
                "message_preview": _preview(user_message),
            },
            ensure_ascii=False,
        )
    )

    if not config.api_key:
        logger.error(json.dumps({"event": "chat_config_error", "error": ConfigurationError.message}))
        raise ConfigurationError()

    try:
        messages = build_chat_messages(user_message, language)
        ai = get_ai_client(config)
        try:
            content = await ai.complete(messages)
        finally:
            await ai.aclose()
    except openai.APIStatusError as exc:
        logger.error(
            json.dumps(
                {
                    "event": "chat_gateway_error",
                    "status": exc.status_code,
                    "body": exc.response.text,
                }
            )
        )
        raise _upstream_error(exc) from exc
    except Exception as exc:
        logger.exception(
            json.dumps(
                {
                    "event": "chat_error",
                    "error": str(exc),
                    "duration_ms": int((time.perf_counter() - started_at) * 1000),
                }
            )
        )
        raise LocalProcessingError.from_exception(exc) from exc

    logger.info(
        json.dumps(
            {
                "event": "chat_complete",
                "model": config.model,
                "empty_reply": not content,
                "duration_ms": int((time.perf_counter() - started_at) * 1000),
            }
        )
    )
    return content or FALLBACK_REPLY
