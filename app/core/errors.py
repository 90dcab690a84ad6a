from __future__ import annotations

import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.cors import cors_headers

logger = logging.getLogger(__name__)

APOLOGY_REPLY = "I apologize, but I encountered an error. Please try again later."
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"


class ChatRelayError(Exception):
    status_code = 500
    message = UNEXPECTED_ERROR_MESSAGE
    reply: str | None = APOLOGY_REPLY

    def __init__(self, message: str | None = None):
        if message:
            self.message = message
        super().__init__(self.message)

    def to_payload(self) -> dict[str, str]:
        payload = {"error": self.message}
        if self.reply is not None:
            payload["reply"] = self.reply
        return payload


class ConfigurationError(ChatRelayError):
    message = "AI_GATEWAY_API_KEY is not configured"


class InvalidRequestError(ChatRelayError):
    status_code = 422
    message = "Invalid request body"


class UpstreamRateLimited(ChatRelayError):
    status_code = 429
    message = "Rate limits exceeded, please try again shortly."
    reply = None


class UpstreamPaymentRequired(ChatRelayError):
    status_code = 402
    message = "Payment required. Please add AI credits to your workspace."
    reply = None


class UpstreamGenericFailure(ChatRelayError):
    message = "AI gateway error"


class LocalProcessingError(ChatRelayError):
    @classmethod
    def from_exception(cls, exc: BaseException) -> "LocalProcessingError":
        return cls(str(exc).strip() or None)


def error_response(error: ChatRelayError) -> JSONResponse:
    return JSONResponse(
        status_code=error.status_code,
        content=error.to_payload(),
        headers=cors_headers(),
    )


async def chat_relay_error_handler(request: Request, exc: ChatRelayError) -> JSONResponse:
    _ = request
    return error_response(exc)


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    logger.info("request_validation_failed path=%s errors=%d", request.url.path, len(errors))
    detail = errors[0].get("msg") if errors else None
    message = f"Invalid request body: {detail}" if detail else None
    return error_response(InvalidRequestError(message))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("unhandled_error path=%s", request.url.path, exc_info=exc)
    return error_response(LocalProcessingError.from_exception(exc))
