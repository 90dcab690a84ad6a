import logging

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
import sentry_sdk

from app.api.v1.health import router as health_router
from app.api.v1.chat import router as chat_router
from app.api.v1.languages import router as languages_router
from app.core.cors import cors_middleware
from app.core.errors import (
    ChatRelayError,
    chat_relay_error_handler,
    request_validation_error_handler,
    unhandled_error_handler,
)
from app.core.config import settings
from dotenv import load_dotenv
from app.core.lifespan import lifespan

load_dotenv()
logging.basicConfig(level=settings.log_level, format="%(message)s")
if settings.sentry_dsn:
    sentry_sdk.init(dsn=settings.sentry_dsn)

app = FastAPI(title="Medical Chat Relay API", version="0.1.0", lifespan=lifespan)

app.middleware("http")(cors_middleware)
app.add_exception_handler(ChatRelayError, chat_relay_error_handler)
app.add_exception_handler(RequestValidationError, request_validation_error_handler)
app.add_exception_handler(Exception, unhandled_error_handler)

app.include_router(health_router, prefix="/v1", tags=["Health"])
app.include_router(chat_router, prefix="/v1", tags=["Chat"])
app.include_router(languages_router, prefix="/v1", tags=["Languages"])
