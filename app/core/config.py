from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

DEFAULT_CORS_ALLOW_HEADERS = ["authorization", "x-client-info", "apikey", "content-type"]


def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _get_env_float(name: str, default: float) -> float:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _get_env_list(name: str, default: list[str]) -> tuple[str, ...]:
    raw = _get_env(name, None)
    if raw is None:
        return tuple(default)
    values = [item.strip() for item in raw.split(",")]
    clean = [item for item in values if item]
    return tuple(clean) if clean else tuple(default)


@dataclass(frozen=True)
class Settings:
    log_level: str
    sentry_dsn: str | None
    log_message_max_chars: int
    cors_allow_origin: str
    cors_allow_headers: tuple[str, ...]


def load_settings() -> Settings:
    return Settings(
        log_level=(_get_env("LOG_LEVEL", "INFO") or "INFO").upper(),
        sentry_dsn=_get_env("SENTRY_DSN"),
        log_message_max_chars=max(0, _get_env_int("LOG_MESSAGE_MAX_CHARS", 200)),
        cors_allow_origin=_get_env("CORS_ALLOW_ORIGIN", "*") or "*",
        cors_allow_headers=_get_env_list("CORS_ALLOW_HEADERS", DEFAULT_CORS_ALLOW_HEADERS),
    )


settings = load_settings()
