from dataclasses import dataclass

from app.core.config import _get_env, _get_env_float

DEFAULT_BASE_URL = "https://ai.gateway.lovable.dev/v1"
DEFAULT_MODEL = "google/gemini-2.5-flash"


@dataclass(frozen=True)
class GatewayConfig:
    api_key: str | None
    base_url: str = DEFAULT_BASE_URL
    model: str = DEFAULT_MODEL
    timeout_s: float = 60.0


def load_gateway_config() -> GatewayConfig:
    """Read the gateway settings from the environment at call time."""
    api_key = (_get_env("AI_GATEWAY_API_KEY") or "").strip() or None
    base_url = (_get_env("AI_GATEWAY_BASE_URL", DEFAULT_BASE_URL) or DEFAULT_BASE_URL).strip()
    model = (_get_env("AI_GATEWAY_MODEL", DEFAULT_MODEL) or DEFAULT_MODEL).strip()
    return GatewayConfig(
        api_key=api_key,
        base_url=base_url.rstrip("/"),
        model=model,
        timeout_s=_get_env_float("AI_GATEWAY_TIMEOUT_S", 60.0),
    )
