from app.ai.config import GatewayConfig
from app.ai.types import AIClient

from app.ai.providers.openai_provider import OpenAIProvider


def get_ai_client(config: GatewayConfig) -> AIClient:
    return OpenAIProvider(
        api_key=config.api_key or "",
        model=config.model,
        base_url=config.base_url,
        timeout_s=config.timeout_s,
    )
