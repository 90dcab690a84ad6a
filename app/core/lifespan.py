from contextlib import asynccontextmanager
import logging

from app.ai.config import load_gateway_config

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    config = load_gateway_config()
    if not config.api_key:
        # requests still start; each /medical-chat call fails until the key is set
        logger.warning("AI_GATEWAY_API_KEY is not set; chat requests will fail with a configuration error")
    else:
        logger.info("ai_gateway base_url=%s model=%s", config.base_url, config.model)
    yield
