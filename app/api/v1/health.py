from fastapi import APIRouter

from app.ai.config import load_gateway_config

router = APIRouter()


@router.get(
    "/health",
    summary="Health Check",
    description="Report service health and whether the AI gateway credential is configured.",
)
async def health_check():
    return {"status": "healthy", "gateway_configured": bool(load_gateway_config().api_key)}
