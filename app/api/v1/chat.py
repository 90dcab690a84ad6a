from fastapi import APIRouter, Depends

from app.ai.config import GatewayConfig, load_gateway_config
from app.schemas.chat import ChatErrorReply, ChatReply, ChatRequest
from app.services.chat_service import relay_chat

router = APIRouter()

_error_responses = {
    status: {"model": ChatErrorReply}
    for status in (402, 422, 429, 500)
}


@router.post("/medical-chat", response_model=ChatReply, responses=_error_responses)
async def medical_chat(
    payload: ChatRequest,
    config: GatewayConfig = Depends(load_gateway_config),
):
    reply = await relay_chat(payload.message, payload.language, config)
    return ChatReply(reply=reply)
