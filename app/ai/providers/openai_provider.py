from __future__ import annotations

from typing import Any, Optional, Sequence

import httpx
from openai import AsyncOpenAI

from app.ai.types import ChatMessage


def _field(obj: Any, name: str) -> Any:
    if obj is None:
        return None
    if isinstance(obj, dict):
        return obj.get(name)
    return getattr(obj, name, None)


def _content_text(content: Any) -> str | None:
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        # content parts: keep the text ones, in order
        texts = [_field(part, "text") for part in content if _field(part, "type") == "text"]
        return "".join(text for text in texts if isinstance(text, str)) or None
    return None


def first_choice_content(completion: Any) -> str | None:
    choices = _field(completion, "choices") or []
    if not choices:
        return None
    return _content_text(_field(_field(choices[0], "message"), "content"))


class OpenAIProvider:
    """Non-streaming chat completions against an OpenAI-compatible gateway."""

    def __init__(
        self,
        api_key: str,
        model: str,
        base_url: Optional[str] = None,
        timeout_s: float = 60.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self._model = model
        self._client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url or None,
            timeout=timeout_s,
            max_retries=0,
            http_client=http_client,
        )

    async def complete(self, messages: Sequence[ChatMessage]) -> str | None:
        payload = [{"role": m.role, "content": m.content} for m in messages]
        completion = await self._client.chat.completions.create(
            model=self._model,
            messages=payload,
            stream=False,
        )
        if isinstance(completion, (str, bytes)):
            raise ValueError("Invalid JSON from AI gateway")
        return first_choice_content(completion)

    async def aclose(self) -> None:
        await self._client.close()
