from typing import Any

from pydantic import BaseModel, field_validator

from app.prompts.language import DEFAULT_LANGUAGE


class ChatRequest(BaseModel):
    message: str = ""
    language: str = DEFAULT_LANGUAGE.value

    @field_validator("message", mode="before")
    @classmethod
    def coerce_message(cls, value: Any) -> Any:
        if value is None:
            return ""
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (int, float)):
            return str(value)
        return value

    @field_validator("language", mode="before")
    @classmethod
    def default_language(cls, value: Any) -> Any:
        if value is None:
            return DEFAULT_LANGUAGE.value
        return value


class ChatReply(BaseModel):
    reply: str


class ChatErrorReply(BaseModel):
    error: str
    reply: str | None = None


class LanguageOption(BaseModel):
    code: str
    name: str
    native: str
