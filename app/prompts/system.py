from app.ai.types import ChatMessage
from app.prompts.language import build_language_directive

ROLE_STATEMENT = (
    "You are a helpful medical assistant AI. "
    "You provide general health information and suggestions."
)

DISCLAIMER = (
    "IMPORTANT DISCLAIMER: Always remind users that you are an AI assistant and your "
    "suggestions are for informational purposes only.\n"
    "Users should always consult with qualified healthcare professionals for proper "
    "medical diagnosis and treatment."
)

PERMITTED_TOPICS = (
    "General health tips",
    "Common symptoms and when to seek medical help",
    "Healthy lifestyle recommendations",
    "Basic first aid information",
    "Medication reminders (but never prescribe)",
)

FORBIDDEN_OUTPUTS = (
    "Specific medical diagnoses",
    "Prescription recommendations",
    "Emergency medical advice (always direct to emergency services)",
    "Treatment plans without professional consultation",
)


def _bullets(items) -> str:
    return "\n".join(f"- {item}" for item in items)


def build_system_prompt(language: str | None) -> str:
    sections = [
        ROLE_STATEMENT,
        build_language_directive(language),
        DISCLAIMER,
        "Provide helpful, clear, and compassionate responses about:\n" + _bullets(PERMITTED_TOPICS),
        "Never provide:\n" + _bullets(FORBIDDEN_OUTPUTS),
    ]
    return "\n\n".join(sections)


def build_chat_messages(message: str | None, language: str | None) -> list[ChatMessage]:
    return [
        ChatMessage(role="system", content=build_system_prompt(language)),
        ChatMessage(role="user", content="" if message is None else str(message)),
    ]
