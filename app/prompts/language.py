"""Language selection for chat replies.

A selector is either a single language code (``"hindi"``) or a compound
``"<primary>-<secondary>"`` code asking for the same answer twice, first in the
primary language and then, after a ``---`` line, in the secondary one.
"""

from enum import Enum


class Language(str, Enum):
    ENGLISH = "english"
    TELUGU = "telugu"
    HINDI = "hindi"
    KANNADA = "kannada"
    TAMIL = "tamil"
    MARATHI = "marathi"
    URDU = "urdu"
    MALAYALAM = "malayalam"
    BENGALI = "bengali"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @property
    def native_name(self) -> str:
        return _NATIVE_NAMES[self]


_NATIVE_NAMES = {
    Language.ENGLISH: "English",
    Language.TELUGU: "తెలుగు",
    Language.HINDI: "हिंदी",
    Language.KANNADA: "ಕನ್ನಡ",
    Language.TAMIL: "தமிழ்",
    Language.MARATHI: "मराठी",
    Language.URDU: "اردو",
    Language.MALAYALAM: "മലയാളം",
    Language.BENGALI: "বাংলা",
}

DEFAULT_LANGUAGE = Language.ENGLISH
DUAL_LANGUAGE_SEPARATOR = "---"


def resolve_language(code: str | None) -> Language:
    """Map a single-language code to a ``Language``; unknown codes fall back to English."""
    normalized = (code or "").strip().lower()
    try:
        return Language(normalized)
    except ValueError:
        return DEFAULT_LANGUAGE


def language_catalog() -> list[Language]:
    return list(Language)


def _capitalize_first(segment: str) -> str:
    return segment[:1].upper() + segment[1:]


def _split_dual(selector: str) -> tuple[str, str]:
    parts = selector.split("-")
    return parts[0].strip(), parts[1].strip()


def _single_directive(language: Language) -> str:
    return f"You must respond only in {language.display_name} language."


def _dual_directive(primary: str, secondary: str) -> str:
    primary_name = _capitalize_first(primary)
    secondary_name = _capitalize_first(secondary)
    return (
        "CRITICAL: You MUST provide ALL responses in DUAL-LANGUAGE format:\n"
        f"1. First, write the complete response in {primary_name} language\n"
        f'2. Add "{DUAL_LANGUAGE_SEPARATOR}" as a separator line\n'
        f"3. Then write the SAME complete response in simple {secondary_name}\n"
        "\n"
        "Example format:\n"
        f"[Complete response in {primary_name}]\n"
        f"{DUAL_LANGUAGE_SEPARATOR}\n"
        f"[Same complete response in simple {secondary_name}]\n"
        "\n"
        "Both responses must cover the same information."
    )


def build_language_directive(selector: str | None) -> str:
    selector = selector or ""
    if "-" in selector:
        primary, secondary = _split_dual(selector)
        if primary and secondary:
            return _dual_directive(primary, secondary)
        # one side of the hyphen is blank; use whichever side is present
        selector = primary or secondary
    return _single_directive(resolve_language(selector))
