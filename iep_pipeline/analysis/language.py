"""Response language for analyses and answers."""

from enum import Enum


class SupportedLanguage(str, Enum):
    ENGLISH = "en"
    SPANISH = "es"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @property
    def answer_instruction(self) -> str:
        """Sentence prepended to a question so the answer comes back in this language."""
        return _ANSWER_INSTRUCTIONS[self]


_DISPLAY_NAMES = {
    SupportedLanguage.ENGLISH: "English",
    SupportedLanguage.SPANISH: "Español",
}

_ANSWER_INSTRUCTIONS = {
    SupportedLanguage.ENGLISH: "Please respond in English. ",
    SupportedLanguage.SPANISH: "Por favor responde en español. ",
}

# Words and phrases unlikely to appear in an English document.
SPANISH_INDICATORS = (
    "niño",
    "niña",
    "educación",
    "análisis",
    "español",
    "por qué",
    "cómo",
    "dónde",
    "cuándo",
    "estudiante",
    "objetivos",
    "metas",
    "servicios",
    "apoyo",
    "necesidades especiales",
    "plan educativo",
    "educativo individualizado",
    "progreso académico",
    "habilidades",
    "lectura",
    "matemáticas",
    "escritura",
    "comunicación",
    "comportamiento",
)

SPANISH_MIN_MATCHES = 3
SHORT_TEXT_WORDS = 100


def detect_language(text: str) -> SupportedLanguage:
    """Guess the language to respond in; English unless clearly Spanish.

    Spanish needs at least three distinct indicators, or one when the text
    is shorter than a hundred words.
    """
    lowered = text.lower()
    matches = sum(1 for indicator in SPANISH_INDICATORS if indicator in lowered)
    if matches >= SPANISH_MIN_MATCHES:
        return SupportedLanguage.SPANISH
    if matches >= 1 and len(text.split()) < SHORT_TEXT_WORDS:
        return SupportedLanguage.SPANISH
    return SupportedLanguage.ENGLISH


def parse_language(code: str | None) -> SupportedLanguage | None:
    """Map a code such as ``"es"`` to a language; blank means auto-detect.

    Raises:
        ValueError: for an unsupported code.
    """
    if code is None or not code.strip():
        return None
    try:
        return SupportedLanguage(code.strip().lower())
    except ValueError:
        supported = [language.value for language in SupportedLanguage]
        raise ValueError(f"Unsupported language '{code}'. Choose from: {supported}") from None
