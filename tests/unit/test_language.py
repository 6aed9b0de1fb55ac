import pytest

from iep_pipeline.analysis.language import (
    SupportedLanguage,
    detect_language,
    parse_language,
)

ENGLISH_PLAN = "Annual IEP review. Reading goal: improve fluency to 90 words per minute."
SPANISH_PLAN = (
    "Plan educativo individualizado para el estudiante. Objetivos de lectura y "
    "escritura, con servicios de apoyo semanales."
)


class TestDetectLanguage:
    def test_english_document(self) -> None:
        assert detect_language(ENGLISH_PLAN) is SupportedLanguage.ENGLISH

    def test_spanish_document(self) -> None:
        assert detect_language(SPANISH_PLAN) is SupportedLanguage.SPANISH

    def test_case_insensitive(self) -> None:
        assert detect_language(SPANISH_PLAN.upper()) is SupportedLanguage.SPANISH

    def test_single_indicator_in_short_text(self) -> None:
        assert detect_language("¿Cómo va mi hijo?") is SupportedLanguage.SPANISH

    def test_single_indicator_in_long_text_stays_english(self) -> None:
        text = " ".join(["reading"] * 120) + " habilidades"
        assert detect_language(text) is SupportedLanguage.ENGLISH

    def test_three_indicators_in_long_text(self) -> None:
        text = " ".join(["word"] * 200) + " lectura escritura matemáticas"
        assert detect_language(text) is SupportedLanguage.SPANISH

    def test_empty_text_is_english(self) -> None:
        assert detect_language("") is SupportedLanguage.ENGLISH


class TestSupportedLanguage:
    def test_display_names(self) -> None:
        assert SupportedLanguage.ENGLISH.display_name == "English"
        assert SupportedLanguage.SPANISH.display_name == "Español"

    def test_answer_instructions(self) -> None:
        assert SupportedLanguage.ENGLISH.answer_instruction == "Please respond in English. "
        assert SupportedLanguage.SPANISH.answer_instruction == "Por favor responde en español. "


class TestParseLanguage:
    @pytest.mark.parametrize("code", [None, "", "  "])
    def test_blank_means_detect(self, code: str | None) -> None:
        assert parse_language(code) is None

    def test_known_code(self) -> None:
        assert parse_language(" ES ") is SupportedLanguage.SPANISH

    def test_unknown_code(self) -> None:
        with pytest.raises(ValueError, match="Unsupported language"):
            parse_language("fr")
