import pytest
from pydantic import ValidationError

from iep_pipeline.config.settings import Settings


class TestSettingsDefaults:
    def test_default_app_env(self) -> None:
        assert Settings().app_env == "dev"

    def test_default_pdf_engine(self) -> None:
        assert Settings().pdf_engine == "pdfplumber"

    def test_default_limits(self) -> None:
        s = Settings()
        assert s.max_file_size_bytes == 10 * 1024 * 1024
        assert s.max_word_count == 50_000

    def test_default_analysis_request(self) -> None:
        s = Settings()
        assert s.analysis_provider == "openai"
        assert s.analysis_temperature == 0.1
        assert s.analysis_max_tokens == 2000
        assert s.qa_max_tokens == 1000
        assert s.qa_history_limit == 10

    def test_default_openai_timeout(self) -> None:
        assert Settings().analysis_openai_timeout_seconds == 30


class TestSettingsFromEnv:
    def test_loads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        assert Settings().log_level == "DEBUG"

    def test_loads_provider(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ANALYSIS_PROVIDER", "example")
        assert Settings().analysis_provider == "example"

    def test_loads_api_key(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ANALYSIS_OPENAI_API_KEY", "sk-test")
        assert Settings().analysis_openai_api_key == "sk-test"

    def test_loads_max_word_count(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MAX_WORD_COUNT", "100")
        assert Settings().max_word_count == 100


class TestSettingsValidation:
    def test_invalid_max_file_size_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MAX_FILE_SIZE_BYTES", "ten megabytes")
        with pytest.raises(ValidationError):
            Settings()

    def test_invalid_temperature_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ANALYSIS_TEMPERATURE", "cold")
        with pytest.raises(ValidationError):
            Settings()
