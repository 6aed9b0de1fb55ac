from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Pipeline configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    pdf_engine: str = "pdfplumber"
    max_file_size_bytes: int = 10 * 1024 * 1024
    max_word_count: int = 50_000

    analysis_provider: str = "openai"
    analysis_temperature: float = 0.1
    analysis_max_tokens: int = 2000
    qa_max_tokens: int = 1000
    qa_history_limit: int = 10

    analysis_openai_api_key: str = ""
    analysis_openai_model_name: str = "gpt-4o-mini"
    analysis_openai_timeout_seconds: int = 30

    analysis_openai_compatible_base_url: str = ""
    analysis_openai_compatible_api_key: str = ""
    analysis_openai_compatible_model_name: str = ""
    analysis_openai_compatible_timeout_seconds: int = 30

    analysis_openrouter_api_key: str = ""
    analysis_openrouter_model_name: str = "openai/gpt-4o-mini"
    analysis_groq_api_key: str = ""
    analysis_groq_model_name: str = "llama-3.1-8b-instant"
    analysis_together_api_key: str = ""
    analysis_together_model_name: str = ""
    analysis_deepseek_api_key: str = ""
    analysis_deepseek_model_name: str = "deepseek-chat"
    analysis_ollama_api_key: str = "ollama"
    analysis_ollama_model_name: str = "llama3.1"

    hosted_timeout_seconds: int = 30
