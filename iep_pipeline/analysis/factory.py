from dataclasses import dataclass
from typing import ClassVar

from iep_pipeline.analysis.analyzer import Analyzer
from iep_pipeline.analysis.client_base import BaseAnalysisClient
from iep_pipeline.analysis.example_client_adapter import ExampleClientAdapter
from iep_pipeline.analysis.openai_client_adapter import OpenAIClientAdapter
from iep_pipeline.config.settings import Settings

EXAMPLE_PROVIDER = "example"


@dataclass(frozen=True)
class ProviderConnection:
    """Everything needed to reach one chat-completions backend."""

    api_key: str
    model: str
    timeout_seconds: int
    base_url: str | None = None


class AnalyzerFactory:
    """Creates the configured analyzer.

    This is where the backend credential is resolved from settings; the
    analyzer and its client only ever receive the resolved string.
    """

    HOSTED_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> Analyzer:
        """Create an analyzer from application settings."""
        provider = settings.analysis_provider.lower()
        if provider == EXAMPLE_PROVIDER:
            client: BaseAnalysisClient = ExampleClientAdapter()
            model = EXAMPLE_PROVIDER
        else:
            connection = cls.connection_for(provider, settings)
            client = cls._openai_client(connection)
            model = connection.model
        return Analyzer(
            client=client,
            model=model,
            temperature=settings.analysis_temperature,
            analysis_max_tokens=settings.analysis_max_tokens,
            qa_max_tokens=settings.qa_max_tokens,
            history_limit=settings.qa_history_limit,
        )

    @classmethod
    def create_client(cls, provider: str, settings: Settings) -> BaseAnalysisClient:
        provider = provider.lower()
        if provider == EXAMPLE_PROVIDER:
            return ExampleClientAdapter()
        return cls._openai_client(cls.connection_for(provider, settings))

    @classmethod
    def connection_for(cls, provider: str, settings: Settings) -> ProviderConnection:
        """Resolve key, model, timeout and endpoint for an OpenAI-style provider.

        Raises:
            ValueError: for an unknown provider, or ``openai_compatible``
                without a base URL.
        """
        if provider == "openai":
            return ProviderConnection(
                api_key=settings.analysis_openai_api_key,
                model=settings.analysis_openai_model_name,
                timeout_seconds=settings.analysis_openai_timeout_seconds,
            )
        if provider == "openai_compatible":
            base_url = settings.analysis_openai_compatible_base_url.strip()
            if not base_url:
                raise ValueError(
                    "analysis_openai_compatible_base_url must be set when "
                    "analysis_provider=openai_compatible"
                )
            return ProviderConnection(
                api_key=settings.analysis_openai_compatible_api_key,
                model=settings.analysis_openai_compatible_model_name,
                timeout_seconds=settings.analysis_openai_compatible_timeout_seconds,
                base_url=base_url,
            )
        if provider in cls.HOSTED_BASE_URLS:
            return ProviderConnection(
                api_key=getattr(settings, f"analysis_{provider}_api_key"),
                model=getattr(settings, f"analysis_{provider}_model_name"),
                timeout_seconds=settings.hosted_timeout_seconds,
                base_url=cls.HOSTED_BASE_URLS[provider],
            )
        known = [EXAMPLE_PROVIDER, "openai", "openai_compatible", *sorted(cls.HOSTED_BASE_URLS)]
        raise ValueError(f"Unknown analysis provider '{provider}'. Choose from: {known}")

    @staticmethod
    def _openai_client(connection: ProviderConnection) -> OpenAIClientAdapter:
        return OpenAIClientAdapter(
            api_key=connection.api_key,
            timeout_seconds=connection.timeout_seconds,
            base_url=connection.base_url,
        )
