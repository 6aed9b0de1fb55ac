from abc import ABC, abstractmethod

from iep_pipeline.analysis.models import ChatMessage


class BaseAnalysisClient(ABC):
    """Contract for provider-specific chat completion clients."""

    @abstractmethod
    async def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        max_tokens: int,
        messages: list[ChatMessage],
    ) -> str:
        """Send one chat request and return the assistant text unparsed.

        Raises:
            AnalysisError: a subclass describing the failure.
        """
