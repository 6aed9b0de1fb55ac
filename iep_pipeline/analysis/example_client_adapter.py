"""Offline analysis client.

Use this module as a reference when implementing new provider adapters.
Implement BaseAnalysisClient and register the provider in AnalyzerFactory.
"""

import json
from typing import ClassVar

from iep_pipeline.analysis.client_base import BaseAnalysisClient
from iep_pipeline.analysis.models import ChatMessage


class ExampleClientAdapter(BaseAnalysisClient):
    """Answers every request with the same canned text, without a network call.

    Needs no credential. Useful for local runs of the command line tool and
    for exercising the parser end to end.
    """

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "summary": "Example analysis produced without contacting an AI service.",
        "overallScore": 80,
        "strengths": ["Goals are written in measurable terms"],
        "concerns": ["Progress reporting schedule is not stated"],
        "recommendations": ["Ask the team how progress will be reported"],
        "goals": [
            {
                "area": "Academic",
                "goal": "Improve reading fluency",
                "status": "On Track",
                "progress": 60,
            }
        ],
        "services": [
            {"service": "Speech Therapy", "frequency": "Weekly", "provider": "SLP"}
        ],
    }

    def __init__(self, response: str | None = None) -> None:
        self._response = response if response is not None else json.dumps(self.DEFAULT_RESPONSE)
        self.requests: list[list[ChatMessage]] = []

    async def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        max_tokens: int,
        messages: list[ChatMessage],
    ) -> str:
        _ = model, temperature, max_tokens
        self.requests.append(list(messages))
        return self._response
