"""AI-powered IEP document analyzer."""

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from iep_pipeline.analysis.client_base import BaseAnalysisClient
from iep_pipeline.analysis.language import SupportedLanguage, detect_language
from iep_pipeline.analysis.models import AnalysisResult, ChatMessage, ChatTurn
from iep_pipeline.analysis.prompt_loader import load_prompt
from iep_pipeline.analysis.response_parser import (
    FallbackAnalysis,
    ParseOutcome,
    parse_analysis_response,
)
from iep_pipeline.logging.logger import Log

DEFAULT_STUDENT_NAME = "Student"
DOCUMENT_CONTEXT_PREFIX = "Here is the document to analyze:\n\n"


@dataclass(frozen=True)
class _Prompts:
    analysis_system: str
    analysis_template: str
    qa_system: str


def _load_prompts(language: SupportedLanguage, prompt_dir: Path | None) -> _Prompts:
    suffix = "" if language is SupportedLanguage.ENGLISH else f"_{language.value}"
    return _Prompts(
        analysis_system=load_prompt(f"analysis_system_prompt{suffix}.txt", prompt_dir),
        analysis_template=load_prompt(f"analysis_prompt{suffix}.txt", prompt_dir),
        qa_system=load_prompt(f"qa_system_prompt{suffix}.txt", prompt_dir),
    )


class Analyzer:
    """Builds requests for the backend and interprets its answers.

    Holds no per-call state: every ``analyze`` or ``ask`` issues exactly one
    backend request and nothing is cached between calls. When no language is
    given, analyses follow the document's language and answers follow the
    question's.
    """

    def __init__(
        self,
        *,
        client: BaseAnalysisClient,
        model: str,
        temperature: float = 0.1,
        analysis_max_tokens: int = 2000,
        qa_max_tokens: int = 1000,
        history_limit: int = 10,
        prompt_dir: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(0.2, temperature))
        self._analysis_max_tokens = analysis_max_tokens
        self._qa_max_tokens = qa_max_tokens
        self._history_limit = history_limit
        self._prompts = {
            language: _load_prompts(language, prompt_dir) for language in SupportedLanguage
        }
        self._json_shape = load_prompt("analysis_shape.json", prompt_dir)
        self._in_flight = 0

    @property
    def is_busy(self) -> bool:
        return self._in_flight > 0

    async def analyze(
        self,
        text: str,
        student_name: str = DEFAULT_STUDENT_NAME,
        language: SupportedLanguage | None = None,
    ) -> AnalysisResult:
        """Analyze a document; malformed backend output degrades to defaults.

        Raises:
            AnalysisError: if the backend could not be reached or refused the request.
        """
        outcome = await self.analyze_with_outcome(text, student_name, language)
        return outcome.result

    async def analyze_with_outcome(
        self,
        text: str,
        student_name: str = DEFAULT_STUDENT_NAME,
        language: SupportedLanguage | None = None,
    ) -> ParseOutcome:
        """Like ``analyze`` but reports whether the fallback result was used."""
        name = student_name.strip() or DEFAULT_STUDENT_NAME
        language = language or detect_language(text)
        prompt = self.build_analysis_prompt(text, language)
        Log.debug(f"Analysis prompt ({language.value}):\n{prompt}")

        raw_response = await self._complete(
            [
                ChatMessage(role="system", content=self._prompts[language].analysis_system),
                ChatMessage(role="user", content=prompt),
            ],
            max_tokens=self._analysis_max_tokens,
        )
        Log.debug(f"AI raw response ({len(raw_response)} chars): {Log.preview(raw_response)}")

        outcome = parse_analysis_response(raw_response, name, language)
        if isinstance(outcome, FallbackAnalysis):
            Log.warning(f"Analysis for {name} used the fallback result: {outcome.reason}")
        else:
            Log.info(
                f"Analysis complete for {name} in {language.display_name}: "
                f"score {outcome.result.overall_score}, "
                f"{len(outcome.result.goals)} goals, {len(outcome.result.services)} services"
            )
        return outcome

    async def ask(
        self,
        question: str,
        document_text: str,
        history: Sequence[ChatTurn] = (),
        language: SupportedLanguage | None = None,
    ) -> str:
        """Answer a follow-up question about a document in free text.

        Only the most recent ``history_limit`` turns are sent.
        """
        messages = self.build_question_messages(question, document_text, history, language)
        answer = await self._complete(messages, max_tokens=self._qa_max_tokens)
        Log.info(f"Answered question ({len(answer)} chars)")
        return answer

    def build_analysis_prompt(
        self,
        text: str,
        language: SupportedLanguage = SupportedLanguage.ENGLISH,
    ) -> str:
        return self._prompts[language].analysis_template.format(
            json_shape=self._json_shape, document_text=text
        )

    def build_question_messages(
        self,
        question: str,
        document_text: str,
        history: Sequence[ChatTurn] = (),
        language: SupportedLanguage | None = None,
    ) -> list[ChatMessage]:
        language = language or detect_language(question)
        recent = list(history)[-self._history_limit :] if self._history_limit > 0 else []
        return [
            ChatMessage(role="system", content=self._prompts[language].qa_system),
            ChatMessage(role="user", content=f"{DOCUMENT_CONTEXT_PREFIX}{document_text}"),
            *(turn.to_message() for turn in recent),
            ChatMessage(role="user", content=f"{language.answer_instruction}{question}"),
        ]

    async def _complete(self, messages: list[ChatMessage], *, max_tokens: int) -> str:
        self._in_flight += 1
        try:
            return await self._client.create_chat_completion(
                model=self._model,
                temperature=self._temperature,
                max_tokens=max_tokens,
                messages=messages,
            )
        except Exception as exc:
            Log.error(f"AI request failed: {exc}")
            raise
        finally:
            self._in_flight -= 1
