from typing import Any

import httpx
import openai

from iep_pipeline.analysis.client_base import BaseAnalysisClient
from iep_pipeline.analysis.exceptions import (
    AnalysisError,
    AnalysisNetworkError,
    ApiError,
    InvalidCredentialError,
    InvalidResponseError,
    RateLimitExceededError,
    TokenLimitExceededError,
)
from iep_pipeline.analysis.models import ChatMessage
from iep_pipeline.logging.logger import Log

_CONTEXT_LENGTH_CODE = "context_length_exceeded"


def classify_status(status_code: int, body: object = None) -> AnalysisError:
    """Map a non-200 HTTP status (and its error body, if any) to an AnalysisError."""
    if status_code == 429:
        return RateLimitExceededError()
    if 400 <= status_code <= 499:
        message, code = _error_details(body)
        if code == _CONTEXT_LENGTH_CODE:
            return TokenLimitExceededError()
        if message:
            return ApiError(message, status_code=status_code)
        return ApiError(f"Client error: {status_code}", status_code=status_code)
    if 500 <= status_code <= 599:
        return ApiError(f"Server error: {status_code}", status_code=status_code)
    return InvalidResponseError()


def _error_details(body: object) -> tuple[str | None, str | None]:
    # The SDK hands over either the full envelope or just its "error" object.
    if not isinstance(body, dict):
        return None, None
    inner = body.get("error", body)
    if not isinstance(inner, dict):
        return None, None
    message = inner.get("message")
    code = inner.get("code")
    return (
        message if isinstance(message, str) and message else None,
        code if isinstance(code, str) else None,
    )


class OpenAIClientAdapter(BaseAnalysisClient):
    """Analysis client built on the OpenAI-compatible chat completions API.

    SDK retries are disabled: every call is exactly one HTTP request.
    """

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._api_key = api_key
        self._client = openai.AsyncOpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            max_retries=0,
            http_client=http_client,
        )

    async def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        max_tokens: int,
        messages: list[ChatMessage],
    ) -> str:
        if not self._api_key.strip():
            raise InvalidCredentialError()

        try:
            raw = await self._client.chat.completions.with_raw_response.create(
                model=model,
                temperature=temperature,
                max_tokens=max_tokens,
                messages=[
                    {"role": message.role, "content": message.content}  # type: ignore[misc]
                    for message in messages
                ],
            )
        except openai.APIStatusError as exc:
            raise classify_status(exc.status_code, exc.body) from exc
        except (openai.APIConnectionError, httpx.TransportError) as exc:
            raise AnalysisNetworkError(exc) from exc
        except openai.APIError as exc:
            raise InvalidResponseError() from exc

        if raw.status_code != 200:
            raise classify_status(raw.status_code)

        try:
            completion = raw.parse()
        except ValueError:
            # Labelled as JSON but not decodable; the response parser decides.
            Log.warning("AI service returned a body that is not valid JSON")
            return raw.http_response.text
        return _message_content(completion)


def _message_content(completion: Any) -> str:
    if isinstance(completion, str):
        # Non-JSON body on a 200; the response parser decides what to make of it.
        Log.warning("AI service returned a non-JSON body")
        return completion
    choices = getattr(completion, "choices", None)
    if not choices:
        raise InvalidResponseError()
    content = choices[0].message.content
    if content is None:
        raise InvalidResponseError()
    return content
