class AnalysisError(Exception):
    """Base for failures talking to the text-generation backend.

    ``str(error)`` is a user-facing sentence. ``retryable`` tells callers
    whether offering "Try again" makes sense; nothing here retries on its own.
    """

    default_message = "The document could not be analyzed. Please try again."
    retryable = True

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class InvalidCredentialError(AnalysisError):
    """Raised before any request when no backend credential is configured."""

    default_message = "The AI service key is missing or invalid. Please check your configuration."
    retryable = False


class AnalysisNetworkError(AnalysisError):
    """Transport failure or timeout; the original exception is kept as ``cause``."""

    def __init__(self, cause: BaseException) -> None:
        super().__init__(
            f"Network error: {cause}. Please check your connection and try again."
        )
        self.cause = cause


class InvalidResponseError(AnalysisError):
    default_message = "The AI service returned an invalid response. Please try again."


class ApiError(AnalysisError):
    """Non-success status from the backend, carrying its message if it sent one."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(f"AI service error: {message}")
        self.status_code = status_code


class RateLimitExceededError(AnalysisError):
    default_message = "Rate limit exceeded. Please wait a moment and try again."


class TokenLimitExceededError(AnalysisError):
    default_message = "Document too long. Please try again with a shorter document."


class PromptLoadError(AnalysisError):
    """A bundled prompt file is missing or unreadable; an installation defect."""

    retryable = False
