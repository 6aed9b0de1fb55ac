import logging
import sys
from typing import TextIO


class Log:
    """Pipeline-wide logging facade.

    Records go to stderr so that command output on stdout stays parseable.
    """

    _logger: logging.Logger = logging.getLogger("iep_pipeline")

    @classmethod
    def configure(cls, log_level: str, stream: TextIO | None = None) -> None:
        """Set the level and attach a single stream handler."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(stream or sys.stderr)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(handler)

    @staticmethod
    def preview(text: str, limit: int = 100) -> str:
        """Shorten long payloads (prompts, model output) for a log line."""
        flat = text.replace("\n", " ")
        if len(flat) <= limit:
            return flat
        return f"{flat[:limit]}... ({len(text)} chars)"

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        cls._logger.info(message, extra=kwargs)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        cls._logger.error(message, extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        cls._logger.warning(message, extra=kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        cls._logger.debug(message, extra=kwargs)
