import io
import logging

from iep_pipeline.logging.logger import Log


class TestPreview:
    def test_short_text_is_unchanged(self) -> None:
        assert Log.preview("a\nb") == "a b"

    def test_long_text_is_shortened(self) -> None:
        text = "x" * 150
        assert Log.preview(text, limit=10) == "xxxxxxxxxx... (150 chars)"


class TestConfigure:
    def test_writes_to_given_stream(self) -> None:
        logger = logging.getLogger("iep_pipeline")
        saved_handlers, saved_level = logger.handlers[:], logger.level
        logger.handlers.clear()
        stream = io.StringIO()
        try:
            Log.configure("debug", stream=stream)
            Log.debug("hello from the pipeline")
            assert logger.level == logging.DEBUG
            assert "[DEBUG] hello from the pipeline" in stream.getvalue()
        finally:
            logger.handlers[:] = saved_handlers
            logger.setLevel(saved_level)
