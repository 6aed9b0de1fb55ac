"""Document extraction: file path in, normalized ``ExtractedDocument`` out."""

import asyncio
from collections.abc import Callable
from datetime import datetime, timezone
from pathlib import Path

from iep_pipeline.extraction.exceptions import (
    DocumentProcessingError,
    ExtractionFailedError,
)
from iep_pipeline.extraction.file_loader import DEFAULT_MAX_FILE_SIZE_BYTES, FileLoader
from iep_pipeline.extraction.models import DocumentType, ExtractedDocument, RawText
from iep_pipeline.extraction.readers import (
    read_plain_text,
    read_rich_text,
    read_word_document,
)
from iep_pipeline.extraction.text_cleaner import normalize_text
from iep_pipeline.logging.logger import Log
from iep_pipeline.pdf.base import BasePdfExtractor

ProgressCallback = Callable[[float], None]

DEFAULT_MAX_WORD_COUNT = 50_000


class _Progress:
    """Forwards non-decreasing fractions in [0.0, 1.0] to an optional observer."""

    def __init__(self, callback: ProgressCallback | None) -> None:
        self._callback = callback
        self._value = 0.0

    def __call__(self, value: float) -> None:
        value = max(self._value, min(1.0, value))
        self._value = value
        if self._callback is not None:
            self._callback(value)

    def page_done(self, done: int, total: int) -> None:
        if total:
            self(0.3 + done / total * 0.4)


class DocumentExtractor:
    """Turns a local file into an ``ExtractedDocument`` or a typed error.

    Checks run in a fixed order: access, existence, extension, size. The
    reader is chosen from the extension only. File reading and parsing run
    in a worker thread, so ``extract`` can be awaited and cancelled by the
    caller; a cancelled call produces no document.

    The progress callback may be invoked from that worker thread.
    """

    def __init__(
        self,
        pdf_extractor: BasePdfExtractor,
        file_loader: FileLoader | None = None,
        max_word_count: int = DEFAULT_MAX_WORD_COUNT,
    ) -> None:
        self._pdf_extractor = pdf_extractor
        self._file_loader = file_loader or FileLoader(DEFAULT_MAX_FILE_SIZE_BYTES)
        self._max_word_count = max_word_count
        self._in_flight = 0

    @property
    def is_processing(self) -> bool:
        return self._in_flight > 0

    async def extract(
        self,
        path: Path | str,
        progress: ProgressCallback | None = None,
    ) -> ExtractedDocument:
        path = Path(path)
        report = _Progress(progress)
        self._in_flight += 1
        try:
            document = await self._extract(path, report)
        except DocumentProcessingError as exc:
            Log.error(f"Extraction of {path.name} failed: {exc}")
            raise
        except Exception as exc:
            Log.error(f"Unexpected error extracting {path.name}: {exc!r}")
            raise ExtractionFailedError() from exc
        finally:
            self._in_flight -= 1

        Log.info(f"Extracted {path.name}: {document.summary}")
        return document

    async def _extract(self, path: Path, report: _Progress) -> ExtractedDocument:
        report(0.1)
        info = self._file_loader.check_access(path)

        report(0.2)
        file_type = DocumentType.from_extension(path.suffix)
        self._file_loader.check_size(info)

        report(0.3)
        raw = await asyncio.to_thread(self._read_and_extract, path, file_type, report)

        report(0.7)
        clean = normalize_text(raw.text, self._max_word_count)
        if clean.truncated:
            Log.warning(
                f"{path.name} exceeds {self._max_word_count} words; "
                "text truncated to the first "
                f"{self._max_word_count} words"
            )

        report(0.9)
        document = ExtractedDocument(
            original_file_name=path.name,
            file_size_bytes=info.st_size,
            page_count=raw.page_count,
            text=clean.text,
            word_count=clean.word_count,
            processed_at=datetime.now(timezone.utc),
            file_type=file_type,
        )
        report(1.0)
        return document

    def _read_and_extract(
        self,
        path: Path,
        file_type: DocumentType,
        report: _Progress,
    ) -> RawText:
        data = self._file_loader.read(path)
        Log.debug(f"Read {len(data)} bytes from {path.name} as {file_type.value}")
        if file_type is DocumentType.PDF:
            return self._pdf_extractor.extract(data, on_page=report.page_done)
        if file_type is DocumentType.TXT:
            return read_plain_text(data)
        if file_type is DocumentType.RTF:
            return read_rich_text(data)
        # DOC and DOCX
        return read_word_document(data)
