"""Format-specific readers: raw file bytes to unnormalized text.

Each reader raises the error the caller should see for its format; the
extractor picks the reader from the file extension alone.
"""

import io

from docx import Document
from striprtf.striprtf import rtf_to_text

from iep_pipeline.extraction.exceptions import (
    ExtractionFailedError,
    UnsupportedFileTypeError,
)
from iep_pipeline.extraction.models import RawText
from iep_pipeline.logging.logger import Log

_RTF_MAGIC = "{\\rtf"


def read_plain_text(data: bytes) -> RawText:
    """Decode as UTF-8, then ASCII."""
    for encoding in ("utf-8", "ascii"):
        try:
            return RawText(text=data.decode(encoding))
        except UnicodeDecodeError:
            Log.debug(f"Plain text is not valid {encoding}")
    raise ExtractionFailedError()


def read_rich_text(data: bytes) -> RawText:
    """Convert an RTF document to plain text.

    Raises:
        ExtractionFailedError: if the bytes are not RTF or cannot be parsed.
    """
    try:
        source = data.decode("utf-8")
    except UnicodeDecodeError:
        source = data.decode("latin-1")
    if not source.lstrip().startswith(_RTF_MAGIC):
        raise ExtractionFailedError()
    try:
        return RawText(text=rtf_to_text(source, errors="ignore"))
    except Exception as exc:
        raise ExtractionFailedError() from exc


def read_word_document(data: bytes) -> RawText:
    """Best-effort Word reader.

    OOXML packages (``.docx``) are read with python-docx. Anything else,
    including legacy ``.doc`` files saved as rich text, goes through the RTF
    path. Binary ``.doc`` files are not supported.

    Raises:
        UnsupportedFileTypeError: if neither path yields text.
    """
    try:
        return _read_ooxml(data)
    except Exception as exc:
        Log.debug(f"Not an OOXML package, trying rich text: {exc}")
    try:
        return read_rich_text(data)
    except ExtractionFailedError:
        raise UnsupportedFileTypeError(
            "This Word document could not be read. "
            "Please save it as PDF, DOCX, or TXT and try again."
        ) from None


def _read_ooxml(data: bytes) -> RawText:
    document = Document(io.BytesIO(data))
    lines = [paragraph.text for paragraph in document.paragraphs]
    for table in document.tables:
        for row in table.rows:
            cells = [cell.text.strip() for cell in row.cells if cell.text.strip()]
            if cells:
                lines.append(" | ".join(cells))
    return RawText(text="\n".join(lines))
