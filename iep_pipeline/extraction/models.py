from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from iep_pipeline.extraction.exceptions import UnsupportedFileTypeError


class DocumentType(str, Enum):
    """Closed set of formats the extractor dispatches on, keyed by extension."""

    PDF = "pdf"
    DOCX = "docx"
    DOC = "doc"
    TXT = "txt"
    RTF = "rtf"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @classmethod
    def from_extension(cls, extension: str) -> "DocumentType":
        """Resolve ``"PDF"``, ``".pdf"`` or ``"pdf"`` to a member.

        Raises:
            UnsupportedFileTypeError: for anything outside the closed set.
        """
        normalized = extension.lower().lstrip(".")
        try:
            return cls(normalized)
        except ValueError:
            raise UnsupportedFileTypeError() from None

    @classmethod
    def supported_extensions(cls) -> list[str]:
        return [member.value for member in cls]

    @classmethod
    def supported_extensions_display(cls) -> str:
        return ", ".join(f".{ext}" for ext in cls.supported_extensions())


_DISPLAY_NAMES: dict[DocumentType, str] = {
    DocumentType.PDF: "PDF",
    DocumentType.DOCX: "Word Document",
    DocumentType.DOC: "Word Document (Legacy)",
    DocumentType.TXT: "Text File",
    DocumentType.RTF: "Rich Text",
}


@dataclass(frozen=True)
class RawText:
    """Format reader output, before normalization."""

    text: str
    page_count: int | None = None


@dataclass(frozen=True)
class ExtractedDocument:
    """Normalized plain text of one uploaded file.

    ``word_count`` always equals the number of whitespace-delimited tokens in
    ``text`` and never exceeds the configured cap (50,000 by default).
    """

    original_file_name: str
    file_size_bytes: int
    text: str
    word_count: int
    processed_at: datetime
    file_type: DocumentType
    page_count: int | None = None

    @property
    def summary(self) -> str:
        """Short label such as ``"400 words • 3 pages • PDF"``."""
        parts = [f"{self.word_count} words"]
        if self.page_count is not None:
            unit = "page" if self.page_count == 1 else "pages"
            parts.append(f"{self.page_count} {unit}")
        parts.append(self.file_type.display_name)
        return " • ".join(parts)
