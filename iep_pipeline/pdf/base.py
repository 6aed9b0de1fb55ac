from abc import ABC, abstractmethod
from collections.abc import Callable

from iep_pipeline.extraction.exceptions import EmptyDocumentError
from iep_pipeline.extraction.models import RawText

PageCallback = Callable[[int, int], None]

PAGE_SEPARATOR = "\n\n"


class BasePdfExtractor(ABC):
    """Contract for all PDF text extraction engines."""

    @abstractmethod
    def extract_pages(
        self,
        pdf_bytes: bytes,
        on_page: PageCallback | None = None,
    ) -> list[str]:
        """Return the text of every page, in order.

        Args:
            pdf_bytes: Raw PDF file content.
            on_page: Called with ``(pages_done, page_total)`` after each page.

        Raises:
            CorruptedFileError: if the bytes cannot be opened as a PDF.
        """

    def extract(self, pdf_bytes: bytes, on_page: PageCallback | None = None) -> RawText:
        pages = self.extract_pages(pdf_bytes, on_page)
        if not pages:
            raise EmptyDocumentError("The PDF has no pages.")
        text = PAGE_SEPARATOR.join(page for page in pages if page)
        return RawText(text=text.strip(), page_count=len(pages))
