import io

import pdfplumber

from iep_pipeline.extraction.exceptions import CorruptedFileError
from iep_pipeline.pdf.base import BasePdfExtractor, PageCallback


class PdfPlumberAdapter(BasePdfExtractor):
    """Extracts page text using pdfplumber."""

    def extract_pages(
        self,
        pdf_bytes: bytes,
        on_page: PageCallback | None = None,
    ) -> list[str]:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                total = len(pdf.pages)
                pages: list[str] = []
                for index, page in enumerate(pdf.pages):
                    pages.append(page.extract_text() or "")
                    if on_page is not None:
                        on_page(index + 1, total)
            return pages
        except Exception as exc:
            raise CorruptedFileError() from exc
