import pymupdf

from iep_pipeline.extraction.exceptions import CorruptedFileError
from iep_pipeline.pdf.base import BasePdfExtractor, PageCallback


class PyMuPdfAdapter(BasePdfExtractor):
    """Extracts page text using PyMuPDF."""

    def extract_pages(
        self,
        pdf_bytes: bytes,
        on_page: PageCallback | None = None,
    ) -> list[str]:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                total = doc.page_count
                pages: list[str] = []
                for index, page in enumerate(doc):
                    pages.append(page.get_text())
                    if on_page is not None:
                        on_page(index + 1, total)
            return pages
        except Exception as exc:
            raise CorruptedFileError() from exc
