import pytest

from iep_pipeline.extraction.exceptions import CorruptedFileError
from iep_pipeline.pdf.pymupdf_adapter import PyMuPdfAdapter


class TestPyMuPdfAdapter:
    def test_extract_returns_text(self, sample_pdf_bytes: bytes) -> None:
        result = PyMuPdfAdapter().extract(sample_pdf_bytes)
        assert "Hello PDF World" in result.text
        assert result.page_count == 1

    def test_extract_multi_page(self, multi_page_pdf_bytes: bytes) -> None:
        result = PyMuPdfAdapter().extract(multi_page_pdf_bytes)
        assert "Page one content" in result.text
        assert "Page two content" in result.text
        assert result.page_count == 2

    def test_invalid_bytes_raise_corrupted(self) -> None:
        with pytest.raises(CorruptedFileError):
            PyMuPdfAdapter().extract(b"not a pdf")
