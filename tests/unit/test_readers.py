import pytest

from iep_pipeline.extraction.exceptions import (
    ExtractionFailedError,
    UnsupportedFileTypeError,
)
from iep_pipeline.extraction.readers import (
    read_plain_text,
    read_rich_text,
    read_word_document,
)


class TestReadPlainText:
    def test_decodes_utf8(self) -> None:
        assert read_plain_text("café notes".encode("utf-8")).text == "café notes"

    def test_decodes_ascii(self) -> None:
        assert read_plain_text(b"plain notes").text == "plain notes"

    def test_undecodable_bytes_raise(self) -> None:
        with pytest.raises(ExtractionFailedError):
            read_plain_text(b"\xff\xfe\xfa broken")

    def test_has_no_page_count(self) -> None:
        assert read_plain_text(b"x").page_count is None


class TestReadRichText:
    def test_converts_rtf_to_plain_text(self, rtf_bytes: bytes) -> None:
        words = read_rich_text(rtf_bytes).text.split()
        assert words == ["Hello", "bold", "world"]

    def test_non_rtf_content_raises(self) -> None:
        with pytest.raises(ExtractionFailedError):
            read_rich_text(b"just some text")


class TestReadWordDocument:
    def test_reads_docx_paragraphs(self, docx_bytes: bytes) -> None:
        text = read_word_document(docx_bytes).text
        assert "Annual IEP Review" in text
        assert "Goal: improve reading fluency" in text

    def test_reads_docx_tables(self, docx_bytes: bytes) -> None:
        assert "Speech Therapy | Weekly" in read_word_document(docx_bytes).text

    def test_falls_back_to_rich_text(self, rtf_bytes: bytes) -> None:
        assert "Hello" in read_word_document(rtf_bytes).text

    def test_binary_word_document_is_unsupported(self) -> None:
        legacy = b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1" + b"\x00" * 64
        with pytest.raises(UnsupportedFileTypeError):
            read_word_document(legacy)
