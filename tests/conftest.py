import io
import json
from pathlib import Path

import pytest
from docx import Document
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Hello PDF World")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Page one content")
    c.showPage()
    c.drawString(72, 720, "Page two content")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def docx_bytes() -> bytes:
    """Generate a DOCX with two paragraphs and a services table."""
    document = Document()
    document.add_paragraph("Annual IEP Review")
    document.add_paragraph("Goal: improve reading fluency")
    table = document.add_table(rows=1, cols=2)
    table.rows[0].cells[0].text = "Speech Therapy"
    table.rows[0].cells[1].text = "Weekly"
    buf = io.BytesIO()
    document.save(buf)
    return buf.getvalue()


@pytest.fixture()
def rtf_bytes() -> bytes:
    return b"{\\rtf1\\ansi\\deff0 Hello \\b bold\\b0 world\\par}"


@pytest.fixture()
def write_file(tmp_path: Path):  # type: ignore[no-untyped-def]
    """Write bytes or text under tmp_path and return the path."""

    def _write(name: str, content: bytes | str) -> Path:
        path = tmp_path / name
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_bytes(content)
        return path

    return _write


@pytest.fixture()
def analysis_json():  # type: ignore[no-untyped-def]
    """Factory for a well-formed backend analysis payload with field overrides."""

    def _make(omit: tuple[str, ...] = (), **overrides: object) -> str:
        payload: dict[str, object] = {
            "summary": "Solid plan with measurable goals.",
            "overallScore": 88,
            "strengths": ["Clear goals"],
            "concerns": ["No transition plan"],
            "recommendations": ["Add a transition plan"],
            "goals": [
                {
                    "area": "Reading",
                    "goal": "Read 90 wpm",
                    "status": "Needs Attention",
                    "progress": 40,
                }
            ],
            "services": [
                {"service": "Speech Therapy", "frequency": "2x weekly", "provider": "SLP"}
            ],
        }
        payload.update(overrides)
        for key in omit:
            payload.pop(key, None)
        return json.dumps(payload)

    return _make


@pytest.fixture()
def completion_body():  # type: ignore[no-untyped-def]
    """Factory for a chat completions response body carrying ``content``."""

    def _make(content: str | None) -> dict[str, object]:
        return {
            "id": "chatcmpl-test",
            "object": "chat.completion",
            "created": 0,
            "model": "test-model",
            "choices": [
                {
                    "index": 0,
                    "message": {"role": "assistant", "content": content},
                    "finish_reason": "stop",
                }
            ],
        }

    return _make
