import re
from dataclasses import dataclass

from iep_pipeline.extraction.exceptions import EmptyDocumentError

_EXCESS_NEWLINES = re.compile(r"\n{3,}")
_EXCESS_SPACES = re.compile(r" {2,}")


@dataclass(frozen=True)
class CleanText:
    text: str
    word_count: int
    truncated: bool = False


def normalize_text(text: str, max_word_count: int) -> CleanText:
    """Normalize extracted text the same way for every source format.

    Line endings become ``\\n``, runs of three or more newlines collapse to a
    blank line and runs of spaces collapse to one. Text longer than
    ``max_word_count`` whitespace-delimited tokens is cut to the first
    ``max_word_count`` tokens joined by single spaces; this loses the
    original line structure.

    Raises:
        EmptyDocumentError: if nothing but whitespace remains.
    """
    cleaned = text.replace("\x00", "").replace("\r\n", "\n").replace("\r", "\n").strip()
    if not cleaned:
        raise EmptyDocumentError()

    cleaned = _EXCESS_NEWLINES.sub("\n\n", cleaned)
    cleaned = _EXCESS_SPACES.sub(" ", cleaned)

    words = cleaned.split()
    if len(words) > max_word_count:
        return CleanText(
            text=" ".join(words[:max_word_count]),
            word_count=max_word_count,
            truncated=True,
        )
    return CleanText(text=cleaned, word_count=len(words))
