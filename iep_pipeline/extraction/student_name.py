"""Caller-side helper for picking a student name to pass to the analyzer.

The analysis step never guesses names itself; this is a convenience for
front ends that have nothing better than the document and its file name.
"""

import re
from pathlib import Path

DEFAULT_STUDENT_NAME = "Student"

_NAME_PATTERNS = [
    re.compile(rf"{label}:?[ \t]*([A-Z][a-z]+(?:[ \t]+[A-Z][a-z]+)*)")
    for label in ("Student", "Name", "Child")
]


def guess_student_name(text: str, file_name: str) -> str:
    """Return the first labelled name in ``text``, else a capitalized
    file-name token, else ``"Student"``."""
    for pattern in _NAME_PATTERNS:
        match = pattern.search(text)
        if match:
            name = match.group(1).strip()
            if 1 < len(name) < 50:
                return name

    stem = Path(file_name).stem.replace("_", " ").replace("-", " ")
    for token in stem.split(" "):
        if len(token) > 2 and token[0].isupper():
            return token
    return DEFAULT_STUDENT_NAME
