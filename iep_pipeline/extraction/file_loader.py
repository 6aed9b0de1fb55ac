import os
import stat
from pathlib import Path

from iep_pipeline.extraction.exceptions import (
    DocumentNotFoundError,
    FileTooLargeError,
    PermissionDeniedError,
)

DEFAULT_MAX_FILE_SIZE_BYTES = 10 * 1024 * 1024


class FileLoader:
    """Checks that a local file may be read and reads its bytes."""

    def __init__(self, max_file_size_bytes: int = DEFAULT_MAX_FILE_SIZE_BYTES) -> None:
        self._max_file_size_bytes = max_file_size_bytes

    def check_access(self, path: Path) -> os.stat_result:
        """Stat ``path``, failing on permission problems before existence.

        Raises:
            PermissionDeniedError: if the file or a parent directory cannot be read.
            DocumentNotFoundError: if nothing (or not a regular file) is at ``path``.
        """
        try:
            info = path.stat()
        except PermissionError as exc:
            raise PermissionDeniedError() from exc
        except (FileNotFoundError, NotADirectoryError) as exc:
            raise DocumentNotFoundError() from exc
        if not stat.S_ISREG(info.st_mode):
            raise DocumentNotFoundError()
        if not os.access(path, os.R_OK):
            raise PermissionDeniedError()
        return info

    def check_size(self, info: os.stat_result) -> None:
        """Raises:
            FileTooLargeError: if the file is bigger than the configured limit.
        """
        if info.st_size > self._max_file_size_bytes:
            limit_mb = self._max_file_size_bytes // (1024 * 1024)
            raise FileTooLargeError(
                f"File is too large. Please select a file smaller than {limit_mb}MB."
            )

    def read(self, path: Path) -> bytes:
        """Read the whole file; the handle never outlives this call."""
        try:
            with path.open("rb") as handle:
                return handle.read()
        except PermissionError as exc:
            raise PermissionDeniedError() from exc
        except FileNotFoundError as exc:
            raise DocumentNotFoundError() from exc
