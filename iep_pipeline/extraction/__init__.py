from iep_pipeline.extraction.exceptions import (
    CorruptedFileError,
    DocumentNotFoundError,
    DocumentProcessingError,
    EmptyDocumentError,
    ExtractionFailedError,
    FileTooLargeError,
    PermissionDeniedError,
    UnsupportedFileTypeError,
)
from iep_pipeline.extraction.models import DocumentType, ExtractedDocument

__all__ = [
    "CorruptedFileError",
    "DocumentNotFoundError",
    "DocumentProcessingError",
    "DocumentType",
    "EmptyDocumentError",
    "ExtractedDocument",
    "ExtractionFailedError",
    "FileTooLargeError",
    "PermissionDeniedError",
    "UnsupportedFileTypeError",
]
