class DocumentProcessingError(Exception):
    """Base for every input defect found while extracting a document.

    ``str(error)`` is a complete sentence meant to be shown to the user as is.
    """

    default_message = "The document could not be processed."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class PermissionDeniedError(DocumentProcessingError):
    default_message = "Permission denied. Please ensure the file is accessible."


class DocumentNotFoundError(DocumentProcessingError):
    default_message = "The selected file could not be found."


class UnsupportedFileTypeError(DocumentProcessingError):
    default_message = (
        "This file type is not supported. "
        "Please select a PDF, DOC, DOCX, TXT, or RTF file."
    )


class FileTooLargeError(DocumentProcessingError):
    default_message = "File is too large. Please select a file smaller than 10MB."


class EmptyDocumentError(DocumentProcessingError):
    default_message = "The document appears to be empty or contains no readable text."


class CorruptedFileError(DocumentProcessingError):
    default_message = "The file appears to be corrupted and cannot be read."


class ExtractionFailedError(DocumentProcessingError):
    default_message = (
        "Failed to extract text from the document. Please try a different file."
    )
