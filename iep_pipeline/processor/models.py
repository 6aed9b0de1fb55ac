from dataclasses import dataclass

from iep_pipeline.analysis.models import AnalysisResult
from iep_pipeline.extraction.models import ExtractedDocument


@dataclass(frozen=True)
class ProcessedUpload:
    """An extracted document together with its analysis, ready to persist."""

    document: ExtractedDocument
    analysis: AnalysisResult
    used_fallback: bool = False

    def to_dict(self) -> dict[str, object]:
        return {
            "document": {
                "original_file_name": self.document.original_file_name,
                "file_size_bytes": self.document.file_size_bytes,
                "page_count": self.document.page_count,
                "word_count": self.document.word_count,
                "file_type": self.document.file_type.value,
                "processed_at": self.document.processed_at.isoformat(),
                "summary": self.document.summary,
            },
            "analysis": self.analysis.to_dict(),
            "used_fallback": self.used_fallback,
        }
