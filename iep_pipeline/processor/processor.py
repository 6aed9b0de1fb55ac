from collections.abc import Sequence
from pathlib import Path

from iep_pipeline.analysis.analyzer import Analyzer
from iep_pipeline.analysis.factory import AnalyzerFactory
from iep_pipeline.analysis.language import SupportedLanguage
from iep_pipeline.analysis.models import ChatTurn
from iep_pipeline.analysis.response_parser import FallbackAnalysis
from iep_pipeline.config.settings import Settings
from iep_pipeline.extraction.extractor import DocumentExtractor, ProgressCallback
from iep_pipeline.extraction.file_loader import FileLoader
from iep_pipeline.extraction.models import ExtractedDocument
from iep_pipeline.extraction.student_name import guess_student_name
from iep_pipeline.logging.logger import Log
from iep_pipeline.pdf.factory import PdfExtractorFactory
from iep_pipeline.processor.models import ProcessedUpload


class Processor:
    """Runs one upload through the pipeline.

    Pipeline: extract -> analyze. Errors from either stage propagate unchanged.
    """

    def __init__(self, extractor: DocumentExtractor, analyzer: Analyzer) -> None:
        self._extractor = extractor
        self._analyzer = analyzer

    async def extract(
        self,
        path: Path | str,
        progress: ProgressCallback | None = None,
    ) -> ExtractedDocument:
        return await self._extractor.extract(path, progress)

    async def process(
        self,
        path: Path | str,
        student_name: str | None = None,
        progress: ProgressCallback | None = None,
        language: SupportedLanguage | None = None,
    ) -> ProcessedUpload:
        """Extract ``path`` and analyze its text.

        When ``student_name`` is not given it is guessed from the text and
        file name. When ``language`` is not given it is detected from the
        text.
        """
        document = await self._extractor.extract(path, progress)
        name = student_name or guess_student_name(document.text, document.original_file_name)
        Log.info(f"Analyzing {document.original_file_name} for {name}")

        outcome = await self._analyzer.analyze_with_outcome(document.text, name, language=language)
        return ProcessedUpload(
            document=document,
            analysis=outcome.result,
            used_fallback=isinstance(outcome, FallbackAnalysis),
        )

    async def ask(
        self,
        path: Path | str,
        question: str,
        history: Sequence[ChatTurn] = (),
        language: SupportedLanguage | None = None,
    ) -> str:
        document = await self._extractor.extract(path)
        return await self._analyzer.ask(question, document.text, history, language=language)


def build_extractor(settings: Settings) -> DocumentExtractor:
    return DocumentExtractor(
        pdf_extractor=PdfExtractorFactory.create(settings),
        file_loader=FileLoader(settings.max_file_size_bytes),
        max_word_count=settings.max_word_count,
    )


def build_processor(settings: Settings) -> Processor:
    """Build a Processor with all required adapters."""
    return Processor(
        extractor=build_extractor(settings),
        analyzer=AnalyzerFactory.create(settings),
    )
