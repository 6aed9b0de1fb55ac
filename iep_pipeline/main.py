import argparse
import asyncio
import json
import sys
from collections.abc import Sequence

from pydantic import ValidationError

from iep_pipeline.analysis.exceptions import AnalysisError, PromptLoadError
from iep_pipeline.analysis.language import SupportedLanguage, parse_language
from iep_pipeline.config.settings import Settings
from iep_pipeline.extraction.exceptions import DocumentProcessingError
from iep_pipeline.logging.logger import Log
from iep_pipeline.processor.processor import Processor, build_processor

EXIT_FAILURE = 1
EXIT_CONFIGURATION = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="iep-pipeline",
        description="Extract text from IEP/504 documents and analyze it with an AI service.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    extract = commands.add_parser("extract", help="extract normalized text from a document")
    extract.add_argument("file")
    extract.add_argument("--text", action="store_true", help="print the text instead of metadata")

    analyze = commands.add_parser("analyze", help="extract and analyze a document")
    analyze.add_argument("file")
    analyze.add_argument("--student", default=None, help="student name (guessed if omitted)")
    _add_language_option(analyze)

    ask = commands.add_parser("ask", help="ask a question about a document")
    ask.add_argument("file")
    ask.add_argument("question")
    _add_language_option(ask)
    return parser


def _add_language_option(command: argparse.ArgumentParser) -> None:
    command.add_argument(
        "--language",
        choices=[language.value for language in SupportedLanguage],
        default=None,
        help="response language (detected if omitted)",
    )


async def run(args: argparse.Namespace, processor: Processor) -> str:
    if args.command == "extract":
        document = await processor.extract(args.file)
        if args.text:
            return document.text
        return json.dumps(
            {
                "original_file_name": document.original_file_name,
                "file_type": document.file_type.value,
                "word_count": document.word_count,
                "page_count": document.page_count,
                "summary": document.summary,
            },
            indent=2,
        )
    if args.command == "analyze":
        upload = await processor.process(
            args.file,
            student_name=args.student,
            language=parse_language(args.language),
        )
        return json.dumps(upload.to_dict(), indent=2, ensure_ascii=False)
    return await processor.ask(args.file, args.question, language=parse_language(args.language))


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: load settings -> build processor -> run one command."""
    args = build_parser().parse_args(argv)
    try:
        settings = Settings()
        Log.configure(settings.log_level)
        processor = build_processor(settings)
    except (ValidationError, ValueError, PromptLoadError) as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return EXIT_CONFIGURATION

    try:
        output = asyncio.run(run(args, processor))
    except DocumentProcessingError as exc:
        print(str(exc), file=sys.stderr)
        return EXIT_FAILURE
    except AnalysisError as exc:
        print(str(exc), file=sys.stderr)
        return EXIT_FAILURE if exc.retryable else EXIT_CONFIGURATION

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
