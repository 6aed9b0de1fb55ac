"""Turns free-text backend output into an ``AnalysisResult``.

The backend is asked for a single JSON object but nothing enforces it, so
parsing never fails outright:

1. The text between the first ``{`` and the last ``}`` is decoded; prose
   around it is ignored.
2. Each field is read on its own into a ``PartialAnalysis``; a missing or
   wrong-typed field is left unset instead of rejecting the whole object.
3. ``apply_defaults`` fills every unset field from ``FIELD_DEFAULTS``.

If step 1 fails the caller gets ``fallback_analysis()`` instead. Both paths
are returned as a ``ParseOutcome`` so callers can tell them apart.
"""

import json
from dataclasses import dataclass
from typing import Any

from iep_pipeline.analysis.language import SupportedLanguage
from iep_pipeline.analysis.models import AnalysisResult, Goal, GoalStatus, Service
from iep_pipeline.logging.logger import Log

DEFAULT_SUMMARY = "Analysis completed successfully."
DEFAULT_OVERALL_SCORE = 75
DEFAULT_GOAL_PROGRESS = 50

FIELD_DEFAULTS: dict[str, list[str]] = {
    "strengths": ["Document structure is clear"],
    "concerns": ["Some areas may need additional detail"],
    "recommendations": ["Continue current approach", "Monitor progress regularly"],
}


@dataclass(frozen=True)
class PartialAnalysis:
    """Fields read from the backend JSON; ``None`` means absent or unusable."""

    summary: str | None = None
    overall_score: int | None = None
    strengths: list[str] | None = None
    concerns: list[str] | None = None
    recommendations: list[str] | None = None
    goals: list[Goal] | None = None
    services: list[Service] | None = None


@dataclass(frozen=True)
class ParsedAnalysis:
    result: AnalysisResult


@dataclass(frozen=True)
class FallbackAnalysis:
    result: AnalysisResult
    reason: str


ParseOutcome = ParsedAnalysis | FallbackAnalysis


def parse_analysis_response(
    raw: str,
    student_name: str,
    language: SupportedLanguage = SupportedLanguage.ENGLISH,
) -> ParseOutcome:
    """Parse backend output; never raises for malformed content.

    ``language`` only selects the fallback wording; per-field defaults are
    always English.
    """
    data, reason = _decode_object(raw)
    if data is None:
        Log.warning(f"Falling back to generic analysis: {reason}")
        Log.debug(f"Unparsable AI response: {Log.preview(raw, 500)}")
        return FallbackAnalysis(result=fallback_analysis(student_name, language), reason=reason)
    return ParsedAnalysis(result=apply_defaults(read_partial(data), student_name))


def extract_json_object(raw: str) -> str | None:
    """Return the slice from the first ``{`` to the last ``}``, if both exist."""
    text = raw.strip()
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end == -1 or end < start:
        return None
    return text[start : end + 1]


def _decode_object(raw: str) -> tuple[dict[str, Any] | None, str]:
    candidate = extract_json_object(raw)
    if candidate is None:
        return None, "no JSON object braces in response"
    try:
        data = json.loads(candidate)
    except json.JSONDecodeError as exc:
        return None, f"invalid JSON: {exc}"
    if not isinstance(data, dict):
        return None, "JSON response is not an object"
    return data, ""


def read_partial(data: dict[str, Any]) -> PartialAnalysis:
    return PartialAnalysis(
        summary=_read_string(data.get("summary")),
        overall_score=_read_int(data.get("overallScore")),
        strengths=_read_string_list(data.get("strengths")),
        concerns=_read_string_list(data.get("concerns")),
        recommendations=_read_string_list(data.get("recommendations")),
        goals=_read_goals(data.get("goals")),
        services=_read_services(data.get("services")),
    )


def apply_defaults(partial: PartialAnalysis, student_name: str) -> AnalysisResult:
    """The one place where unset fields get their default values."""
    return AnalysisResult(
        student_name=student_name,
        summary=partial.summary if partial.summary is not None else DEFAULT_SUMMARY,
        overall_score=(
            partial.overall_score
            if partial.overall_score is not None
            else DEFAULT_OVERALL_SCORE
        ),
        strengths=partial.strengths or list(FIELD_DEFAULTS["strengths"]),
        concerns=partial.concerns or list(FIELD_DEFAULTS["concerns"]),
        recommendations=partial.recommendations or list(FIELD_DEFAULTS["recommendations"]),
        goals=partial.goals or [],
        services=partial.services or [],
    )


def fallback_analysis(
    student_name: str,
    language: SupportedLanguage = SupportedLanguage.ENGLISH,
) -> AnalysisResult:
    """Complete generic result used when the response cannot be decoded at all."""
    text = _FALLBACK_TEXT[language]
    return AnalysisResult(
        student_name=student_name,
        summary=text["summary"],
        overall_score=DEFAULT_OVERALL_SCORE,
        strengths=list(text["strengths"]),
        concerns=list(text["concerns"]),
        recommendations=list(text["recommendations"]),
        goals=[
            Goal(
                area="General",
                description=text["goal"],
                status=GoalStatus.ON_TRACK,
                progress_percent=DEFAULT_OVERALL_SCORE,
            )
        ],
        services=[
            Service(name=text["service"], frequency=text["frequency"], provider=text["provider"])
        ],
    )


_FALLBACK_TEXT: dict[SupportedLanguage, dict[str, Any]] = {
    SupportedLanguage.ENGLISH: {
        "summary": (
            "Document analysis completed. The document has been processed and "
            "key information has been extracted for review."
        ),
        "strengths": [
            "Document successfully uploaded and processed",
            "Content is accessible for analysis",
            "Structure allows for meaningful review",
        ],
        "concerns": [
            "Some details may require additional clarification",
            "Further review recommended for specific sections",
        ],
        "recommendations": [
            "Review analysis results carefully",
            "Use the Q&A feature to ask specific questions",
            "Consider discussing findings with your IEP team",
            "Monitor implementation of suggested improvements",
        ],
        "goal": "Document review and analysis",
        "service": "Document Analysis",
        "frequency": "As needed",
        "provider": "AI Assistant",
    },
    SupportedLanguage.SPANISH: {
        "summary": (
            "Análisis del documento completado. El documento ha sido procesado y "
            "la información clave ha sido extraída para revisión."
        ),
        "strengths": [
            "Documento cargado y procesado exitosamente",
            "El contenido es accesible para análisis",
            "La estructura permite una revisión significativa",
        ],
        "concerns": [
            "Algunos detalles pueden requerir clarificación adicional",
            "Se recomienda revisión adicional para secciones específicas",
        ],
        "recommendations": [
            "Revisar los resultados del análisis cuidadosamente",
            "Usar la función de preguntas y respuestas para hacer preguntas específicas",
            "Considerar discutir los hallazgos con su equipo de IEP",
            "Monitorear la implementación de mejoras sugeridas",
        ],
        "goal": "Revisión y análisis del documento",
        "service": "Análisis de Documento",
        "frequency": "Según sea necesario",
        "provider": "Asistente de IA",
    },
}


def _read_string(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _read_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def _read_string_list(value: Any) -> list[str] | None:
    if not isinstance(value, list):
        return None
    if not all(isinstance(item, str) for item in value):
        return None
    return list(value)


def _read_goals(value: Any) -> list[Goal] | None:
    if not isinstance(value, list):
        return None
    goals = []
    for item in value:
        goal = _read_goal(item)
        if goal is not None:
            goals.append(goal)
    return goals


def _read_goal(item: Any) -> Goal | None:
    if not isinstance(item, dict):
        return None
    area = _read_string(item.get("area"))
    description = _read_string(item.get("goal"))
    if area is None or description is None:
        return None
    progress = _read_int(item.get("progress"))
    return Goal(
        area=area,
        description=description,
        status=_read_status(item.get("status")),
        progress_percent=progress if progress is not None else DEFAULT_GOAL_PROGRESS,
    )


def _read_status(value: Any) -> GoalStatus:
    if isinstance(value, str):
        wanted = value.strip().casefold()
        for status in GoalStatus:
            if status.value.casefold() == wanted:
                return status
    return GoalStatus.ON_TRACK


def _read_services(value: Any) -> list[Service] | None:
    if not isinstance(value, list):
        return None
    services = []
    for item in value:
        if not isinstance(item, dict):
            continue
        name = _read_string(item.get("service"))
        frequency = _read_string(item.get("frequency"))
        provider = _read_string(item.get("provider"))
        if name is None or frequency is None or provider is None:
            continue
        services.append(Service(name=name, frequency=frequency, provider=provider))
    return services
