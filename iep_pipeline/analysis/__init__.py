from iep_pipeline.analysis.analyzer import Analyzer
from iep_pipeline.analysis.factory import AnalyzerFactory
from iep_pipeline.analysis.language import SupportedLanguage, detect_language
from iep_pipeline.analysis.models import AnalysisResult, ChatTurn, Goal, GoalStatus, Service

__all__ = [
    "AnalysisResult",
    "Analyzer",
    "AnalyzerFactory",
    "ChatTurn",
    "Goal",
    "GoalStatus",
    "Service",
    "SupportedLanguage",
    "detect_language",
]
