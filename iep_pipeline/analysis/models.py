from dataclasses import asdict, dataclass, field
from enum import Enum


class GoalStatus(str, Enum):
    ON_TRACK = "On Track"
    NEEDS_ATTENTION = "Needs Attention"
    BEHIND = "Behind"


@dataclass(frozen=True)
class Goal:
    """One IEP goal as summarized by the backend."""

    area: str
    description: str
    status: GoalStatus = GoalStatus.ON_TRACK
    progress_percent: int = 50


@dataclass(frozen=True)
class Service:
    """A service the plan provides (e.g. speech therapy, twice weekly)."""

    name: str
    frequency: str
    provider: str


@dataclass(frozen=True)
class AnalysisResult:
    """Structured analysis of one document. Built once, never mutated."""

    student_name: str
    summary: str
    overall_score: int
    strengths: list[str] = field(default_factory=list)
    concerns: list[str] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)
    goals: list[Goal] = field(default_factory=list)
    services: list[Service] = field(default_factory=list)

    def to_dict(self) -> dict[str, object]:
        """JSON-serializable form for storage and command output."""
        data = asdict(self)
        for goal in data["goals"]:
            goal["status"] = goal["status"].value
        return data


@dataclass(frozen=True)
class ChatMessage:
    """A single backend message (``system``, ``user`` or ``assistant``)."""

    role: str
    content: str


@dataclass(frozen=True)
class ChatTurn:
    """One earlier exchange in the question-answering conversation."""

    text: str
    is_from_user: bool

    def to_message(self) -> ChatMessage:
        return ChatMessage(role="user" if self.is_from_user else "assistant", content=self.text)
