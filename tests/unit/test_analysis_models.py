import json

from iep_pipeline.analysis.models import (
    AnalysisResult,
    ChatMessage,
    ChatTurn,
    Goal,
    GoalStatus,
    Service,
)


def _make_result() -> AnalysisResult:
    return AnalysisResult(
        student_name="Jane Doe",
        summary="Solid plan.",
        overall_score=88,
        strengths=["Clear goals"],
        concerns=["No transition plan"],
        recommendations=["Add a transition plan"],
        goals=[Goal("Reading", "Read 90 wpm", GoalStatus.BEHIND, 20)],
        services=[Service("Speech Therapy", "Weekly", "SLP")],
    )


class TestAnalysisResult:
    def test_to_dict_uses_status_labels(self) -> None:
        data = _make_result().to_dict()
        assert data["goals"] == [
            {
                "area": "Reading",
                "description": "Read 90 wpm",
                "status": "Behind",
                "progress_percent": 20,
            }
        ]

    def test_to_dict_is_json_serializable(self) -> None:
        data = json.loads(json.dumps(_make_result().to_dict()))
        assert data["overall_score"] == 88
        assert data["services"][0]["provider"] == "SLP"

    def test_goal_defaults(self) -> None:
        goal = Goal("Math", "Add fractions")
        assert goal.status is GoalStatus.ON_TRACK
        assert goal.progress_percent == 50


class TestChatTurn:
    def test_user_turn(self) -> None:
        assert ChatTurn("Hi", True).to_message() == ChatMessage(role="user", content="Hi")

    def test_assistant_turn(self) -> None:
        message = ChatTurn("Hello!", False).to_message()
        assert message.role == "assistant"
        assert message.content == "Hello!"
