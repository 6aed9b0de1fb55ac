from iep_pipeline.extraction.student_name import guess_student_name


class TestGuessStudentName:
    def test_student_label(self) -> None:
        assert guess_student_name("Student: Jane Doe\nGoal: read", "plan.pdf") == "Jane Doe"

    def test_name_label_without_colon(self) -> None:
        assert guess_student_name("Name Sam Lee was evaluated", "plan.pdf") == "Sam Lee"

    def test_child_label(self) -> None:
        assert guess_student_name("Child: Ana", "plan.pdf") == "Ana"

    def test_does_not_span_lines(self) -> None:
        assert guess_student_name("Student: Jane\nGoal: x", "plan.pdf") == "Jane"

    def test_falls_back_to_file_name(self) -> None:
        assert guess_student_name("no labels here", "iep_Marcus_2025.pdf") == "Marcus"

    def test_default(self) -> None:
        assert guess_student_name("nothing", "scan-01.pdf") == "Student"
