"""Tests for the terminal driver."""

import pytest

from lessonview import cli
from lessonview.classroom import ProgressTracker
from lessonview.engine import LoadingView, UnavailableView, VideoView
from lessonview.schemas import LessonStatus, VideoItem


QUIZ_YAML = """
chapter: {id: q1, title: Quick Quiz}
content:
  type: MCQ_ANALYSIS
  mcqData:
    - {question: "1+1?", options: ["1", "2"], correctAnswer: 1, explanation: "Counting."}
    - {question: "2+2?", options: ["4", "5"], correctAnswer: 0}
"""

NOTES_YAML = """
chapter: {id: n1, title: Notes}
content: {type: NOTES_MARKDOWN, content: "# Hello"}
"""


@pytest.fixture
def lessons_dir(tmp_path):
    d = tmp_path / "lessons"
    d.mkdir()
    (d / "q1.yaml").write_text(QUIZ_YAML, encoding="utf-8")
    (d / "n1.yaml").write_text(NOTES_YAML, encoding="utf-8")
    return d


def feed_input(monkeypatch, answers):
    it = iter(answers)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(it))


class TestDescribeView:

    def test_loading(self):
        assert cli.describe_view(LoadingView()) == "Loading..."

    def test_unavailable(self):
        assert "Coming soon" in cli.describe_view(UnavailableView(title="Ch"))

    def test_video_marks_current(self):
        view = VideoView(
            title="Ch",
            items=(VideoItem(title="A", url="u1"), VideoItem(title="B", url="u2")),
            current_index=1,
        )
        text = cli.describe_view(view)
        assert " > 2. B <u2>" in text


class TestCommands:

    def test_list(self, lessons_dir, capsys):
        assert cli.main(["--lessons-dir", str(lessons_dir), "list"]) == 0
        out = capsys.readouterr().out
        assert "q1" in out and "quiz" in out
        assert "n1" in out and "markdown_notes" in out

    def test_show(self, lessons_dir, capsys):
        assert cli.main(["--lessons-dir", str(lessons_dir), "show", "n1"]) == 0
        assert "# Hello" in capsys.readouterr().out

    def test_show_unknown_chapter(self, lessons_dir, capsys):
        assert cli.main(["--lessons-dir", str(lessons_dir), "show", "zz"]) == 1

    def test_missing_lessons_dir(self, tmp_path, capsys):
        assert cli.main(["--lessons-dir", str(tmp_path / "none"), "list"]) == 1
        assert "ERROR" in capsys.readouterr().err

    def test_quiz_records_progress(self, lessons_dir, tmp_path, monkeypatch, capsys):
        db = tmp_path / "progress.db"
        feed_input(monkeypatch, ["x", "2", "2"])
        code = cli.main(["--lessons-dir", str(lessons_dir), "quiz", "q1", "--progress-db", str(db)])
        assert code == 0

        out = capsys.readouterr().out
        assert "Invalid choice." in out
        assert "Correct!" in out
        assert "Counting." in out
        assert "Wrong. Correct answer: 4" in out
        assert "Score: 1/2 (50%)" in out

        progress = ProgressTracker(db).get_lesson_progress("q1")
        assert progress.quiz_score == 1
        assert progress.quiz_total == 2

    def test_quiz_quit(self, lessons_dir, monkeypatch, capsys):
        feed_input(monkeypatch, ["q"])
        code = cli.main(["--lessons-dir", str(lessons_dir), "quiz", "q1", "--no-progress"])
        assert code == 0
        assert "Quiz abandoned." in capsys.readouterr().out

    def test_quiz_on_notes_chapter(self, lessons_dir, tmp_path, capsys):
        db = tmp_path / "progress.db"
        code = cli.main(["--lessons-dir", str(lessons_dir), "quiz", "n1", "--progress-db", str(db)])
        assert code == 1
        assert "not a quiz" in capsys.readouterr().err
        assert ProgressTracker(db).get_lesson_progress("n1").status == LessonStatus.NOT_STARTED

    def test_quiz_end_of_input(self, lessons_dir, tmp_path, monkeypatch, capsys):
        def closed_stdin(prompt=""):
            raise EOFError

        db = tmp_path / "progress.db"
        monkeypatch.setattr("builtins.input", closed_stdin)
        code = cli.main(["--lessons-dir", str(lessons_dir), "quiz", "q1", "--progress-db", str(db)])
        assert code == 0
        assert "Quiz abandoned." in capsys.readouterr().out
        assert ProgressTracker(db).get_lesson_progress("q1").quiz_score is None
