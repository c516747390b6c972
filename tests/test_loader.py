"""Tests for loading lesson files."""

import json

import pytest
from pydantic import ValidationError

from lessonview.classroom import LessonLoader, load_lesson_file
from lessonview.engine import SessionOrchestrator, UnavailableView
from lessonview.schemas import ContentTypeTag


QUIZ_YAML = """
chapter:
  id: quiz-1
  title: First Quiz
content:
  type: MCQ_SIMPLE
  mcqData:
    - question: Pick b
      options: [a, b]
      correctAnswer: 1
"""

NOTES_YAML = """
chapter:
  title: Notes Only
content:
  type: NOTES_MARKDOWN
  content: "# Heading"
"""

EMPTY_YAML = """
chapter:
  id: later
  title: Later
"""


@pytest.fixture
def lessons_dir(tmp_path):
    (tmp_path / "01_quiz.yaml").write_text(QUIZ_YAML, encoding="utf-8")
    (tmp_path / "02_notes.yml").write_text(NOTES_YAML, encoding="utf-8")
    (tmp_path / "03_later.yaml").write_text(EMPTY_YAML, encoding="utf-8")
    (tmp_path / "04_video.json").write_text(json.dumps({
        "chapter": {"id": "vid", "title": "Video"},
        "content": {"type": "VIDEO_LECTURE", "content": "https://youtu.be/x"},
    }), encoding="utf-8")
    (tmp_path / "README.txt").write_text("not a lesson", encoding="utf-8")
    return tmp_path


class TestLoadLessonFile:

    def test_load_yaml(self, lessons_dir):
        lesson = load_lesson_file(lessons_dir / "01_quiz.yaml")
        assert lesson.chapter.id == "quiz-1"
        assert lesson.content.type == ContentTypeTag.MCQ_SIMPLE
        assert lesson.content.questions[0].correct_answer == 1

    def test_chapter_id_defaults_to_file_name(self, lessons_dir):
        lesson = load_lesson_file(lessons_dir / "02_notes.yml")
        assert lesson.chapter.id == "02_notes"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_lesson_file(tmp_path / "nope.yaml")

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ValueError):
            load_lesson_file(path)

    def test_invalid_content_keeps_chapter(self, tmp_path, caplog):
        path = tmp_path / "bad.yaml"
        path.write_text(QUIZ_YAML.replace("correctAnswer: 1", "correctAnswer: 5"), encoding="utf-8")
        with caplog.at_level("WARNING"):
            lesson = load_lesson_file(path)
        assert lesson.chapter.id == "quiz-1"
        assert lesson.content is None
        assert "quiz-1" in caplog.text

    def test_invalid_chapter(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("chapter: {id: x}\n", encoding="utf-8")
        with pytest.raises(ValidationError):
            load_lesson_file(path)


class TestLessonLoader:

    def test_missing_directory(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            LessonLoader(tmp_path / "missing")

    def test_list_chapters_ordered(self, lessons_dir):
        loader = LessonLoader(lessons_dir)
        assert [c.id for c in loader.list_chapters()] == ["quiz-1", "02_notes", "later", "vid"]

    def test_get_content(self, lessons_dir):
        loader = LessonLoader(lessons_dir)
        assert loader.get_content("vid").type == ContentTypeTag.VIDEO_LECTURE
        assert loader.get_chapter("vid").title == "Video"

    def test_chapter_without_content(self, lessons_dir):
        loader = LessonLoader(lessons_dir)
        assert loader.get_chapter("later") is not None
        assert loader.get_content("later") is None

    def test_unknown_chapter(self, lessons_dir):
        loader = LessonLoader(lessons_dir)
        assert loader.get_chapter("nope") is None
        assert loader.get_content("nope") is None
        assert loader.get_lesson("nope") is None

    def test_invalid_files_skipped(self, lessons_dir, caplog):
        (lessons_dir / "00_broken.yaml").write_text("chapter: [unclosed", encoding="utf-8")
        (lessons_dir / "05_invalid.yaml").write_text("content: {type: PDF_FREE}\n", encoding="utf-8")
        loader = LessonLoader(lessons_dir)
        with caplog.at_level("WARNING"):
            ids = [c.id for c in loader.list_chapters()]
        assert ids == ["quiz-1", "02_notes", "later", "vid"]
        assert "00_broken.yaml" in caplog.text
        assert "05_invalid.yaml" in caplog.text

    def test_chapter_with_invalid_content_is_unavailable(self, lessons_dir):
        (lessons_dir / "05_badq.yaml").write_text(
            QUIZ_YAML.replace("quiz-1", "badq").replace("correctAnswer: 1", "correctAnswer: 5"),
            encoding="utf-8",
        )
        loader = LessonLoader(lessons_dir)
        assert "badq" in [c.id for c in loader.list_chapters()]
        assert loader.get_content("badq") is None

        chapter = loader.get_chapter("badq")
        view = SessionOrchestrator().open(loader.get_content("badq"), chapter)
        assert isinstance(view, UnavailableView)
        assert view.title == "First Quiz"
