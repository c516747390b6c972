"""
LessonLoader - Load lesson files from a content directory.

Each lesson file (YAML or JSON) holds one chapter and, optionally, its
content descriptor:

    chapter:
      id: ch1
      title: Chapter 1
    content:
      type: MCQ_SIMPLE
      mcqData: [...]

A chapter without a content block is listed but renders as unavailable.
"""

import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ValidationError

from lessonview.schemas import Chapter, LessonContentDescriptor

logger = logging.getLogger(__name__)

LESSON_FILE_PATTERNS = ("*.yaml", "*.yml", "*.json")


class LessonFile(BaseModel):
    chapter: Chapter
    content: Optional[LessonContentDescriptor] = None


def load_lesson_file(path: Path) -> LessonFile:
    """
    Load and validate one lesson file.

    A chapter without an id takes the file name (without extension). A
    content block that fails validation is logged and dropped, so the
    chapter still lists and renders as unavailable.

    Args:
        path: Path to a .yaml, .yml or .json lesson file

    Returns:
        Validated LessonFile

    Raises:
        FileNotFoundError: If the file doesn't exist
        yaml.YAMLError: If parsing fails
        ValueError: If the file is not a mapping
        pydantic.ValidationError: If the chapter doesn't match the schema
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Lesson file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Lesson file must contain a mapping: {path}")

    chapter = Chapter.model_validate(data.get("chapter"))
    if not chapter.id:
        chapter = chapter.model_copy(update={"id": path.stem})

    content = None
    if data.get("content") is not None:
        try:
            content = LessonContentDescriptor.model_validate(data["content"])
        except ValidationError as e:
            logger.warning(f"Invalid content for chapter {chapter.id!r} in {path.name}: {e}")

    return LessonFile(chapter=chapter, content=content)


class LessonLoader:
    """
    Read-only access to the lessons in a directory.

    Files are re-read on every call so edits show up without a restart.
    Unreadable or invalid files are logged and skipped.
    """

    def __init__(self, lessons_dir: str | Path):
        """
        Initialize loader.

        Args:
            lessons_dir: Directory containing lesson files
        """
        self.lessons_dir = Path(lessons_dir)
        if not self.lessons_dir.is_dir():
            raise FileNotFoundError(f"Lessons directory not found: {lessons_dir}")

    def _lesson_paths(self) -> list[Path]:
        paths = set()
        for pattern in LESSON_FILE_PATTERNS:
            paths.update(self.lessons_dir.glob(pattern))
        return sorted(paths)

    def _load_all(self) -> list[LessonFile]:
        lessons = []
        for path in self._lesson_paths():
            try:
                lessons.append(load_lesson_file(path))
            except (yaml.YAMLError, ValueError) as e:
                # ValidationError is a ValueError
                logger.warning(f"Skipping invalid lesson file {path.name}: {e}")
        return lessons

    def _find(self, chapter_id: str) -> Optional[LessonFile]:
        for lesson in self._load_all():
            if lesson.chapter.id == chapter_id:
                return lesson
        return None

    # -------------------------------------------------------------------------
    # Chapters
    # -------------------------------------------------------------------------

    def list_chapters(self) -> list[Chapter]:
        """Get all chapters, ordered by file name."""
        return [lesson.chapter for lesson in self._load_all()]

    def get_chapter(self, chapter_id: str) -> Optional[Chapter]:
        lesson = self._find(chapter_id)
        return lesson.chapter if lesson else None

    def get_content(self, chapter_id: str) -> Optional[LessonContentDescriptor]:
        """Get the content descriptor for a chapter (None if it has none)."""
        lesson = self._find(chapter_id)
        return lesson.content if lesson else None

    def get_lesson(self, chapter_id: str) -> Optional[LessonFile]:
        return self._find(chapter_id)
