"""
Lesson content schemas for LessonView.

Defines Pydantic models for the content a lesson view receives:
- Content type tags (closed set with a markdown fallback)
- Multiple-choice questions
- Video playlist items
- Chapter metadata and the lesson content descriptor
"""

import logging
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

logger = logging.getLogger(__name__)


class ContentTypeTag(str, Enum):
    MCQ_SIMPLE = "MCQ_SIMPLE"
    MCQ_ANALYSIS = "MCQ_ANALYSIS"
    VIDEO_LECTURE = "VIDEO_LECTURE"
    PDF_VIEWER = "PDF_VIEWER"
    PDF_FREE = "PDF_FREE"
    PDF_PREMIUM = "PDF_PREMIUM"
    PDF_ULTRA = "PDF_ULTRA"
    NOTES_HTML_FREE = "NOTES_HTML_FREE"
    NOTES_HTML_PREMIUM = "NOTES_HTML_PREMIUM"
    NOTES_MARKDOWN = "NOTES_MARKDOWN"

    @classmethod
    def parse(cls, value: Any) -> "ContentTypeTag":
        """
        Parse a raw tag, falling back to NOTES_MARKDOWN.

        Unknown or missing tags are not errors: a lesson with a tag this
        version does not know about still renders as notes.
        """
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.NOTES_MARKDOWN
        key = str(value).strip().upper()
        try:
            return cls(key)
        except ValueError:
            logger.debug(f"Unknown content tag {value!r}, rendering as {cls.NOTES_MARKDOWN.value}")
            return cls.NOTES_MARKDOWN


MCQ_TAGS = frozenset({ContentTypeTag.MCQ_SIMPLE, ContentTypeTag.MCQ_ANALYSIS})
DOCUMENT_TAGS = frozenset({
    ContentTypeTag.PDF_VIEWER,
    ContentTypeTag.PDF_FREE,
    ContentTypeTag.PDF_PREMIUM,
    ContentTypeTag.PDF_ULTRA,
})
HTML_NOTES_TAGS = frozenset({ContentTypeTag.NOTES_HTML_FREE, ContentTypeTag.NOTES_HTML_PREMIUM})


# -----------------------------------------------------------------------------
# Content items
# -----------------------------------------------------------------------------

class McqQuestion(BaseModel):
    """Multiple-choice question; correct_answer indexes into options."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    question: str
    options: list[str] = Field(..., min_length=2)
    correct_answer: int = Field(..., ge=0, alias="correctAnswer")
    explanation: Optional[str] = None

    @model_validator(mode="after")
    def correct_answer_in_range(self):
        if self.correct_answer >= len(self.options):
            raise ValueError(
                f"correct_answer {self.correct_answer} out of range for {len(self.options)} options"
            )
        return self


class VideoItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    url: str


class Chapter(BaseModel):
    """Chapter metadata supplied alongside the lesson content."""
    model_config = ConfigDict(frozen=True)

    id: str = ""
    title: str


# -----------------------------------------------------------------------------
# Lesson content descriptor
# -----------------------------------------------------------------------------

class LessonContentDescriptor(BaseModel):
    """
    What to render for one lesson.

    Accepts the camelCase field names used on the wire (mcqData,
    videoPlaylist, isComingSoon) as well as the snake_case attribute names.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: ContentTypeTag = ContentTypeTag.NOTES_MARKDOWN
    content: str = ""
    mcq_data: Optional[list[McqQuestion]] = Field(default=None, alias="mcqData")
    video_playlist: Optional[list[VideoItem]] = Field(default=None, alias="videoPlaylist")
    is_coming_soon: bool = Field(default=False, alias="isComingSoon")
    subtitle: Optional[str] = None

    @field_validator("type", mode="before")
    @classmethod
    def coerce_type(cls, v):
        return ContentTypeTag.parse(v)

    @field_validator("content", mode="before")
    @classmethod
    def content_not_none(cls, v):
        return "" if v is None else v

    @property
    def questions(self) -> list[McqQuestion]:
        return list(self.mcq_data or [])
