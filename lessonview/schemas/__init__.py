"""
LessonView Schemas - Pydantic models for lesson rendering and quiz sessions.

This module exports all schema classes for:
- Content: content type tags, questions, videos, chapter, descriptor
- Modes: render modes and document kinds
- Quiz: session state, score summary, answer review
- Progress: learner progress tracking
"""

# Content schemas
from .content import (
    ContentTypeTag,
    McqQuestion,
    VideoItem,
    Chapter,
    LessonContentDescriptor,
    MCQ_TAGS,
    DOCUMENT_TAGS,
    HTML_NOTES_TAGS,
)

# Render modes
from .modes import (
    RenderMode,
    DocumentKind,
)

# Quiz schemas
from .quiz import (
    QuizState,
    QuizSessionResult,
    OptionFeedback,
    QuestionReview,
)

# Progress schemas
from .progress import (
    LessonStatus,
    LessonProgress,
)

__all__ = [
    # Content
    'ContentTypeTag',
    'McqQuestion',
    'VideoItem',
    'Chapter',
    'LessonContentDescriptor',
    'MCQ_TAGS',
    'DOCUMENT_TAGS',
    'HTML_NOTES_TAGS',
    # Modes
    'RenderMode',
    'DocumentKind',
    # Quiz
    'QuizState',
    'QuizSessionResult',
    'OptionFeedback',
    'QuestionReview',
    # Progress
    'LessonStatus',
    'LessonProgress',
]
