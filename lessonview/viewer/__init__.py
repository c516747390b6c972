"""
LessonView Viewer - HTML fragments for view models.

This module provides:
- Quiz option feedback and score display
- Document frame or outbound link markup
"""

from .quiz import (
    get_quiz_css,
    render_option,
    render_question_review,
    render_quiz_score,
    FEEDBACK_CLASSES,
)

from .media import (
    render_document,
)

__all__ = [
    # Quiz
    "get_quiz_css",
    "render_option",
    "render_question_review",
    "render_quiz_score",
    "FEEDBACK_CLASSES",
    # Media
    "render_document",
]
