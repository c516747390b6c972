"""
LessonView Classroom - Collaborators around the session engine.

This module provides:
- LessonLoader: Load chapters and content descriptors from lesson files
- ProgressTracker: Record learner progress and quiz results
"""

from .loader import (
    LessonLoader,
    LessonFile,
    load_lesson_file,
    LESSON_FILE_PATTERNS,
)

from .progress import (
    ProgressTracker,
)

__all__ = [
    # Loader
    "LessonLoader",
    "LessonFile",
    "load_lesson_file",
    "LESSON_FILE_PATTERNS",
    # Progress
    "ProgressTracker",
]
