"""LessonView - lesson content dispatch and quiz sessions."""

__version__ = "0.1.0"
