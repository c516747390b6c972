"""
LessonView Engine - Content dispatch and quiz session state.

This module provides:
- classify / classify_content: render mode for a lesson
- resolve_playlist / PlaylistCursor: video playlist handling
- QuizEngine: write-once answers, scoring, exactly-once completion
- SessionOrchestrator: actions in, view models out
"""

from .classifier import (
    ClassifiedContent,
    classify,
    classify_content,
    classify_document_url,
    normalize_document_url,
    is_video_url,
    is_document_host,
    DOCUMENT_HOSTS,
    VIDEO_EXTENSIONS,
)

from .playlist import (
    resolve_playlist,
    PlaylistCursor,
)

from .quiz import (
    QuizEngine,
    clean_explanation,
    EXPLANATION_PLACEHOLDER,
)

from .views import (
    LoadingView,
    UnavailableView,
    QuestionView,
    QuizView,
    VideoView,
    DocumentView,
    RichHtmlView,
    MarkdownNotesView,
    ViewModel,
)

from .session import (
    SessionOrchestrator,
    Action,
    Answer,
    Submit,
    SelectVideo,
    VideoEnded,
    Back,
)

__all__ = [
    # Classifier
    "ClassifiedContent",
    "classify",
    "classify_content",
    "classify_document_url",
    "normalize_document_url",
    "is_video_url",
    "is_document_host",
    "DOCUMENT_HOSTS",
    "VIDEO_EXTENSIONS",
    # Playlist
    "resolve_playlist",
    "PlaylistCursor",
    # Quiz
    "QuizEngine",
    "clean_explanation",
    "EXPLANATION_PLACEHOLDER",
    # Views
    "LoadingView",
    "UnavailableView",
    "QuestionView",
    "QuizView",
    "VideoView",
    "DocumentView",
    "RichHtmlView",
    "MarkdownNotesView",
    "ViewModel",
    # Session
    "SessionOrchestrator",
    "Action",
    "Answer",
    "Submit",
    "SelectVideo",
    "VideoEnded",
    "Back",
]
