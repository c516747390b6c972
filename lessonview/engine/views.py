"""
View models - What the presentation layer renders from.

One view class per render mode, plus LoadingView. Views carry only the
data their branch needs, never the raw content descriptor, and are frozen
so a renderer cannot fake quiz state.
"""

from dataclasses import dataclass
from typing import ClassVar, Optional, Union

from lessonview.schemas import (
    DocumentKind,
    OptionFeedback,
    QuizSessionResult,
    RenderMode,
    VideoItem,
)

LOADING = "loading"


@dataclass(frozen=True)
class LoadingView:
    kind: ClassVar[str] = LOADING


@dataclass(frozen=True)
class UnavailableView:
    """Lesson is missing or coming soon."""
    kind: ClassVar[str] = RenderMode.UNAVAILABLE.value
    title: str = ""


@dataclass(frozen=True)
class QuestionView:
    index: int
    question: str
    options: tuple[str, ...]
    selected: Optional[int]
    locked: bool  # answered, or quiz finished
    feedback: tuple[OptionFeedback, ...]
    explanation: Optional[str] = None


@dataclass(frozen=True)
class QuizView:
    kind: ClassVar[str] = RenderMode.QUIZ.value
    title: str
    questions: tuple[QuestionView, ...]
    result: QuizSessionResult
    subtitle: Optional[str] = None

    @property
    def finished(self) -> bool:
        return self.result.finished


@dataclass(frozen=True)
class VideoView:
    kind: ClassVar[str] = RenderMode.VIDEO.value
    title: str
    items: tuple[VideoItem, ...]
    current_index: int
    subtitle: Optional[str] = None

    @property
    def current(self) -> VideoItem:
        return self.items[self.current_index]

    @property
    def show_playlist(self) -> bool:
        return len(self.items) > 1

    @property
    def has_next(self) -> bool:
        return self.current_index < len(self.items) - 1


@dataclass(frozen=True)
class DocumentView:
    kind: ClassVar[str] = RenderMode.DOCUMENT.value
    title: str
    url: str
    document_kind: DocumentKind
    subtitle: Optional[str] = None

    @property
    def embeddable(self) -> bool:
        return self.document_kind == DocumentKind.EMBEDDABLE


@dataclass(frozen=True)
class RichHtmlView:
    kind: ClassVar[str] = RenderMode.RICH_HTML.value
    title: str
    html: str  # unsanitized; the renderer sanitizes
    subtitle: Optional[str] = None


@dataclass(frozen=True)
class MarkdownNotesView:
    kind: ClassVar[str] = RenderMode.MARKDOWN_NOTES.value
    title: str
    markdown: str
    subtitle: Optional[str] = None


ViewModel = Union[
    LoadingView,
    UnavailableView,
    QuizView,
    VideoView,
    DocumentView,
    RichHtmlView,
    MarkdownNotesView,
]
