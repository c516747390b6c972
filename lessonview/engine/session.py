"""
Session orchestrator - One lesson view from open to back.

Wires the classifier to the mode-specific state (quiz engine or playlist
cursor), applies learner actions in order and exposes the current view
model. All mutation goes through dispatch().
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Union

from lessonview import config
from lessonview.errors import EmptyPlaylist, InvalidIndex
from lessonview.schemas import (
    Chapter,
    LessonContentDescriptor,
    RenderMode,
    VideoItem,
)

from .classifier import ClassifiedContent, classify_content
from .playlist import PlaylistCursor, resolve_playlist
from .quiz import QuizEngine
from .views import (
    DocumentView,
    LoadingView,
    MarkdownNotesView,
    QuestionView,
    QuizView,
    RichHtmlView,
    UnavailableView,
    VideoView,
    ViewModel,
)

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Actions
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Answer:
    question: int
    option: int


@dataclass(frozen=True)
class Submit:
    pass


@dataclass(frozen=True)
class SelectVideo:
    index: int


@dataclass(frozen=True)
class VideoEnded:
    """The video widget reports the current item finished playing."""


@dataclass(frozen=True)
class Back:
    pass


Action = Union[Answer, Submit, SelectVideo, VideoEnded, Back]


# -----------------------------------------------------------------------------
# Orchestrator
# -----------------------------------------------------------------------------

class SessionOrchestrator:
    """
    Facade over classification, quiz state and playlist state.

    Each open() starts a fresh session; nothing carries over from a previous
    lesson or a previous open() of the same lesson.
    """

    def __init__(
        self,
        on_quiz_complete: Optional[Callable[[int], None]] = None,
        on_back: Optional[Callable[[], None]] = None,
        strict_indices: Optional[bool] = None,
    ):
        """
        Initialize orchestrator.

        Args:
            on_quiz_complete: Completion sink, called once per quiz session
                with the final score
            on_back: Navigation callback for the Back action
            strict_indices: Raise InvalidIndex on bad answer/video indices
                (default from config); when False they are logged and ignored
        """
        self.on_quiz_complete = on_quiz_complete
        self.on_back = on_back
        self.strict_indices = config.STRICT_INDICES if strict_indices is None else strict_indices
        self._reset()

    def _reset(self):
        self._descriptor: Optional[LessonContentDescriptor] = None
        self._chapter: Optional[Chapter] = None
        self._mode: Optional[RenderMode] = None
        self._classified: Optional[ClassifiedContent] = None
        self._quiz: Optional[QuizEngine] = None
        self._playlist: list[VideoItem] = []
        self._cursor: Optional[PlaylistCursor] = None
        self._view: ViewModel = LoadingView()

    @property
    def view(self) -> ViewModel:
        return self._view

    @property
    def mode(self) -> Optional[RenderMode]:
        """Render mode of the open lesson, None while loading."""
        return self._mode

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def loading(self) -> ViewModel:
        """Show the loading state while the content source is busy."""
        self._reset()
        return self._view

    def open(
        self,
        descriptor: Optional[LessonContentDescriptor],
        chapter: Optional[Chapter] = None,
    ) -> ViewModel:
        """
        Start a session for a lesson.

        Args:
            descriptor: Lesson content, or None if the source has none
            chapter: Chapter metadata, if known

        Returns:
            Initial view model
        """
        self._reset()
        self._descriptor = descriptor
        self._chapter = chapter
        self._classified = classify_content(descriptor, chapter)
        lesson = repr(chapter.id) if chapter else "(no chapter)"
        self._mode = self._classified.mode

        if self._mode == RenderMode.QUIZ:
            self._quiz = QuizEngine(
                self._classified.questions,
                on_complete=self._emit_completion,
                strict=self.strict_indices,
            )
        elif self._mode == RenderMode.VIDEO:
            try:
                self._playlist = resolve_playlist(descriptor, chapter)
                self._cursor = PlaylistCursor(len(self._playlist))
            except EmptyPlaylist as e:
                logger.warning(f"Video lesson {lesson} unavailable: {e}")
                self._mode = RenderMode.UNAVAILABLE
        elif self._mode == RenderMode.DOCUMENT and not self._classified.document_url:
            logger.warning(f"Document lesson {lesson} has no URL")
            self._mode = RenderMode.UNAVAILABLE

        logger.info(f"Opened lesson {lesson} as {self._mode.value}")
        self._view = self._build_view()
        return self._view

    def _emit_completion(self, score: int):
        if self.on_quiz_complete is not None:
            self.on_quiz_complete(score)

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def dispatch(self, action: Action) -> ViewModel:
        """
        Apply a learner action and return the updated view model.

        Actions that do not apply to the open lesson are ignored.

        Raises:
            InvalidIndex: For out-of-range indices (strict mode only)
            TypeError: For objects that are not actions
        """
        if isinstance(action, Back):
            return self._back()

        if isinstance(action, (Answer, Submit)):
            if self._quiz is None:
                return self._ignore(action)
            if isinstance(action, Answer):
                self._quiz.answer(action.question, action.option)
            else:
                self._quiz.submit()

        elif isinstance(action, (SelectVideo, VideoEnded)):
            if self._cursor is None:
                return self._ignore(action)
            if isinstance(action, SelectVideo):
                self._select_video(action.index)
            else:
                self._cursor.advance()

        else:
            raise TypeError(f"Unknown action: {action!r}")

        self._view = self._build_view()
        return self._view

    def _select_video(self, index: int):
        try:
            self._cursor.select(index)
        except InvalidIndex as e:
            if self.strict_indices:
                raise
            logger.warning(f"Ignoring video selection: {e}")

    def _ignore(self, action: Action) -> ViewModel:
        logger.debug(f"Ignoring {type(action).__name__} in mode {self._mode}")
        return self._view

    def _back(self) -> ViewModel:
        self._reset()
        if self.on_back is not None:
            self.on_back()
        return self._view

    # -------------------------------------------------------------------------
    # View building
    # -------------------------------------------------------------------------

    def _build_view(self) -> ViewModel:
        if self._mode is None:
            return LoadingView()

        title = self._chapter.title if self._chapter else ""
        if self._mode == RenderMode.UNAVAILABLE:
            return UnavailableView(title=title)

        subtitle = self._descriptor.subtitle

        if self._mode == RenderMode.QUIZ:
            return self._build_quiz_view(title, subtitle)

        if self._mode == RenderMode.VIDEO:
            return VideoView(
                title=title,
                items=tuple(self._playlist),
                current_index=self._cursor.index,
                subtitle=subtitle,
            )

        if self._mode == RenderMode.DOCUMENT:
            return DocumentView(
                title=title,
                url=self._classified.document_url,
                document_kind=self._classified.document_kind,
                subtitle=subtitle,
            )

        if self._mode == RenderMode.RICH_HTML:
            return RichHtmlView(title=title, html=self._classified.body, subtitle=subtitle)

        return MarkdownNotesView(title=title, markdown=self._classified.body, subtitle=subtitle)

    def _build_quiz_view(self, title: str, subtitle: Optional[str]) -> QuizView:
        quiz = self._quiz
        questions = []
        for review, question in zip(quiz.reviews(), quiz.questions):
            questions.append(QuestionView(
                index=review.index,
                question=question.question,
                options=tuple(question.options),
                selected=review.selected,
                locked=review.selected is not None or quiz.finished,
                feedback=tuple(review.feedback),
                explanation=review.explanation,
            ))
        return QuizView(
            title=title,
            questions=tuple(questions),
            result=quiz.result(),
            subtitle=subtitle,
        )
