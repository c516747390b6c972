"""
LessonView - Lesson viewer

Streamlit application that renders one lesson at a time: quizzes, video
playlists, documents and notes.

Usage:
    streamlit run app.py
"""

import logging

import streamlit as st
import streamlit.components.v1 as components

from lessonview import config
from lessonview.classroom import LessonLoader, ProgressTracker
from lessonview.engine import (
    Answer,
    Back,
    DocumentView,
    LoadingView,
    MarkdownNotesView,
    QuizView,
    RichHtmlView,
    SelectVideo,
    SessionOrchestrator,
    Submit,
    UnavailableView,
    VideoEnded,
    VideoView,
)
from lessonview.schemas import LessonStatus
from lessonview.viewer import (
    get_quiz_css,
    render_document,
    render_question_review,
    render_quiz_score,
)


# -----------------------------------------------------------------------------
# Configuration
# -----------------------------------------------------------------------------

logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL, logging.INFO),
    format=config.LOG_FORMAT,
)

st.set_page_config(
    page_title="LessonView",
    page_icon="📘",
    layout="wide",
    initial_sidebar_state="expanded",
)


# -----------------------------------------------------------------------------
# Session State Initialization
# -----------------------------------------------------------------------------

def init_session_state():
    """Initialize session state variables."""
    if "loader" not in st.session_state:
        if config.LESSONS_DIR.is_dir():
            st.session_state.loader = LessonLoader(config.LESSONS_DIR)
        else:
            st.session_state.loader = None

    if "progress" not in st.session_state:
        st.session_state.progress = ProgressTracker()

    if "orchestrator" not in st.session_state:
        st.session_state.orchestrator = SessionOrchestrator(strict_indices=False)

    if "current_chapter_id" not in st.session_state:
        st.session_state.current_chapter_id = None


def go_back():
    """Navigation callback: leave the current lesson."""
    st.session_state.current_chapter_id = None


def select_chapter(chapter_id: str):
    """Open a chapter in a fresh session."""
    loader = st.session_state.loader
    progress = st.session_state.progress

    chapter = loader.get_chapter(chapter_id)
    if chapter is None:
        st.error(f"Chapter not found: {chapter_id}")
        return

    content = loader.get_content(chapter_id)

    total = len(content.questions) if content else 0
    orchestrator = SessionOrchestrator(
        on_quiz_complete=progress.quiz_sink(chapter_id, total),
        on_back=go_back,
        strict_indices=False,
    )
    orchestrator.open(content, chapter)
    progress.start_lesson(chapter_id)

    st.session_state.orchestrator = orchestrator
    st.session_state.current_chapter_id = chapter_id
    st.rerun()


def dispatch(action):
    st.session_state.orchestrator.dispatch(action)
    st.rerun()


# -----------------------------------------------------------------------------
# Sidebar: Chapter List
# -----------------------------------------------------------------------------

def render_sidebar():
    """Render the sidebar with chapter list and progress."""
    st.sidebar.title("📘 LessonView")

    loader = st.session_state.loader
    if not loader:
        st.sidebar.error(f"Lessons directory not found: {config.LESSONS_DIR}")
        return

    chapters = loader.list_chapters()
    progress = st.session_state.progress
    stats = progress.get_completion_stats(len(chapters))
    st.sidebar.markdown(
        f"**Progress:** {stats['completed']}/{stats['total_chapters']} chapters "
        f"({stats['completion_percent']}%)"
    )
    st.sidebar.progress(stats['completion_percent'] / 100)
    st.sidebar.divider()

    completed = progress.get_completed_chapter_ids()
    for chapter in chapters:
        indicator = "✓" if chapter.id in completed else "○"
        if st.sidebar.button(
            f"{indicator} {chapter.title}",
            key=f"chapter_{chapter.id}",
            use_container_width=True,
        ):
            select_chapter(chapter.id)


# -----------------------------------------------------------------------------
# Main Content: Lesson View
# -----------------------------------------------------------------------------

def render_back_button(label: str = "← Back"):
    if st.button(label, key="back"):
        dispatch(Back())


def render_quiz_view(view: QuizView):
    """Render a quiz with option buttons, live score and submit."""
    st.markdown(get_quiz_css(), unsafe_allow_html=True)
    result = view.result
    st.caption(f"Answered {result.answered_count}/{result.total} · Score {result.score}")

    for question in view.questions:
        if question.locked:
            st.markdown(render_question_review(question), unsafe_allow_html=True)
            continue

        st.markdown(f"**{question.index + 1}. {question.question}**")
        for idx, option in enumerate(question.options):
            if st.button(option, key=f"q{question.index}_o{idx}", use_container_width=True):
                dispatch(Answer(question.index, idx))

    if view.finished:
        st.markdown(render_quiz_score(result), unsafe_allow_html=True)
        render_back_button("Close")
    elif st.button("Submit", type="primary"):
        dispatch(Submit())


def render_video_view(view: VideoView):
    """Render the current video and the playlist."""
    render_back_button()
    st.subheader(view.current.title)
    st.video(view.current.url)

    if view.has_next and st.button("Next video →"):
        dispatch(VideoEnded())

    if view.show_playlist:
        cols = st.columns(min(len(view.items), 4))
        for idx, item in enumerate(view.items):
            with cols[idx % len(cols)]:
                label = f"▶ {item.title}"
                if st.button(label, key=f"video_{idx}", disabled=idx == view.current_index,
                             use_container_width=True):
                    dispatch(SelectVideo(idx))


def render_lesson_view():
    """Render the main lesson content."""
    if not st.session_state.loader:
        st.error("Lessons directory not found. Set LESSONVIEW_LESSONS_DIR.")
        return

    chapter_id = st.session_state.current_chapter_id
    view = st.session_state.orchestrator.view
    if not chapter_id:
        st.info("Select a chapter from the sidebar to begin.")
        return

    if isinstance(view, LoadingView):
        st.info("Loading lesson...")
        return

    if isinstance(view, UnavailableView):
        st.title(view.title)
        st.warning("Coming soon")
        render_back_button("Go Back")
        return

    st.title(view.title)
    if view.subtitle:
        st.caption(view.subtitle)

    if isinstance(view, QuizView):
        render_quiz_view(view)
    elif isinstance(view, VideoView):
        render_video_view(view)
    elif isinstance(view, DocumentView):
        render_back_button()
        if view.embeddable:
            components.html(render_document(view), height=820)
        else:
            st.markdown(render_document(view), unsafe_allow_html=True)
    elif isinstance(view, RichHtmlView):
        st.markdown(view.html, unsafe_allow_html=True)
        render_back_button("Close")
    elif isinstance(view, MarkdownNotesView):
        st.markdown(view.markdown)
        render_back_button("Close")

    render_completion_status(chapter_id)


def render_completion_status(chapter_id: str):
    lesson_progress = st.session_state.progress.get_lesson_progress(chapter_id)
    if lesson_progress.status == LessonStatus.COMPLETED and lesson_progress.quiz_total:
        st.divider()
        st.success(f"Best score: {lesson_progress.quiz_score}/{lesson_progress.quiz_total}")


# -----------------------------------------------------------------------------
# Main App
# -----------------------------------------------------------------------------

def main():
    """Main application entry point."""
    init_session_state()
    render_sidebar()
    render_lesson_view()


if __name__ == "__main__":
    main()
