#!/usr/bin/env python3
"""
lessonview - Terminal driver for lesson sessions.

Lists chapters, prints the view a lesson renders to, and runs quizzes
interactively in the terminal.

Usage:
  lessonview list
  lessonview show ch1
  lessonview quiz ch1
  lessonview --lessons-dir data/lessons quiz ch1 --no-progress
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from lessonview import config
from lessonview.classroom import LessonLoader, ProgressTracker
from lessonview.engine import (
    Answer,
    DocumentView,
    LoadingView,
    MarkdownNotesView,
    QuizView,
    RichHtmlView,
    SessionOrchestrator,
    Submit,
    UnavailableView,
    VideoView,
    ViewModel,
    classify,
)
from lessonview.schemas import OptionFeedback

logger = logging.getLogger(__name__)

PREVIEW_CHARS = 200


def describe_view(view: ViewModel) -> str:
    """Plain-text summary of a view model."""
    if isinstance(view, LoadingView):
        return "Loading..."

    if isinstance(view, UnavailableView):
        return f"{view.title}\nComing soon"

    lines = [view.title]
    if view.subtitle:
        lines.append(view.subtitle)

    if isinstance(view, QuizView):
        lines.append(f"Quiz: {len(view.questions)} questions")
        for q in view.questions:
            lines.append(f"  {q.index + 1}. {q.question}")
    elif isinstance(view, VideoView):
        for idx, item in enumerate(view.items):
            marker = ">" if idx == view.current_index else " "
            lines.append(f" {marker} {idx + 1}. {item.title} <{item.url}>")
    elif isinstance(view, DocumentView):
        lines.append(f"Document ({view.document_kind.value}): {view.url}")
    elif isinstance(view, (RichHtmlView, MarkdownNotesView)):
        body = view.html if isinstance(view, RichHtmlView) else view.markdown
        preview = body[:PREVIEW_CHARS] + ("..." if len(body) > PREVIEW_CHARS else "")
        lines.append(preview)

    return "\n".join(lines)


def _prompt_option(n_options: int) -> Optional[int]:
    """Ask for an option number; None when the learner quits."""
    while True:
        try:
            raw = input(f"Answer [1-{n_options}, q to quit]: ").strip().lower()
        except (EOFError, KeyboardInterrupt):
            print()
            return None
        if raw == "q":
            return None
        if raw.isdigit() and 1 <= int(raw) <= n_options:
            return int(raw) - 1
        print("Invalid choice.")


def run_quiz(orchestrator: SessionOrchestrator) -> Optional[QuizView]:
    """
    Ask every question of the open quiz, then submit.

    Returns:
        Final QuizView, or None if the learner quit early
    """
    view = orchestrator.view
    for question in view.questions:
        print(f"\n{question.index + 1}. {question.question}")
        for idx, option in enumerate(question.options):
            print(f"   {idx + 1}) {option}")

        choice = _prompt_option(len(question.options))
        if choice is None:
            return None

        view = orchestrator.dispatch(Answer(question.index, choice))
        answered = view.questions[question.index]
        if answered.feedback[choice] == OptionFeedback.CORRECT:
            print("Correct!")
        else:
            correct = answered.feedback.index(OptionFeedback.CORRECT)
            print(f"Wrong. Correct answer: {answered.options[correct]}")
        if answered.explanation:
            print(f"   {answered.explanation}")

    view = orchestrator.dispatch(Submit())
    print(f"\nScore: {view.result.score}/{view.result.total} ({view.result.percent}%)")
    return view


# -----------------------------------------------------------------------------
# Commands
# -----------------------------------------------------------------------------

def cmd_list(loader: LessonLoader, args) -> int:
    for chapter in loader.list_chapters():
        mode = classify(loader.get_content(chapter.id), chapter)
        print(f"{chapter.id:<20} {mode.value:<16} {chapter.title}")
    return 0


def cmd_show(loader: LessonLoader, args) -> int:
    chapter = loader.get_chapter(args.chapter_id)
    if chapter is None:
        print(f"Chapter not found: {args.chapter_id}", file=sys.stderr)
        return 1
    view = SessionOrchestrator().open(loader.get_content(chapter.id), chapter)
    print(describe_view(view))
    return 0


def cmd_quiz(loader: LessonLoader, args) -> int:
    chapter = loader.get_chapter(args.chapter_id)
    if chapter is None:
        print(f"Chapter not found: {args.chapter_id}", file=sys.stderr)
        return 1

    content = loader.get_content(chapter.id)
    orchestrator = SessionOrchestrator()
    view = orchestrator.open(content, chapter)
    if not isinstance(view, QuizView):
        print(f"{chapter.title} is not a quiz ({view.kind})", file=sys.stderr)
        return 1

    if not args.no_progress:
        tracker = ProgressTracker(args.progress_db)
        tracker.start_lesson(chapter.id)
        orchestrator.on_quiz_complete = tracker.quiz_sink(chapter.id, len(view.questions))

    print(view.title)
    if run_quiz(orchestrator) is None:
        print("Quiz abandoned.")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lessonview", description="Lesson session driver")
    parser.add_argument("--lessons-dir", type=Path, default=config.LESSONS_DIR,
                        help="Directory with lesson files")
    parser.add_argument("--log-level", default=config.LOG_LEVEL,
                        help="Logging level (default: %(default)s)")

    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List chapters and their render modes")

    show = sub.add_parser("show", help="Print the view a chapter renders to")
    show.add_argument("chapter_id")

    quiz = sub.add_parser("quiz", help="Take a chapter's quiz")
    quiz.add_argument("chapter_id")
    quiz.add_argument("--progress-db", type=Path, default=None,
                      help="Progress database (default from config)")
    quiz.add_argument("--no-progress", action="store_true",
                      help="Do not record the result")

    return parser


COMMANDS = {
    "list": cmd_list,
    "show": cmd_show,
    "quiz": cmd_quiz,
}


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format=config.LOG_FORMAT,
    )

    try:
        loader = LessonLoader(args.lessons_dir)
    except FileNotFoundError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    return COMMANDS[args.command](loader, args)


if __name__ == "__main__":
    sys.exit(main())
