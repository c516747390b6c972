"""Tests for the SQLite progress tracker."""

import pytest

from lessonview.classroom import ProgressTracker
from lessonview.engine import Answer, SessionOrchestrator, Submit
from lessonview.schemas import LessonStatus


@pytest.fixture
def tracker(tmp_path):
    return ProgressTracker(tmp_path / "nested" / "progress.db")


class TestProgressTracker:

    def test_creates_database(self, tmp_path):
        path = tmp_path / "a" / "b" / "progress.db"
        ProgressTracker(path)
        assert path.exists()

    def test_unknown_chapter_not_started(self, tracker):
        progress = tracker.get_lesson_progress("ch1")
        assert progress.status == LessonStatus.NOT_STARTED
        assert progress.quiz_score is None

    def test_start_lesson(self, tracker):
        tracker.start_lesson("ch1")
        progress = tracker.get_lesson_progress("ch1")
        assert progress.status == LessonStatus.IN_PROGRESS
        assert progress.started_at is not None

    def test_record_quiz_result(self, tracker):
        tracker.start_lesson("ch1")
        tracker.record_quiz_result("ch1", 2, 3)
        progress = tracker.get_lesson_progress("ch1")
        assert progress.status == LessonStatus.COMPLETED
        assert progress.quiz_score == 2
        assert progress.quiz_total == 3
        assert progress.completed_at is not None
        assert tracker.get_completed_chapter_ids() == {"ch1"}

    def test_best_score_kept(self, tracker):
        tracker.record_quiz_result("ch1", 3, 3)
        tracker.record_quiz_result("ch1", 1, 3)
        assert tracker.get_lesson_progress("ch1").quiz_score == 3

    def test_start_does_not_undo_completion(self, tracker):
        tracker.record_quiz_result("ch1", 1, 2)
        tracker.start_lesson("ch1")
        assert tracker.get_lesson_progress("ch1").status == LessonStatus.COMPLETED

    def test_reset_lesson(self, tracker):
        tracker.record_quiz_result("ch1", 1, 2)
        tracker.reset_lesson("ch1")
        assert tracker.get_lesson_progress("ch1").status == LessonStatus.NOT_STARTED

    def test_learners_are_separate(self, tmp_path):
        path = tmp_path / "progress.db"
        ProgressTracker(path, learner_id="a").record_quiz_result("ch1", 1, 1)
        assert ProgressTracker(path, learner_id="b").get_completed_chapter_ids() == set()

    def test_completion_stats(self, tracker):
        tracker.record_quiz_result("ch1", 1, 1)
        tracker.start_lesson("ch2")
        stats = tracker.get_completion_stats(4)
        assert stats["completed"] == 1
        assert stats["in_progress"] == 1
        assert stats["not_started"] == 2
        assert stats["completion_percent"] == 25.0

    def test_completion_stats_empty(self, tracker):
        assert tracker.get_completion_stats(0)["completion_percent"] == 0


class TestQuizSink:

    def test_sink_records_once_per_session(self, tracker, quiz_descriptor, chapter):
        orchestrator = SessionOrchestrator(
            on_quiz_complete=tracker.quiz_sink(chapter.id, 3),
            strict_indices=True,
        )
        orchestrator.open(quiz_descriptor, chapter)
        orchestrator.dispatch(Answer(0, 0))
        orchestrator.dispatch(Answer(1, 1))
        orchestrator.dispatch(Submit())
        orchestrator.dispatch(Submit())

        progress = tracker.get_lesson_progress("ch1")
        assert progress.status == LessonStatus.COMPLETED
        assert progress.quiz_score == 2
        assert progress.quiz_total == 3
