"""
ProgressTracker - Record learner progress in ~/.lessonview/progress.db.

Stores progress separately from lesson content:
- Lesson status (started / completed)
- Best quiz score per chapter

This is a completion sink for the session orchestrator; the orchestrator
itself keeps no state across sessions.
"""

import logging
import sqlite3
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from lessonview import config
from lessonview.schemas import LessonStatus, LessonProgress

logger = logging.getLogger(__name__)


class ProgressTracker:
    """
    Track learner progress in a SQLite database.

    Each method opens its own connection.
    """

    def __init__(self, db_path: Optional[Path] = None, learner_id: str = "default"):
        """
        Initialize progress tracker.

        Args:
            db_path: Path to progress.db (default from config)
            learner_id: Learner identifier for multi-user support
        """
        self.db_path = Path(db_path) if db_path else config.PROGRESS_DB
        self.learner_id = learner_id
        self._ensure_database()

    def _ensure_database(self):
        """Create database and tables if they don't exist."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

        conn = sqlite3.connect(str(self.db_path))
        try:
            conn.executescript("""
                CREATE TABLE IF NOT EXISTS lesson_progress (
                    learner_id TEXT NOT NULL,
                    chapter_id TEXT NOT NULL,
                    status TEXT NOT NULL DEFAULT 'not_started',
                    started_at TEXT,
                    completed_at TEXT,
                    quiz_score INTEGER,
                    quiz_total INTEGER,
                    PRIMARY KEY (learner_id, chapter_id)
                );

                CREATE INDEX IF NOT EXISTS idx_lesson_progress_learner
                ON lesson_progress(learner_id);
            """)
            conn.commit()
        finally:
            conn.close()

    def _get_connection(self) -> sqlite3.Connection:
        """Get a new database connection."""
        conn = sqlite3.connect(str(self.db_path))
        conn.row_factory = sqlite3.Row
        return conn

    @staticmethod
    def _row_to_progress(row: sqlite3.Row) -> LessonProgress:
        return LessonProgress(
            chapter_id=row["chapter_id"],
            status=LessonStatus(row["status"]),
            started_at=datetime.fromisoformat(row["started_at"]) if row["started_at"] else None,
            completed_at=datetime.fromisoformat(row["completed_at"]) if row["completed_at"] else None,
            quiz_score=row["quiz_score"],
            quiz_total=row["quiz_total"],
        )

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    def get_lesson_progress(self, chapter_id: str) -> LessonProgress:
        """Get progress for a specific chapter."""
        conn = self._get_connection()
        try:
            cursor = conn.execute(
                """SELECT chapter_id, status, started_at, completed_at, quiz_score, quiz_total
                   FROM lesson_progress
                   WHERE learner_id = ? AND chapter_id = ?""",
                (self.learner_id, chapter_id)
            )
            row = cursor.fetchone()
            if not row:
                return LessonProgress(chapter_id=chapter_id)
            return self._row_to_progress(row)
        finally:
            conn.close()

    def get_all_lesson_progress(self) -> dict[str, LessonProgress]:
        """Get progress for all chapters."""
        conn = self._get_connection()
        try:
            cursor = conn.execute(
                """SELECT chapter_id, status, started_at, completed_at, quiz_score, quiz_total
                   FROM lesson_progress
                   WHERE learner_id = ?""",
                (self.learner_id,)
            )
            return {row["chapter_id"]: self._row_to_progress(row) for row in cursor.fetchall()}
        finally:
            conn.close()

    def get_completed_chapter_ids(self) -> set[str]:
        """Get set of completed chapter IDs."""
        conn = self._get_connection()
        try:
            cursor = conn.execute(
                """SELECT chapter_id FROM lesson_progress
                   WHERE learner_id = ? AND status = 'completed'""",
                (self.learner_id,)
            )
            return {row["chapter_id"] for row in cursor.fetchall()}
        finally:
            conn.close()

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    def start_lesson(self, chapter_id: str):
        """Mark a chapter as started unless it is already further along."""
        conn = self._get_connection()
        try:
            now = datetime.now().isoformat()
            conn.execute(
                """INSERT INTO lesson_progress (learner_id, chapter_id, status, started_at)
                   VALUES (?, ?, ?, ?)
                   ON CONFLICT(learner_id, chapter_id) DO UPDATE SET
                     status = CASE
                       WHEN status = 'not_started' THEN 'in_progress'
                       ELSE status
                     END,
                     started_at = CASE
                       WHEN started_at IS NULL THEN ?
                       ELSE started_at
                     END""",
                (self.learner_id, chapter_id, LessonStatus.IN_PROGRESS.value, now, now)
            )
            conn.commit()
        finally:
            conn.close()

    def record_quiz_result(self, chapter_id: str, score: int, total: int):
        """
        Mark a chapter completed with a quiz result.

        The best score is kept when a quiz is taken again.

        Args:
            chapter_id: Chapter the quiz belongs to
            score: Number of correct answers
            total: Number of questions
        """
        conn = self._get_connection()
        try:
            now = datetime.now().isoformat()
            conn.execute(
                """INSERT INTO lesson_progress
                     (learner_id, chapter_id, status, started_at, completed_at, quiz_score, quiz_total)
                   VALUES (?, ?, ?, ?, ?, ?, ?)
                   ON CONFLICT(learner_id, chapter_id) DO UPDATE SET
                     status = 'completed',
                     completed_at = ?,
                     quiz_score = MAX(COALESCE(quiz_score, 0), ?),
                     quiz_total = ?""",
                (self.learner_id, chapter_id, LessonStatus.COMPLETED.value, now, now, score, total,
                 now, score, total)
            )
            conn.commit()
        finally:
            conn.close()
        logger.info(f"Recorded quiz result for {chapter_id}: {score}/{total}")

    def quiz_sink(self, chapter_id: str, total: int) -> Callable[[int], None]:
        """Get an on_quiz_complete callback that records results for one chapter."""
        def on_quiz_complete(score: int):
            self.record_quiz_result(chapter_id, score, total)
        return on_quiz_complete

    def reset_lesson(self, chapter_id: str):
        """Reset a chapter to not started."""
        conn = self._get_connection()
        try:
            conn.execute(
                """DELETE FROM lesson_progress
                   WHERE learner_id = ? AND chapter_id = ?""",
                (self.learner_id, chapter_id)
            )
            conn.commit()
        finally:
            conn.close()

    # -------------------------------------------------------------------------
    # Statistics
    # -------------------------------------------------------------------------

    def get_completion_stats(self, total_chapters: int) -> dict:
        """
        Get completion statistics.

        Args:
            total_chapters: Number of chapters in the lessons directory

        Returns:
            Dictionary with completion stats
        """
        all_progress = self.get_all_lesson_progress()
        completed = sum(1 for p in all_progress.values() if p.status == LessonStatus.COMPLETED)
        in_progress = sum(1 for p in all_progress.values() if p.status == LessonStatus.IN_PROGRESS)

        return {
            "total_chapters": total_chapters,
            "completed": completed,
            "in_progress": in_progress,
            "not_started": max(total_chapters - completed - in_progress, 0),
            "completion_percent": round(completed / total_chapters * 100, 1) if total_chapters > 0 else 0,
        }
