"""
Progress tracking schemas for LessonView.

Defines Pydantic models for learner progress including:
- Lesson status tracking
- Recorded quiz results
"""

from pydantic import BaseModel
from typing import Optional
from datetime import datetime
from enum import Enum


class LessonStatus(str, Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class LessonProgress(BaseModel):
    chapter_id: str
    status: LessonStatus = LessonStatus.NOT_STARTED
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    quiz_score: Optional[int] = None  # best correct count
    quiz_total: Optional[int] = None
