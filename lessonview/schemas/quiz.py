"""
Quiz session schemas for LessonView.

Defines the derived, read-only projections of a quiz session:
- Session state and score summary
- Per-option feedback for answer review
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class QuizState(str, Enum):
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"  # terminal


class QuizSessionResult(BaseModel):
    """Score summary, recomputed from the answer state on every change."""
    model_config = ConfigDict(frozen=True)

    score: int
    total: int
    answered_count: int
    finished: bool

    @property
    def percent(self) -> int:
        if self.total == 0:
            return 0
        return round(self.score / self.total * 100)


class OptionFeedback(str, Enum):
    CORRECT = "correct"
    SELECTED_WRONG = "selected_wrong"
    NEUTRAL = "neutral"


class QuestionReview(BaseModel):
    """Feedback for one question, derived from its answer and the answer key."""
    model_config = ConfigDict(frozen=True)

    index: int
    selected: Optional[int] = None
    revealed: bool = False
    feedback: list[OptionFeedback]
    explanation: Optional[str] = None

    @property
    def is_correct(self) -> bool:
        return (
            self.selected is not None
            and self.feedback[self.selected] == OptionFeedback.CORRECT
        )
