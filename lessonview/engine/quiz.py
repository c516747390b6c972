"""
Quiz engine - Answer state, scoring and completion for one quiz session.

Provides:
- Write-once answer recording with index validation
- Running and final score
- Exactly-once completion callback on submit
- Per-question answer review (correct / selected wrong / neutral)
"""

import logging
from types import MappingProxyType
from typing import Callable, Mapping, Optional, Sequence

from lessonview import config
from lessonview.errors import InvalidIndex
from lessonview.schemas import (
    McqQuestion,
    OptionFeedback,
    QuestionReview,
    QuizSessionResult,
    QuizState,
)

logger = logging.getLogger(__name__)

# Placeholder the content source uses when a question has no real explanation
EXPLANATION_PLACEHOLDER = "Answer Key Provided"


def clean_explanation(explanation: Optional[str]) -> Optional[str]:
    """Return the explanation to show, or None for blanks and the placeholder."""
    if explanation is None:
        return None
    text = explanation.strip()
    if not text or text.casefold() == EXPLANATION_PLACEHOLDER.casefold():
        return None
    return text


class QuizEngine:
    """
    State machine for one quiz session.

    IN_PROGRESS accepts answers; submit() moves to FINISHED, which is
    terminal. Each answer is write-once. The completion callback fires on
    the first submit() only, however many times submit() is called.
    """

    def __init__(
        self,
        questions: Sequence[McqQuestion],
        on_complete: Optional[Callable[[int], None]] = None,
        strict: Optional[bool] = None,
    ):
        """
        Initialize a quiz session.

        Args:
            questions: Questions in display order (at least one)
            on_complete: Called once with the final score on first submit
            strict: Raise InvalidIndex on bad indices (default from config);
                when False, bad indices are logged and ignored
        """
        if not questions:
            raise ValueError("QuizEngine needs at least one question")
        self.questions: tuple[McqQuestion, ...] = tuple(questions)
        self.on_complete = on_complete
        self.strict = config.STRICT_INDICES if strict is None else strict
        self.state = QuizState.IN_PROGRESS
        self._answers: dict[int, int] = {}
        self._completion_emitted = False

    @property
    def total(self) -> int:
        return len(self.questions)

    @property
    def finished(self) -> bool:
        return self.state == QuizState.FINISHED

    @property
    def answers(self) -> Mapping[int, int]:
        """Read-only view of question index -> selected option."""
        return MappingProxyType(self._answers)

    @property
    def answered_count(self) -> int:
        return len(self._answers)

    def selected(self, question_index: int) -> Optional[int]:
        return self._answers.get(question_index)

    def is_answered(self, question_index: int) -> bool:
        return question_index in self._answers

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def _check_indices(self, question_index: int, option_index: int) -> bool:
        try:
            if not 0 <= question_index < self.total:
                raise InvalidIndex("question", question_index, self.total)
            n_options = len(self.questions[question_index].options)
            if not 0 <= option_index < n_options:
                raise InvalidIndex("option", option_index, n_options)
        except InvalidIndex as e:
            if self.strict:
                raise
            logger.warning(f"Ignoring answer: {e}")
            return False
        return True

    def answer(self, question_index: int, option_index: int) -> bool:
        """
        Record the learner's answer to a question.

        Answers are write-once: a second answer to the same question, or any
        answer after submit, is ignored.

        Args:
            question_index: 0-based question index
            option_index: 0-based option index for that question

        Returns:
            True if the answer was recorded

        Raises:
            InvalidIndex: If an index is out of range (strict mode only)
        """
        if not self._check_indices(question_index, option_index):
            return False
        if self.finished or question_index in self._answers:
            return False
        self._answers[question_index] = option_index
        return True

    def submit(self) -> QuizSessionResult:
        """
        Finish the quiz and report the score.

        Safe to call repeatedly: the state stays FINISHED and the completion
        callback is only invoked on the first call.

        Returns:
            Final QuizSessionResult
        """
        self.state = QuizState.FINISHED
        result = self.result()
        if not self._completion_emitted:
            self._completion_emitted = True
            logger.info(f"Quiz finished: {result.score}/{result.total} correct")
            if self.on_complete is not None:
                self.on_complete(result.score)
        return result

    # -------------------------------------------------------------------------
    # Projections
    # -------------------------------------------------------------------------

    def score(self) -> int:
        """Number of answered questions whose selection is correct."""
        return sum(
            1 for idx, selected in self._answers.items()
            if selected == self.questions[idx].correct_answer
        )

    def result(self) -> QuizSessionResult:
        return QuizSessionResult(
            score=self.score(),
            total=self.total,
            answered_count=self.answered_count,
            finished=self.finished,
        )

    def review(self, question_index: int) -> QuestionReview:
        """
        Get answer feedback for a question.

        Feedback is revealed once the question is answered or the quiz is
        finished; before that every option is NEUTRAL.

        Raises:
            InvalidIndex: If question_index is out of range
        """
        if not 0 <= question_index < self.total:
            raise InvalidIndex("question", question_index, self.total)

        question = self.questions[question_index]
        selected = self._answers.get(question_index)
        revealed = selected is not None or self.finished

        feedback = []
        for idx in range(len(question.options)):
            if not revealed:
                feedback.append(OptionFeedback.NEUTRAL)
            elif idx == question.correct_answer:
                feedback.append(OptionFeedback.CORRECT)
            elif idx == selected:
                feedback.append(OptionFeedback.SELECTED_WRONG)
            else:
                feedback.append(OptionFeedback.NEUTRAL)

        return QuestionReview(
            index=question_index,
            selected=selected,
            revealed=revealed,
            feedback=feedback,
            explanation=clean_explanation(question.explanation) if revealed else None,
        )

    def reviews(self) -> list[QuestionReview]:
        return [self.review(idx) for idx in range(self.total)]
