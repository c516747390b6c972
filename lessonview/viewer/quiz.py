"""
Quiz renderer - HTML fragments for multiple-choice questions.

Provides:
- Option rendering with correct / wrong / neutral styling
- Question review with explanation
- Score display
"""

import html

from lessonview.engine import QuestionView
from lessonview.schemas import OptionFeedback, QuizSessionResult


FEEDBACK_CLASSES = {
    OptionFeedback.CORRECT: "mcq-option-correct",
    OptionFeedback.SELECTED_WRONG: "mcq-option-wrong",
    OptionFeedback.NEUTRAL: "mcq-option-neutral",
}

FEEDBACK_MARKS = {
    OptionFeedback.CORRECT: "✓",
    OptionFeedback.SELECTED_WRONG: "✗",
    OptionFeedback.NEUTRAL: "",
}


def get_quiz_css() -> str:
    """Get CSS styles for quiz display."""
    return """
    <style>
    .mcq-question {
        background: white;
        border: 1px solid #ddd;
        border-radius: 12px;
        padding: 1em;
        margin-bottom: 1.5em;
    }
    .mcq-question-text {
        font-weight: 600;
        margin-bottom: 0.8em;
    }
    .mcq-option {
        border: 1px solid #ddd;
        border-radius: 6px;
        padding: 0.5em 0.8em;
        margin-bottom: 0.5em;
    }
    .mcq-option-correct {
        background: #e8f5e9;
        border-color: #388E3C;
        color: #1B5E20;
    }
    .mcq-option-wrong {
        background: #ffebee;
        border-color: #D32F2F;
        color: #B71C1C;
    }
    .mcq-option-neutral {
        color: #333;
    }
    .mcq-explanation {
        background: #fff3e0;
        padding: 0.8em 1em;
        border-radius: 8px;
        font-size: 0.95em;
        color: #e65100;
        margin-top: 0.8em;
    }
    .mcq-score-box {
        background: #e8f5e9;
        border-radius: 8px;
        padding: 1em;
        margin-top: 1.5em;
        text-align: center;
    }
    .mcq-score-value {
        font-size: 2em;
        font-weight: 700;
        color: #388E3C;
    }
    .mcq-score-label {
        color: #666;
        font-size: 0.9em;
    }
    </style>
    """


def render_option(text: str, feedback: OptionFeedback) -> str:
    """Render one answer option with its feedback styling."""
    mark = FEEDBACK_MARKS[feedback]
    mark_html = f' <span class="mcq-mark">{mark}</span>' if mark else ""
    return (
        f'<div class="mcq-option {FEEDBACK_CLASSES[feedback]}">'
        f'{html.escape(text)}{mark_html}</div>'
    )


def render_question_review(question: QuestionView) -> str:
    """
    Render a question with per-option feedback.

    Args:
        question: QuestionView from a QuizView

    Returns:
        HTML string for the question
    """
    parts = ['<div class="mcq-question">']
    parts.append(
        f'<div class="mcq-question-text">{question.index + 1}. {html.escape(question.question)}</div>'
    )

    for text, feedback in zip(question.options, question.feedback):
        parts.append(render_option(text, feedback))

    if question.explanation:
        parts.append(f'<div class="mcq-explanation">{html.escape(question.explanation)}</div>')

    parts.append('</div>')
    return ''.join(parts)


def render_quiz_score(result: QuizSessionResult) -> str:
    """Render quiz score display."""
    return f"""
    <div class="mcq-score-box">
        <div class="mcq-score-value">{result.percent}%</div>
        <div class="mcq-score-label">{result.score} of {result.total} correct</div>
    </div>
    """
