"""Tests for HTML fragment rendering."""

from lessonview.engine import DocumentView, QuestionView
from lessonview.schemas import DocumentKind, OptionFeedback, QuizSessionResult
from lessonview.viewer import (
    get_quiz_css,
    render_document,
    render_option,
    render_question_review,
    render_quiz_score,
)


class TestQuizRendering:

    def test_css(self):
        assert ".mcq-option-correct" in get_quiz_css()

    def test_option_escaped(self):
        html = render_option("<b>x</b>", OptionFeedback.NEUTRAL)
        assert "&lt;b&gt;x&lt;/b&gt;" in html
        assert "mcq-option-neutral" in html

    def test_question_review(self):
        question = QuestionView(
            index=1,
            question="Which & why?",
            options=("a", "b"),
            selected=0,
            locked=True,
            feedback=(OptionFeedback.SELECTED_WRONG, OptionFeedback.CORRECT),
            explanation="Because b.",
        )
        html = render_question_review(question)
        assert "2. Which &amp; why?" in html
        assert "mcq-option-wrong" in html
        assert "mcq-option-correct" in html
        assert "Because b." in html

    def test_question_review_without_explanation(self):
        question = QuestionView(
            index=0, question="Q", options=("a", "b"), selected=None, locked=False,
            feedback=(OptionFeedback.NEUTRAL, OptionFeedback.NEUTRAL),
        )
        assert "mcq-explanation" not in render_question_review(question)

    def test_score(self):
        html = render_quiz_score(QuizSessionResult(score=2, total=4, answered_count=4, finished=True))
        assert "50%" in html
        assert "2 of 4 correct" in html


class TestMediaRendering:

    def test_embeddable_document(self):
        view = DocumentView(title="Notes", url="https://drive.google.com/file/d/x/preview",
                            document_kind=DocumentKind.EMBEDDABLE)
        html = render_document(view)
        assert html.startswith("<iframe")
        assert 'src="https://drive.google.com/file/d/x/preview"' in html

    def test_external_link(self):
        view = DocumentView(title="Article", url="https://example.com/a?x=1&y=2",
                            document_kind=DocumentKind.EXTERNAL_LINK)
        html = render_document(view)
        assert html.startswith("<a")
        assert "x=1&amp;y=2" in html
