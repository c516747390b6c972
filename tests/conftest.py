"""Shared fixtures for LessonView tests."""

import pytest

from lessonview.schemas import Chapter, LessonContentDescriptor, McqQuestion


@pytest.fixture
def chapter():
    return Chapter(id="ch1", title="Ch1")


@pytest.fixture
def questions():
    """Three questions with correct answers [0, 1, 2]."""
    return [
        McqQuestion(question="Q1", options=["a", "b", "c"], correct_answer=0,
                    explanation="Because a."),
        McqQuestion(question="Q2", options=["a", "b", "c"], correct_answer=1,
                    explanation="Answer Key Provided"),
        McqQuestion(question="Q3", options=["a", "b", "c"], correct_answer=2),
    ]


@pytest.fixture
def quiz_descriptor(questions):
    return LessonContentDescriptor(type="MCQ_SIMPLE", mcq_data=questions)


@pytest.fixture
def playlist_descriptor():
    return LessonContentDescriptor.model_validate({
        "type": "VIDEO_LECTURE",
        "content": "",
        "videoPlaylist": [
            {"title": "Part 1", "url": "https://youtu.be/one"},
            {"title": "Part 2", "url": "https://youtu.be/two"},
            {"title": "Part 3", "url": "https://youtu.be/three"},
        ],
    })
