"""Shared fixtures for the PersonaBio test suite."""

from datetime import datetime

import pytest

from persona_bio.config.settings import Settings
from persona_bio.models import QuestionSet
from persona_bio.prompts import DEFAULT_QUESTIONS
from persona_bio.session import InterviewSession


@pytest.fixture
def questions():
    return list(DEFAULT_QUESTIONS)


@pytest.fixture
def session(questions):
    """Fresh session in the collecting phase."""
    return InterviewSession(questions)


@pytest.fixture
def ready_session(session):
    """Session with every question answered."""
    for answer in ["A", "B", "C", "D"]:
        session.submit_answer(answer)
    return session


@pytest.fixture
def question_set():
    return QuestionSet(
        id="family",
        name="Family interview",
        questions=["Who is it?", "What do you remember?"],
        created_at=datetime(2024, 5, 1, 12, 0, 0),
    )


@pytest.fixture
def settings(tmp_path, monkeypatch):
    """Settings isolated from the developer's environment."""
    for var in ("STORAGE_DATA_PATH", "INTERVIEW_QUESTION_SET_ID",
                "INTERVIEW_PLACEHOLDER", "CONSOLE_PROMPT", "CONSOLE_SHOW_SUMMARY_ON_EXIT"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    return Settings()
