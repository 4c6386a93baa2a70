"""Question set storage."""

from .base import QuestionSetRepository
from .local import LocalQuestionSetRepository

__all__ = [
    "QuestionSetRepository",
    "LocalQuestionSetRepository",
]
