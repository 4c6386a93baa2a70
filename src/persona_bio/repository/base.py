"""Abstract repository interfaces."""

from abc import ABC, abstractmethod
from typing import Optional

from ..models import QuestionSet


class QuestionSetRepository(ABC):
    """Abstract interface for question set storage."""

    @abstractmethod
    async def get_active(self) -> Optional[QuestionSet]:
        """Get the currently active question set."""
        pass

    @abstractmethod
    async def get_by_id(self, id: str) -> Optional[QuestionSet]:
        """Get a question set by ID."""
        pass

    async def resolve(self, question_set_id: Optional[str] = None) -> Optional[QuestionSet]:
        """Pick the configured set, falling back to the active one."""
        if question_set_id:
            return await self.get_by_id(question_set_id)
        return await self.get_active()
