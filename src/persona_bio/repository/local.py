"""Local JSON file repository implementation."""

import json
from datetime import datetime
from pathlib import Path
from typing import Optional

import aiofiles

from ..models import QuestionSet
from .base import QuestionSetRepository


class LocalQuestionSetRepository(QuestionSetRepository):
    """JSON file-based question set repository."""

    FILE_NAME = "question_sets.json"

    def __init__(self, data_path: str):
        self.file_path = Path(data_path) / self.FILE_NAME

    async def _read_all(self) -> list[dict]:
        if not self.file_path.exists():
            return []
        async with aiofiles.open(self.file_path, "r", encoding="utf-8") as f:
            content = await f.read()
            return json.loads(content) if content.strip() else []

    def _to_model(self, data: dict) -> QuestionSet:
        created_at = data["created_at"]
        if isinstance(created_at, str):
            created_at = datetime.fromisoformat(created_at.replace("Z", "+00:00"))
        return QuestionSet(
            id=data["id"],
            name=data["name"],
            questions=list(data["questions"]),
            created_at=created_at,
            active=data.get("active", True),
        )

    async def get_active(self) -> Optional[QuestionSet]:
        """Get the most recently created active question set."""
        active = [item for item in await self._read_all() if item.get("active", False)]
        if not active:
            return None
        models = [self._to_model(item) for item in active]
        return max(models, key=lambda qs: qs.created_at.timestamp())

    async def get_by_id(self, id: str) -> Optional[QuestionSet]:
        for item in await self._read_all():
            if item["id"] == id:
                return self._to_model(item)
        return None
