"""Draft synthesis backends."""

from abc import ABC, abstractmethod
from typing import Sequence

from . import prompts


class DraftSynthesizer(ABC):
    """Abstract interface for turning an answer log into a draft."""

    @abstractmethod
    def synthesize(self, answers: Sequence[str]) -> str:
        """Build a draft from answers in question order."""
        pass


class TemplateDraftSynthesizer(DraftSynthesizer):
    """Fills answers into the fixed labeled draft template.

    Slot *i* takes ``answers[i]``; slots without an answer get the
    placeholder. Answers past the last slot are not used.
    """

    def __init__(self, placeholder: str = prompts.PLACEHOLDER):
        self.placeholder = placeholder

    def synthesize(self, answers: Sequence[str]) -> str:
        lines = [prompts.DRAFT_TITLE]
        for i, label in enumerate(prompts.DRAFT_SLOTS):
            value = answers[i] if i < len(answers) else self.placeholder
            lines.append(f"{label}：{value}")
        lines.extend(["", prompts.DRAFT_CLOSING])
        return "\n".join(lines)
