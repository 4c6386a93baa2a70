"""Interview session state machine."""

import uuid
from typing import Iterable, Optional

from . import prompts
from .models import (
    ActionStatus,
    ChatMessage,
    MessageRole,
    SessionPhase,
    SessionStatus,
    SubmitOutcome,
)
from .synthesizer import DraftSynthesizer, TemplateDraftSynthesizer


class InterviewSession:
    """Walks through a fixed question list and produces one draft.

    Phases only move forward: COLLECTING -> READY -> DRAFTED. Answers are
    frozen at exactly ``len(questions)`` entries once READY; anything
    submitted later goes to the supplementary bucket, which the draft
    never reads.
    """

    def __init__(
        self,
        questions: Iterable[str],
        synthesizer: Optional[DraftSynthesizer] = None,
        session_id: Optional[str] = None,
        placeholder: str = prompts.PLACEHOLDER,
    ):
        self._questions = tuple(questions)
        if not self._questions:
            raise ValueError("InterviewSession needs at least one question")
        self.session_id = session_id or str(uuid.uuid4())
        self.placeholder = placeholder
        self._synthesizer = synthesizer or TemplateDraftSynthesizer(placeholder=placeholder)
        self._answers: list[str] = []
        self._supplementary: list[str] = []
        self._messages: list[ChatMessage] = []
        self._phase = SessionPhase.COLLECTING
        self._draft: Optional[str] = None

        self._say(prompts.GREETING.format(question=self._questions[0]))

    @property
    def questions(self) -> tuple[str, ...]:
        return self._questions

    @property
    def answers(self) -> list[str]:
        return list(self._answers)

    @property
    def supplementary(self) -> list[str]:
        return list(self._supplementary)

    @property
    def messages(self) -> list[ChatMessage]:
        return list(self._messages)

    @property
    def phase(self) -> SessionPhase:
        return self._phase

    @property
    def draft(self) -> Optional[str]:
        return self._draft

    @property
    def current_question(self) -> Optional[str]:
        """The question awaiting an answer, or None once collection is done."""
        if self._phase != SessionPhase.COLLECTING:
            return None
        return self._questions[len(self._answers)]

    @staticmethod
    def can_send(text: str) -> bool:
        """Whether ``text`` would be accepted by submit_answer."""
        return bool(text.strip())

    def can_synthesize(self) -> bool:
        return len(self._answers) >= len(self._questions)

    def submit_answer(self, text: str) -> SubmitOutcome:
        """Record one user message and append the assistant's reply."""
        text = text.strip()
        if not text:
            return SubmitOutcome.IGNORED

        self._messages.append(ChatMessage(role=MessageRole.USER, content=text))

        match self._phase:
            case SessionPhase.COLLECTING:
                return self._handle_answer(text)
            case _:
                return self._handle_supplement(text)

    def _handle_answer(self, text: str) -> SubmitOutcome:
        self._answers.append(text)
        if len(self._answers) == len(self._questions):
            self._phase = SessionPhase.READY
            self._say(prompts.COLLECTION_COMPLETE)
        else:
            next_question = self._questions[len(self._answers)]
            self._say(prompts.FOLLOW_UP.format(question=next_question))
        return SubmitOutcome.ANSWER_RECORDED

    def _handle_supplement(self, text: str) -> SubmitOutcome:
        # Not merged into the draft.
        self._supplementary.append(text)
        self._say(prompts.SUPPLEMENT_RECORDED)
        return SubmitOutcome.SUPPLEMENT_RECORDED

    def synthesize_draft(self) -> Optional[str]:
        """Produce the draft once.

        Returns None without touching state when collection is not
        finished or a draft already exists.
        """
        if not self.can_synthesize() or self._phase == SessionPhase.DRAFTED:
            return None

        self._draft = self._synthesizer.synthesize(tuple(self._answers))
        self._phase = SessionPhase.DRAFTED
        self._say(prompts.DRAFT_READY)
        return self._draft

    def start_chapter_writing(self) -> ActionStatus:
        """Chapter writing from the dashboard. Not wired to anything."""
        return ActionStatus.UNIMPLEMENTED

    def status(self) -> SessionStatus:
        if self._phase == SessionPhase.DRAFTED:
            headline, caption = prompts.STATUS_WRITING
        else:
            headline, caption = prompts.STATUS_INTERVIEWING
        return SessionStatus(headline=headline, caption=caption)

    def get_interview_summary(self) -> str:
        """Get the summary of all questions and answers so far."""
        lines = [
            "",
            "=== 采访记录 ===",
            "",
        ]

        for i, question in enumerate(self._questions):
            answer = self._answers[i] if i < len(self._answers) else self.placeholder
            lines.append(f"Q{i + 1}: {question}")
            lines.append(f"    回答: {answer}")
            lines.append("")

        if self._supplementary:
            lines.append("补充信息:")
            lines.extend(f"    - {item}" for item in self._supplementary)
            lines.append("")

        return "\n".join(lines)

    def _say(self, content: str) -> None:
        self._messages.append(ChatMessage(role=MessageRole.ASSISTANT, content=content))
