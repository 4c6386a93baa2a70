"""Domain models for PersonaBio."""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto


class SessionPhase(Enum):
    """Lifecycle of an interview session."""
    COLLECTING = auto()
    READY = auto()
    DRAFTED = auto()


class MessageRole(Enum):
    """Author of a chat message."""
    USER = "user"
    ASSISTANT = "assistant"


class SubmitOutcome(Enum):
    """What happened to a submitted message."""
    IGNORED = auto()
    ANSWER_RECORDED = auto()
    SUPPLEMENT_RECORDED = auto()


class ActionStatus(Enum):
    """Result of an action that may not be wired up yet."""
    DONE = auto()
    UNIMPLEMENTED = auto()


@dataclass(frozen=True)
class ChatMessage:
    """A single entry of the message history."""
    role: MessageRole
    content: str
    id: str = field(default_factory=lambda: str(uuid.uuid4()))


@dataclass(frozen=True)
class SessionStatus:
    """Header text shown above the chat."""
    headline: str
    caption: str


@dataclass
class QuestionSet:
    """An ordered collection of interview questions."""
    id: str
    name: str
    questions: list[str]
    created_at: datetime
    active: bool = True

    def __post_init__(self):
        if not self.questions:
            raise ValueError("QuestionSet must have at least one question")
        if any(not q.strip() for q in self.questions):
            raise ValueError("QuestionSet questions must not be blank")
