"""Terminal chat front end for PersonaBio."""

import asyncio
import uuid
from typing import Callable, Optional

from . import prompts
from .config.settings import Settings
from .models import ActionStatus, MessageRole, QuestionSet, SessionPhase, SubmitOutcome
from .repository.base import QuestionSetRepository
from .session import InterviewSession
from .synthesizer import TemplateDraftSynthesizer


class ConsoleChat:
    """Runs one interview session over stdin/stdout."""

    def __init__(
        self,
        settings: Settings,
        question_set_repo: QuestionSetRepository,
        read_line: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
    ):
        self.settings = settings
        self.question_set_repo = question_set_repo
        self.read_line = read_line
        self.write = write

    async def load_question_set(self) -> QuestionSet:
        """Load the configured question set, or the built-in one."""
        question_set_id = self.settings.interview.question_set_id
        question_set = await self.question_set_repo.resolve(question_set_id)
        if question_set is None:
            print("[QUESTIONS] No stored question set found, using built-in default")
            return prompts.default_question_set()
        print(f"[QUESTIONS] Using question set {question_set.id} ({question_set.name})")
        return question_set

    def create_session(self, question_set: QuestionSet, session_id: Optional[str] = None) -> InterviewSession:
        placeholder = self.settings.interview.placeholder
        return InterviewSession(
            question_set.questions,
            synthesizer=TemplateDraftSynthesizer(placeholder=placeholder),
            session_id=session_id,
            placeholder=placeholder,
        )

    async def run(self) -> InterviewSession:
        """Drive a full session until /quit or end of input."""
        session_id = str(uuid.uuid4())
        tag = f"[SESSION {session_id[:8]}]"
        session: Optional[InterviewSession] = None

        try:
            question_set = await self.load_question_set()
            session = self.create_session(question_set, session_id=session_id)
            print(f"{tag} Started with {len(session.questions)} questions")

            status = session.status()
            self.write(f"== {status.headline} ==\n{status.caption}\n")
            self._show_new_messages(session, 0)

            while True:
                try:
                    line = await asyncio.to_thread(self.read_line, self.settings.console.prompt)
                except EOFError:
                    break

                if line.strip() == "/quit":
                    break

                # Log message receipt without exposing answer content
                print(f"{tag} Received input ({len(line)} chars)")
                self.handle_line(session, line)
        except Exception as e:
            print(f"{tag} Error: {e}")
            raise
        finally:
            if session is None:
                print(f"{tag} Closed before the interview started")
            else:
                if self.settings.console.show_summary_on_exit:
                    self.write(session.get_interview_summary())
                print(f"{tag} Closed in phase {session.phase.name}")

        return session

    def handle_line(self, session: InterviewSession, line: str) -> None:
        """Dispatch a command or submit the line as an answer."""
        command = line.strip()
        seen = len(session.messages)

        match command:
            case "/write":
                self._handle_write(session)
            case "/draft":
                self.write(session.draft or prompts.NO_DRAFT)
            case "/summary":
                self.write(session.get_interview_summary())
            case "/chapters":
                if session.start_chapter_writing() == ActionStatus.UNIMPLEMENTED:
                    self.write("章节撰写功能尚未开放。")
            case _:
                was_collecting = session.phase == SessionPhase.COLLECTING
                outcome = session.submit_answer(line)
                if outcome == SubmitOutcome.IGNORED:
                    return
                self._show_new_messages(session, seen)
                if was_collecting and session.phase == SessionPhase.READY:
                    self.write(prompts.MATERIAL_SUFFICIENT)
                return

        self._show_new_messages(session, seen)

    def _handle_write(self, session: InterviewSession) -> None:
        if session.phase == SessionPhase.DRAFTED:
            self.write("初稿已经生成过了，输入 /draft 查看。")
            return
        if session.synthesize_draft() is None:
            remaining = len(session.questions) - len(session.answers)
            self.write(f"素材还不够，还有 {remaining} 个问题需要回答。")
            return
        status = session.status()
        self.write(f"== {status.headline} ==\n{status.caption}")

    def _show_new_messages(self, session: InterviewSession, start: int) -> None:
        for message in session.messages[start:]:
            if message.role == MessageRole.ASSISTANT:
                self.write(message.content)
