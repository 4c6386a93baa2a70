"""Entry point for the PersonaBio interview console."""

import asyncio

from dotenv import load_dotenv

from .config.settings import Settings
from .console import ConsoleChat
from .repository.local import LocalQuestionSetRepository


def main() -> None:
    """Start an interactive interview session."""
    # Load environment variables
    load_dotenv()

    settings = Settings()
    question_set_repo = LocalQuestionSetRepository(settings.storage.data_path)

    chat = ConsoleChat(settings=settings, question_set_repo=question_set_repo)

    try:
        asyncio.run(chat.run())
    except KeyboardInterrupt:
        print("\nSession aborted.")


if __name__ == "__main__":
    main()
