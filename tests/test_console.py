"""Tests for the terminal chat driver."""

import json

import pytest

from persona_bio import prompts
from persona_bio.console import ConsoleChat
from persona_bio.models import SessionPhase
from persona_bio.repository import LocalQuestionSetRepository


def _scripted(lines):
    """read_line stand-in that replays lines, then signals end of input."""
    pending = list(lines)

    def read_line(prompt):
        if not pending:
            raise EOFError
        return pending.pop(0)

    return read_line


def _store(tmp_path, sets):
    (tmp_path / LocalQuestionSetRepository.FILE_NAME).write_text(
        json.dumps(sets, ensure_ascii=False), encoding="utf-8"
    )


def _chat(settings, tmp_path, lines):
    out = []
    chat = ConsoleChat(
        settings=settings,
        question_set_repo=LocalQuestionSetRepository(str(tmp_path)),
        read_line=_scripted(lines),
        write=out.append,
    )
    return chat, out


@pytest.mark.asyncio
async def test_full_interview_and_draft(settings, tmp_path):
    chat, out = _chat(settings, tmp_path, ["A", "B", "C", "D", "/write", "/draft", "/quit"])
    session = await chat.run()

    assert session.phase == SessionPhase.DRAFTED
    assert session.answers == ["A", "B", "C", "D"]
    assert prompts.MATERIAL_SUFFICIENT in out
    assert prompts.DRAFT_READY in out
    assert session.draft in out


@pytest.mark.asyncio
async def test_falls_back_to_default_questions(settings, tmp_path, capsys):
    chat, out = _chat(settings, tmp_path, [])
    session = await chat.run()

    assert list(session.questions) == prompts.DEFAULT_QUESTIONS
    assert "using built-in default" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_uses_stored_question_set(settings, tmp_path, question_set):
    _store(tmp_path, [{
        "id": question_set.id,
        "name": question_set.name,
        "questions": question_set.questions,
        "created_at": question_set.created_at.isoformat(),
        "active": True,
    }])
    chat, out = _chat(settings, tmp_path, ["mom", "her garden", "/write"])
    session = await chat.run()

    assert session.questions == tuple(question_set.questions)
    assert session.phase == SessionPhase.DRAFTED
    assert f"代表故事：{prompts.PLACEHOLDER}" in session.draft


@pytest.mark.asyncio
async def test_write_too_early_reports_remaining(settings, tmp_path):
    chat, out = _chat(settings, tmp_path, ["A", "/write"])
    session = await chat.run()

    assert session.phase == SessionPhase.COLLECTING
    assert "素材还不够，还有 3 个问题需要回答。" in out


@pytest.mark.asyncio
async def test_second_write_does_not_redraft(settings, tmp_path):
    chat, out = _chat(settings, tmp_path, ["A", "B", "C", "D", "/write", "/write"])
    await chat.run()

    assert out.count(prompts.DRAFT_READY) == 1
    assert "初稿已经生成过了，输入 /draft 查看。" in out


@pytest.mark.asyncio
async def test_draft_before_writing(settings, tmp_path):
    chat, out = _chat(settings, tmp_path, ["/draft"])
    await chat.run()
    assert prompts.NO_DRAFT in out


@pytest.mark.asyncio
async def test_chapters_not_available(settings, tmp_path):
    chat, out = _chat(settings, tmp_path, ["/chapters"])
    await chat.run()
    assert "章节撰写功能尚未开放。" in out


@pytest.mark.asyncio
async def test_blank_lines_print_nothing(settings, tmp_path):
    settings.console.show_summary_on_exit = False
    chat, out = _chat(settings, tmp_path, ["   ", ""])
    session = await chat.run()

    assert session.answers == []
    # status banner and greeting only
    assert len(out) == 2


@pytest.mark.asyncio
async def test_log_lines_hide_answer_content(settings, tmp_path, capsys):
    chat, out = _chat(settings, tmp_path, ["very private answer"])
    await chat.run()

    logs = capsys.readouterr().out
    assert "Received input (19 chars)" in logs
    assert "very private answer" not in logs
    assert "Closed in phase COLLECTING" in logs


@pytest.mark.asyncio
async def test_summary_printed_on_exit(settings, tmp_path):
    chat, out = _chat(settings, tmp_path, ["sibling", "/quit"])
    await chat.run()
    assert "回答: sibling" in out[-1]


@pytest.mark.asyncio
async def test_bad_question_set_reported_with_session_tag(settings, tmp_path, capsys):
    _store(tmp_path, [{
        "id": "bad", "name": "Bad", "questions": ["ok", "  "],
        "created_at": "2024-01-01T00:00:00", "active": True,
    }])
    chat, out = _chat(settings, tmp_path, ["A"])

    with pytest.raises(ValueError):
        await chat.run()

    logs = capsys.readouterr().out
    assert "[SESSION " in logs
    assert "Error: QuestionSet questions must not be blank" in logs
    assert "Closed before the interview started" in logs
    assert out == []


@pytest.mark.asyncio
async def test_malformed_question_file_reported(settings, tmp_path, capsys):
    (tmp_path / LocalQuestionSetRepository.FILE_NAME).write_text("{not json", encoding="utf-8")
    chat, out = _chat(settings, tmp_path, [])

    with pytest.raises(json.JSONDecodeError):
        await chat.run()

    logs = capsys.readouterr().out
    assert "Error:" in logs
    assert "Closed before the interview started" in logs


@pytest.mark.asyncio
async def test_configured_placeholder_used_in_summary(settings, tmp_path):
    settings.interview.placeholder = "n/a"
    chat, out = _chat(settings, tmp_path, [])
    session = await chat.run()

    assert "回答: n/a" in out[-1]
    assert prompts.PLACEHOLDER not in out[-1]
    assert session.placeholder == "n/a"


@pytest.mark.asyncio
async def test_configured_placeholder_used_in_draft(settings, tmp_path):
    settings.interview.placeholder = "n/a"
    _store(tmp_path, [{
        "id": "short", "name": "Short", "questions": ["Who?", "When?"],
        "created_at": "2024-01-01T00:00:00", "active": True,
    }])
    chat, out = _chat(settings, tmp_path, ["mom", "1960s", "/write"])
    session = await chat.run()

    assert "关键节点：n/a" in session.draft
    assert prompts.PLACEHOLDER not in session.draft
