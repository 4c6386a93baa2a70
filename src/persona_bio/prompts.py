"""Fixed interview wording."""

from datetime import datetime

from .models import QuestionSet

DEFAULT_QUESTIONS = [
    "你和主人公是什么关系？",
    "你最想让读者记住主人公的哪三个特质？",
    "有哪些关键人生节点（年份或阶段）必须写进去？",
    "有没有一件最能代表 TA 的故事，请尽量具体描述。",
]

GREETING = (
    "你好，我是你的传记采访助手。我们会像 ChatGPT 一样通过对话收集素材，"
    "信息足够后再开始撰写。\n\n先从第一问开始：{question}"
)
FOLLOW_UP = "收到。下一问：{question}"
COLLECTION_COMPLETE = "很好，关键素材已经收集完成。你可以点击“开始撰写”，我会先生成一版结构化初稿。"
SUPPLEMENT_RECORDED = "我已记录这条补充信息，会在撰写时一并融合。"
DRAFT_READY = "初稿已生成。你可以点击输入框右侧“查看初稿”，或从侧边栏进入“传记初稿”页面查看。"

STATUS_INTERVIEWING = ("采访进行中", "请按问题逐步回答，达到信息阈值后将自动进入撰写阶段。")
STATUS_WRITING = ("正在撰写中", "已收集核心素材，正在生成传记初稿。")

MATERIAL_SUFFICIENT = "素材已足够：你可以继续补充细节，或输入 /write 生成第一版人物传记。"
NO_DRAFT = "暂无初稿：请先在采访聊天中完成素材收集，并输入 /write。"

PLACEHOLDER = "未提供"
DRAFT_TITLE = "【传记初稿（示例）】"
DRAFT_SLOTS = ["关系背景", "核心特质", "关键节点", "代表故事"]
DRAFT_CLOSING = "接下来我会基于这些信息扩展为完整章节，并保持真实、克制、可读的叙事风格。"


def default_question_set() -> QuestionSet:
    """Built-in question set used when no stored set is available."""
    return QuestionSet(
        id="default",
        name="PersonaBio 默认采访",
        questions=list(DEFAULT_QUESTIONS),
        created_at=datetime(2024, 1, 1),
    )
