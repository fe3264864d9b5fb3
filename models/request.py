"""API request / response models."""

from __future__ import annotations

from pydantic import field_validator

from models.base import CamelModel
from models.chat import ChatPanel, Message
from models.generation import ChatTask
from models.panels import QuizPanel, QuizSummary
from services.session_store import WorkspaceSession


class SessionCreateResponse(CamelModel):
    """POST /api/sessions — response body."""

    session_id: str
    session: WorkspaceSession


class ChatMessageRequest(CamelModel):
    """POST /api/sessions/{id}/chat/messages — request body."""

    message: str
    code_context: str | None = None

    @field_validator("message")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Message cannot be empty.")
        return v


class ChatMessageResponse(CamelModel):
    """POST /api/sessions/{id}/chat/messages — response body."""

    reply: Message
    chat: ChatPanel


class ChatOptionsRequest(CamelModel):
    """PUT /api/sessions/{id}/chat/options — request body."""

    task: ChatTask | None = None
    language: str | None = None


class SelectConversationRequest(CamelModel):
    conversation_id: str


class SelectTopicRequest(CamelModel):
    topic: str

    @field_validator("topic")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Please select a topic.")
        return v.strip()


class QuizAnswerRequest(CamelModel):
    option: str


class QuizCheckResponse(CamelModel):
    correct: bool
    quiz: QuizPanel


class QuizNextResponse(CamelModel):
    finished: bool
    summary: QuizSummary | None = None
    quiz: QuizPanel
