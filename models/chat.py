"""Chat panel models — messages, conversations and the chat state machine.

States::

    no_active_conversation ──submit──▶ awaiting_response ──ok──▶ active_conversation
              ▲                              │
              └──────── failed (no conversation before) ◀──┘
    any state ──new_chat──▶ no_active_conversation

The transition methods here are synchronous and never call a model; the
async orchestration lives in ``services/chat_workflow.py``.
"""

from __future__ import annotations

import uuid
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import ConfigDict, Field, computed_field

from config.languages import DEFAULT_CHAT_LANGUAGE
from errors.exceptions import ConversationNotFoundError, PanelBusyError
from models.base import CamelModel
from models.generation import ChatTask

CHAT_ERROR_MESSAGE = "An error occurred. Please try again."


# ── Message content (closed tagged variant) ──────────────────


class PlainText(CamelModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["text"] = "text"
    text: str


class ExplainedCode(CamelModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["explained_code"] = "explained_code"
    explanation: str
    code: str
    language: str | None = None


class ErrorNotice(CamelModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["error"] = "error"
    text: str = CHAT_ERROR_MESSAGE


MessageContent = Annotated[
    Union[PlainText, ExplainedCode, ErrorNotice],
    Field(discriminator="kind"),
]


class Message(CamelModel):
    """One chat message.  Immutable once created."""

    model_config = ConfigDict(frozen=True)

    id: str
    role: Literal["user", "assistant"]
    content: MessageContent

    @classmethod
    def user(cls, text: str) -> Message:
        return cls(id=f"user-{uuid.uuid4().hex[:12]}", role="user", content=PlainText(text=text))

    @classmethod
    def assistant(cls, content: ExplainedCode) -> Message:
        return cls(id=f"assistant-{uuid.uuid4().hex[:12]}", role="assistant", content=content)

    @classmethod
    def error(cls, text: str = CHAT_ERROR_MESSAGE) -> Message:
        return cls(id=f"error-{uuid.uuid4().hex[:12]}", role="assistant", content=ErrorNotice(text=text))


class Conversation(CamelModel):
    """An ordered sequence of user/assistant messages under one title."""

    id: str
    title: str
    messages: list[Message] = Field(default_factory=list)


def make_title(first_message: str, max_chars: int = 30) -> str:
    """Conversation title: the first *max_chars* characters plus ``"..."``."""
    return first_message[:max_chars] + "..."


# ── State machine ────────────────────────────────────────────


class ChatState(str, Enum):
    NO_ACTIVE_CONVERSATION = "no_active_conversation"
    ACTIVE_CONVERSATION = "active_conversation"
    AWAITING_RESPONSE = "awaiting_response"


class PendingSubmit(CamelModel):
    """Bookkeeping for the single in-flight submission."""

    user_message: Message
    target_conversation_id: str | None = None
    epoch: int


class ChatPanel(CamelModel):
    """State owned by one chat panel: conversation history plus the display list."""

    conversations: list[Conversation] = Field(default_factory=list)  # newest first
    active_conversation_id: str | None = None
    displayed_messages: list[Message] = Field(default_factory=list)
    state: ChatState = ChatState.NO_ACTIVE_CONVERSATION
    task: ChatTask = "generate"
    language: str = DEFAULT_CHAT_LANGUAGE
    pending: PendingSubmit | None = Field(default=None, exclude=True)
    # Bumped by new_chat / select so a late response does not repaint the display
    epoch: int = Field(default=0, exclude=True)

    # -- queries --------------------------------------------------------

    def find_conversation(self, conversation_id: str) -> Conversation | None:
        for conversation in self.conversations:
            if conversation.id == conversation_id:
                return conversation
        return None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_loading(self) -> bool:
        return self.pending is not None

    # -- transitions ----------------------------------------------------

    def begin_submit(self, text: str) -> Message:
        """Show the user's message optimistically and enter ``awaiting_response``."""
        if self.pending is not None:
            raise PanelBusyError("chat")
        user_message = Message.user(text)
        self.pending = PendingSubmit(
            user_message=user_message,
            target_conversation_id=self.active_conversation_id,
            epoch=self.epoch,
        )
        self.displayed_messages = [*self.displayed_messages, user_message]
        self.state = ChatState.AWAITING_RESPONSE
        return user_message

    def complete_submit(self, assistant_message: Message, *, title_max_chars: int = 30) -> Conversation:
        """Record a successful round trip; creates a conversation if none was active."""
        pending = self._take_pending()
        user_message = pending.user_message
        conversation = (
            self.find_conversation(pending.target_conversation_id)
            if pending.target_conversation_id
            else None
        )

        if conversation is not None:
            conversation.messages.extend([user_message, assistant_message])
        else:
            # Failed rounds shown before this one are not in any conversation yet
            earlier = (
                [m for m in self.displayed_messages if m.id != user_message.id]
                if pending.epoch == self.epoch
                else []
            )
            messages = [*earlier, user_message, assistant_message]
            first_user = next(m for m in messages if m.role == "user")
            conversation = Conversation(
                id=f"chat-{uuid.uuid4().hex[:12]}",
                title=make_title(first_user.content.text, title_max_chars),
                messages=messages,
            )
            self.conversations.insert(0, conversation)

        if pending.epoch == self.epoch:
            self.active_conversation_id = conversation.id
            self.displayed_messages = list(conversation.messages)
            self.state = ChatState.ACTIVE_CONVERSATION
        return conversation

    def fail_submit(self, error_message: Message) -> None:
        """Record a failed round trip without dropping the user's message.

        With an active conversation both messages are appended to it.  Without
        one, no conversation is created yet; the messages stay on display and
        are recorded by the next successful submit.
        """
        pending = self._take_pending()
        conversation = (
            self.find_conversation(pending.target_conversation_id)
            if pending.target_conversation_id
            else None
        )
        if conversation is not None:
            conversation.messages.extend([pending.user_message, error_message])

        if pending.epoch != self.epoch:
            return
        if conversation is not None:
            self.displayed_messages = list(conversation.messages)
            self.state = ChatState.ACTIVE_CONVERSATION
        else:
            self.displayed_messages = [*self.displayed_messages, error_message]
            self.state = ChatState.NO_ACTIVE_CONVERSATION

    def new_chat(self) -> None:
        """Leave the active conversation; history is kept."""
        self.epoch += 1
        self.active_conversation_id = None
        self.displayed_messages = []
        self.state = ChatState.NO_ACTIVE_CONVERSATION

    def select_conversation(self, conversation_id: str) -> Conversation:
        conversation = self.find_conversation(conversation_id)
        if conversation is None:
            raise ConversationNotFoundError(conversation_id)
        self.epoch += 1
        self.active_conversation_id = conversation.id
        self.displayed_messages = list(conversation.messages)
        self.state = ChatState.ACTIVE_CONVERSATION
        return conversation

    def _take_pending(self) -> PendingSubmit:
        if self.pending is None:
            raise RuntimeError("no submission in flight")
        pending, self.pending = self.pending, None
        return pending
