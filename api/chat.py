"""Chat API — the multi-conversation chat panel of a workspace.

Endpoints:
- ``POST /api/sessions/{id}/chat/messages`` — submit a message (one generation call)
- ``POST /api/sessions/{id}/chat/new``      — start a new chat
- ``POST /api/sessions/{id}/chat/select``   — reopen a conversation from history
- ``PUT  /api/sessions/{id}/chat/options``  — task / language selectors
- ``GET  /api/chat/action-cards``           — canned prompts for the empty chat
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from api.common import load_session, save_session, to_http_error
from errors.exceptions import WorkflowError
from models.chat import ChatPanel
from models.request import (
    ChatMessageRequest,
    ChatMessageResponse,
    ChatOptionsRequest,
    SelectConversationRequest,
)
from services.chat_workflow import ACTION_CARDS, build_request, send_message, set_options
from services.session_store import WorkspaceSession

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["chat"])


@router.get("/chat/action-cards")
async def action_cards():
    return {"cards": ACTION_CARDS}


@router.post(
    "/sessions/{session_id}/chat/messages",
    response_model=ChatMessageResponse,
)
async def post_message(
    req: ChatMessageRequest,
    session: WorkspaceSession = Depends(load_session),
):
    """Send one chat message.

    A generation failure is not an HTTP error: the reply is an ``error``
    message and the chat stays usable.
    """
    panel = session.chat
    solution_request = build_request(panel, req.message, req.code_context)
    try:
        reply = await send_message(panel, solution_request)
    except WorkflowError as e:
        raise to_http_error(e) from e
    finally:
        await save_session(session)
    return ChatMessageResponse(reply=reply, chat=panel)


@router.post("/sessions/{session_id}/chat/new", response_model=ChatPanel)
async def new_chat(session: WorkspaceSession = Depends(load_session)):
    session.chat.new_chat()
    await save_session(session)
    return session.chat


@router.post("/sessions/{session_id}/chat/select", response_model=ChatPanel)
async def select_conversation(
    req: SelectConversationRequest,
    session: WorkspaceSession = Depends(load_session),
):
    try:
        session.chat.select_conversation(req.conversation_id)
    except WorkflowError as e:
        raise to_http_error(e) from e
    await save_session(session)
    return session.chat


@router.put("/sessions/{session_id}/chat/options", response_model=ChatPanel)
async def update_options(
    req: ChatOptionsRequest,
    session: WorkspaceSession = Depends(load_session),
):
    set_options(session.chat, task=req.task, language=req.language)
    await save_session(session)
    return session.chat
