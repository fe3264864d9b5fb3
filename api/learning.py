"""Learning-path wizard endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from api.common import load_session, save_session, to_http_error
from errors.exceptions import WorkflowError
from models.generation import TopicListRequest
from models.panels import LearningPathPanel
from models.request import SelectTopicRequest
from services import learning_path
from services.session_store import WorkspaceSession

router = APIRouter(prefix="/api/sessions/{session_id}/learning-path", tags=["learning-path"])


@router.get("", response_model=LearningPathPanel)
async def get_wizard(session: WorkspaceSession = Depends(load_session)):
    return session.learning_path


@router.post("/topics", response_model=LearningPathPanel)
async def fetch_topics(
    req: TopicListRequest,
    session: WorkspaceSession = Depends(load_session),
):
    """Choose a language and load its topic list."""
    try:
        await learning_path.fetch_topics(session.learning_path, req)
    except WorkflowError as e:
        raise to_http_error(e) from e
    finally:
        await save_session(session)
    return session.learning_path


@router.post("/topic", response_model=LearningPathPanel)
async def select_topic(
    req: SelectTopicRequest,
    session: WorkspaceSession = Depends(load_session),
):
    """Choose a topic and load its content."""
    try:
        await learning_path.select_topic(session.learning_path, req.topic)
    except WorkflowError as e:
        raise to_http_error(e) from e
    finally:
        await save_session(session)
    return session.learning_path


@router.post("/back", response_model=LearningPathPanel)
async def back(session: WorkspaceSession = Depends(load_session)):
    try:
        learning_path.go_back(session.learning_path)
    except WorkflowError as e:
        raise to_http_error(e) from e
    await save_session(session)
    return session.learning_path


@router.post("/dismiss-error", response_model=LearningPathPanel)
async def dismiss_error(session: WorkspaceSession = Depends(load_session)):
    learning_path.dismiss_error(session.learning_path)
    await save_session(session)
    return session.learning_path


@router.post("/exit", response_model=LearningPathPanel)
async def exit_wizard(session: WorkspaceSession = Depends(load_session)):
    try:
        learning_path.exit_wizard(session.learning_path)
    except WorkflowError as e:
        raise to_http_error(e) from e
    await save_session(session)
    return session.learning_path
