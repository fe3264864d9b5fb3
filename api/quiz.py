"""Quiz panel endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from api.common import load_session, save_session, to_http_error
from errors.exceptions import WorkflowError
from models.generation import QuizRequest
from models.panels import QuizPanel
from models.request import QuizAnswerRequest, QuizCheckResponse, QuizNextResponse
from services import quiz_workflow
from services.session_store import WorkspaceSession

router = APIRouter(prefix="/api/sessions/{session_id}/quiz", tags=["quiz"])


@router.get("", response_model=QuizPanel)
async def get_quiz(session: WorkspaceSession = Depends(load_session)):
    return session.quiz


@router.post("/start", response_model=QuizPanel)
async def start(
    req: QuizRequest,
    session: WorkspaceSession = Depends(load_session),
):
    try:
        await quiz_workflow.start_quiz(session.quiz, req)
    except WorkflowError as e:
        raise to_http_error(e) from e
    finally:
        await save_session(session)
    return session.quiz


@router.post("/answer", response_model=QuizPanel)
async def answer(
    req: QuizAnswerRequest,
    session: WorkspaceSession = Depends(load_session),
):
    try:
        quiz_workflow.select_answer(session.quiz, req.option)
    except WorkflowError as e:
        raise to_http_error(e) from e
    await save_session(session)
    return session.quiz


@router.post("/check", response_model=QuizCheckResponse)
async def check(session: WorkspaceSession = Depends(load_session)):
    try:
        correct = quiz_workflow.check_answer(session.quiz)
    except WorkflowError as e:
        raise to_http_error(e) from e
    await save_session(session)
    return QuizCheckResponse(correct=correct, quiz=session.quiz)


@router.post("/next", response_model=QuizNextResponse)
async def next_question(session: WorkspaceSession = Depends(load_session)):
    try:
        summary = quiz_workflow.next_question(session.quiz)
    except WorkflowError as e:
        raise to_http_error(e) from e
    await save_session(session)
    return QuizNextResponse(finished=summary is not None, summary=summary, quiz=session.quiz)


@router.post("/exit", response_model=QuizPanel)
async def exit_quiz(session: WorkspaceSession = Depends(load_session)):
    try:
        quiz_workflow.exit_quiz(session.quiz)
    except WorkflowError as e:
        raise to_http_error(e) from e
    await save_session(session)
    return session.quiz
