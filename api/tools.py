"""Code-generator and stepwise-guide panel endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from api.common import load_session, save_session, to_http_error
from errors.exceptions import WorkflowError
from models.generation import CodeSnippetRequest, StepwiseGuidanceRequest
from models.panels import CodeGeneratorPanel, StepwiseGuidePanel
from services.session_store import WorkspaceSession
from services.tool_panels import generate_code, generate_guide

router = APIRouter(prefix="/api/sessions/{session_id}", tags=["tools"])


@router.post("/code-generator", response_model=CodeGeneratorPanel)
async def code_generator(
    req: CodeSnippetRequest,
    session: WorkspaceSession = Depends(load_session),
):
    try:
        await generate_code(session.code_generator, req)
    except WorkflowError as e:
        raise to_http_error(e) from e
    finally:
        await save_session(session)
    return session.code_generator


@router.post("/stepwise-guide", response_model=StepwiseGuidePanel)
async def stepwise_guide(
    req: StepwiseGuidanceRequest,
    session: WorkspaceSession = Depends(load_session),
):
    try:
        await generate_guide(session.stepwise_guide, req)
    except WorkflowError as e:
        raise to_http_error(e) from e
    finally:
        await save_session(session)
    return session.stepwise_guide
