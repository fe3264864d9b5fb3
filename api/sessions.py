"""Workspace session API — create, read and delete a client's workspace."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Response

from api.common import load_session
from models.request import SessionCreateResponse
from services.session_store import (
    WorkspaceSession,
    generate_session_id,
    get_session_store,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/sessions", tags=["sessions"])


@router.post("", response_model=SessionCreateResponse, status_code=201)
async def create_session():
    """Open a fresh workspace with every panel in its initial state."""
    session = WorkspaceSession(session_id=generate_session_id())
    await get_session_store().save(session)
    logger.info("[Session] created %s", session.session_id)
    return SessionCreateResponse(session_id=session.session_id, session=session)


@router.get("/{session_id}", response_model=WorkspaceSession)
async def get_session(session: WorkspaceSession = Depends(load_session)):
    return session


@router.delete("/{session_id}", status_code=204)
async def delete_session(session: WorkspaceSession = Depends(load_session)):
    await get_session_store().delete(session.session_id)
    logger.info("[Session] deleted %s", session.session_id)
    return Response(status_code=204)
