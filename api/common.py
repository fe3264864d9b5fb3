"""Shared helpers for the session-scoped routers."""

from __future__ import annotations

import logging

from fastapi import HTTPException

from errors.exceptions import AssistantError
from models.errors import classify_error, format_error
from services.session_store import WorkspaceSession, get_session_store

logger = logging.getLogger(__name__)


def to_http_error(exc: AssistantError) -> HTTPException:
    """Convert a service exception into an ``HTTPException`` with a coded detail."""
    code, status = classify_error(exc)
    logger.info("Request rejected: %s (%s)", code.value, exc)
    return HTTPException(status_code=status, detail=format_error(code, str(exc)))


async def load_session(session_id: str) -> WorkspaceSession:
    """FastAPI dependency: the workspace session named in the path."""
    try:
        return await get_session_store().require(session_id)
    except AssistantError as e:
        raise to_http_error(e) from e


async def save_session(session: WorkspaceSession) -> None:
    await get_session_store().save(session)
