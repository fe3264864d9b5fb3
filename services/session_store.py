"""Workspace session store — server-side state for one browser client.

A workspace session owns every panel's state (chat history, code generator,
stepwise guide, learning path, quiz).  Provides an abstract interface with an
in-memory implementation; nothing survives a process restart.
"""

from __future__ import annotations

import asyncio
import logging
import time
import uuid
from abc import ABC, abstractmethod

from pydantic import Field

from errors.exceptions import SessionNotFoundError
from models.base import CamelModel
from models.chat import ChatPanel
from models.panels import (
    CodeGeneratorPanel,
    LearningPathPanel,
    QuizPanel,
    StepwiseGuidePanel,
)

logger = logging.getLogger(__name__)

# ── Data Models ──────────────────────────────────────────────


class WorkspaceSession(CamelModel):
    """All panel state for one client."""

    session_id: str
    chat: ChatPanel = Field(default_factory=ChatPanel)
    code_generator: CodeGeneratorPanel = Field(default_factory=CodeGeneratorPanel)
    stepwise_guide: StepwiseGuidePanel = Field(default_factory=StepwiseGuidePanel)
    learning_path: LearningPathPanel = Field(default_factory=LearningPathPanel)
    quiz: QuizPanel = Field(default_factory=QuizPanel)
    created_at: float = Field(default_factory=time.time)
    updated_at: float = Field(default_factory=time.time)

    def touch(self) -> None:
        self.updated_at = time.time()

    @property
    def is_busy(self) -> bool:
        """True while any panel has a generation call in flight."""
        return any(
            panel.loading
            for panel in (self.code_generator, self.stepwise_guide, self.learning_path, self.quiz)
        ) or self.chat.is_loading


# ── Abstract Interface ───────────────────────────────────────


class SessionStore(ABC):
    """Abstract workspace store — implement for different backends."""

    @abstractmethod
    async def get(self, session_id: str) -> WorkspaceSession | None:
        """Retrieve a session by ID.  Returns None if not found or expired."""
        ...

    @abstractmethod
    async def save(self, session: WorkspaceSession) -> None:
        """Persist a session (create or update)."""
        ...

    @abstractmethod
    async def delete(self, session_id: str) -> None:
        """Remove a session."""
        ...

    @abstractmethod
    async def cleanup_expired(self) -> int:
        """Remove all expired sessions.  Returns count removed."""
        ...

    async def require(self, session_id: str) -> WorkspaceSession:
        """Like :meth:`get` but raises :class:`SessionNotFoundError`."""
        session = await self.get(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        return session


# ── In-Memory Implementation ────────────────────────────────


class InMemorySessionStore(SessionStore):
    """In-memory store with idle-TTL expiration.

    Sessions are mutated in place by the workflows, so ``save`` only needs to
    register new sessions.  A session with a call in flight never expires.
    """

    def __init__(self, ttl_seconds: int = 3600):
        self._store: dict[str, WorkspaceSession] = {}
        self._ttl = ttl_seconds

    def _is_expired(self, session: WorkspaceSession, now: float | None = None) -> bool:
        now = time.time() if now is None else now
        return (now - session.updated_at) > self._ttl and not session.is_busy

    async def get(self, session_id: str) -> WorkspaceSession | None:
        session = self._store.get(session_id)
        if session is None:
            return None
        if self._is_expired(session):
            del self._store[session_id]
            logger.debug("Session expired: %s", session_id)
            return None
        return session

    async def save(self, session: WorkspaceSession) -> None:
        session.touch()
        self._store[session.session_id] = session

    async def delete(self, session_id: str) -> None:
        self._store.pop(session_id, None)

    async def cleanup_expired(self) -> int:
        now = time.time()
        expired = [
            sid for sid, s in self._store.items()
            if self._is_expired(s, now)
        ]
        for sid in expired:
            del self._store[sid]
        if expired:
            logger.info("Cleaned up %d expired workspace sessions", len(expired))
        return len(expired)

    @property
    def size(self) -> int:
        """Number of sessions currently stored (may include expired)."""
        return len(self._store)


# ── Module-level Singleton ───────────────────────────────────

_store: SessionStore | None = None


def get_session_store() -> SessionStore:
    """Get the singleton session store instance."""
    global _store
    if _store is None:
        from config.settings import get_settings

        ttl = get_settings().session_ttl
        _store = InMemorySessionStore(ttl_seconds=ttl)
        logger.info("Initialized InMemorySessionStore (TTL=%ds)", ttl)
    return _store


def generate_session_id() -> str:
    """Generate a new workspace session ID."""
    return f"ws-{uuid.uuid4().hex[:12]}"


# ── Background Cleanup Task ──────────────────────────────────


async def periodic_cleanup(interval_seconds: int = 300) -> None:
    """Background task that periodically evicts idle sessions.

    Should be started as an ``asyncio.Task`` in the FastAPI lifespan.
    """
    store = get_session_store()
    while True:
        await asyncio.sleep(interval_seconds)
        try:
            await store.cleanup_expired()
        except Exception:
            logger.exception("Session store cleanup failed")
