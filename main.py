"""FastAPI entry point for the Coding Assistant workspace service."""

import asyncio
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.chat import router as chat_router
from api.generate import router as generate_router
from api.health import router as health_router
from api.learning import router as learning_router
from api.quiz import router as quiz_router
from api.sessions import router as sessions_router
from api.tools import router as tools_router
from config.settings import get_settings
from services.middleware import RequestIdMiddleware
from services.session_store import get_session_store, periodic_cleanup

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle — session store and its cleanup task."""
    get_session_store()
    cleanup_task = asyncio.create_task(
        periodic_cleanup(interval_seconds=settings.session_cleanup_interval)
    )
    logger.info("Coding Assistant started (default model: %s)", settings.default_model)

    yield

    cleanup_task.cancel()
    try:
        await cleanup_task
    except asyncio.CancelledError:
        pass


app = FastAPI(
    title="Coding Assistant",
    description="AI coding assistant: chat, code generation, guides, learning paths and quizzes",
    version="0.1.0",
    lifespan=lifespan,
)

# ── Middleware stack (outermost first): CORS → RequestId → route handler
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestIdMiddleware)

# ── Register routers ────────────────────────────────────────
app.include_router(health_router)
app.include_router(sessions_router)
app.include_router(chat_router)
app.include_router(tools_router)
app.include_router(learning_router)
app.include_router(quiz_router)
app.include_router(generate_router)


if __name__ == "__main__":
    if settings.debug:
        uvicorn.run(
            "main:app",
            host="0.0.0.0",
            port=settings.service_port,
            reload=True,
        )
    else:
        # Sessions live in process memory: a single worker keeps them consistent.
        uvicorn.run(
            "main:app",
            host="0.0.0.0",
            port=settings.service_port,
            timeout_keep_alive=120,
        )
