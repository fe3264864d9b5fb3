"""Health, model and language listing endpoints."""

from fastapi import APIRouter

from config.languages import LANGUAGE_OPTIONS, LEARNING_LANGUAGES
from config.settings import get_settings

router = APIRouter(prefix="/api", tags=["meta"])


@router.get("/health")
async def health():
    return {"status": "healthy"}


@router.get("/models")
async def list_models():
    """List supported model examples and the current default."""
    settings = get_settings()
    return {
        "default": settings.default_model,
        "examples": [
            "openai/gpt-4o-mini",
            "openai/gpt-4o",
            "anthropic/claude-sonnet-4-20250514",
            "gemini/gemini-2.0-flash",
            "dashscope/qwen-max",
            "zai/glm-4.7",
        ],
    }


@router.get("/languages")
async def list_languages():
    """Language selector options for every panel."""
    return {
        "chat": [{"value": value, "label": label} for value, label in LANGUAGE_OPTIONS],
        "learning": LEARNING_LANGUAGES,
    }
