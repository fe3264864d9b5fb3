"""Stateless generation API — run one generation function directly.

``POST /api/generate/{task}`` validates the body against the task's request
schema (422 on violation), issues exactly one generation call and returns the
validated response.  A failed call is reported as 502.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Body, HTTPException
from pydantic import ValidationError

from agents.generation import GENERATION_FUNCTIONS
from api.common import to_http_error
from errors.exceptions import GenerationError
from models.generation import GenerationTask

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/generate", tags=["generate"])


@router.post("/{task}")
async def generate(task: GenerationTask, body: dict = Body(...)):
    request_cls, fn = GENERATION_FUNCTIONS[task]
    try:
        req = request_cls.model_validate(body)
    except ValidationError as e:
        raise HTTPException(
            status_code=422,
            detail=e.errors(include_url=False, include_context=False),
        ) from e

    try:
        result = await fn(req)
    except GenerationError as e:
        logger.exception("Stateless generation failed: %s", task.value)
        raise to_http_error(e) from e
    return result.model_dump(by_alias=True)
