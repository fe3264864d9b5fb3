"""Structured error codes shared between the API and the browser client.

HTTP error details follow the format::

    {ERROR_CODE}: {human_readable_detail}
"""

from __future__ import annotations

from enum import Enum

from errors.exceptions import (
    AssistantError,
    ConversationNotFoundError,
    GenerationError,
    InvalidAnswerError,
    PanelBusyError,
    SessionNotFoundError,
    WorkflowStateError,
)


class ErrorCode(str, Enum):
    """Error codes returned in HTTP error details."""

    INVALID_REQUEST = "INVALID_REQUEST"
    SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
    CONVERSATION_NOT_FOUND = "CONVERSATION_NOT_FOUND"
    PANEL_BUSY = "PANEL_BUSY"
    INVALID_STATE = "INVALID_STATE"
    LLM_PROVIDER_ERROR = "LLM_PROVIDER_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


# code, HTTP status
_ERROR_MAP: list[tuple[type[AssistantError], ErrorCode, int]] = [
    (SessionNotFoundError, ErrorCode.SESSION_NOT_FOUND, 404),
    (ConversationNotFoundError, ErrorCode.CONVERSATION_NOT_FOUND, 404),
    (PanelBusyError, ErrorCode.PANEL_BUSY, 409),
    (WorkflowStateError, ErrorCode.INVALID_STATE, 409),
    (InvalidAnswerError, ErrorCode.INVALID_REQUEST, 400),
    (GenerationError, ErrorCode.LLM_PROVIDER_ERROR, 502),
]


def format_error(code: ErrorCode, detail: str) -> str:
    """Format an error for an HTTP ``detail`` field.

    Returns:
        ``{ERROR_CODE}: {detail}``
    """
    return f"{code.value}: {detail}"


def classify_error(exc: AssistantError) -> tuple[ErrorCode, int]:
    """Map a service exception to its ``(ErrorCode, http_status)`` pair.

    First match wins; unknown errors fall back to ``INTERNAL_ERROR``/500.
    """
    for exc_type, code, status in _ERROR_MAP:
        if isinstance(exc, exc_type):
            return code, status
    return ErrorCode.INTERNAL_ERROR, 500
