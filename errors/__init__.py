"""Custom exception hierarchy for the code assistant service."""

from errors.exceptions import (
    AssistantError,
    ConversationNotFoundError,
    GenerationError,
    InvalidAnswerError,
    PanelBusyError,
    ResponseSchemaError,
    SessionNotFoundError,
    WorkflowError,
    WorkflowStateError,
)

__all__ = [
    "AssistantError",
    "ConversationNotFoundError",
    "GenerationError",
    "InvalidAnswerError",
    "PanelBusyError",
    "ResponseSchemaError",
    "SessionNotFoundError",
    "WorkflowError",
    "WorkflowStateError",
]
