"""Domain-specific exceptions for the code assistant service.

These exceptions allow the workflow and API layers to distinguish between
generation failures (converted to a user-visible panel message) and workflow
misuse (rejected with an HTTP error).
"""

from __future__ import annotations


class AssistantError(Exception):
    """Base class for all service errors."""


# ── Generation ───────────────────────────────────────────────


class GenerationError(AssistantError):
    """A generation call failed (transport, provider or malformed output)."""

    def __init__(self, task: str, message: str) -> None:
        self.task = task
        super().__init__(f"Generation '{task}' failed: {message}")


class ResponseSchemaError(GenerationError):
    """The model answered, but its output does not satisfy the response schema.

    Carries one ``"field: message"`` string per violated constraint so the
    failure can be logged at field level.
    """

    def __init__(
        self,
        task: str,
        message: str,
        field_errors: list[str] | None = None,
    ) -> None:
        self.field_errors = field_errors or []
        detail = message
        if self.field_errors:
            detail = f"{message} ({'; '.join(self.field_errors)})"
        super().__init__(task, detail)


# ── Workflow ─────────────────────────────────────────────────


class WorkflowError(AssistantError):
    """Base class for operations a panel cannot perform in its current state."""


class PanelBusyError(WorkflowError):
    """A generation call is already in flight for this panel."""

    def __init__(self, panel: str) -> None:
        self.panel = panel
        super().__init__(f"{panel} is waiting for a response")


class WorkflowStateError(WorkflowError):
    """The requested transition is not allowed from the current state."""

    def __init__(self, panel: str, state: str, action: str) -> None:
        self.panel = panel
        self.state = state
        self.action = action
        super().__init__(f"{panel} cannot '{action}' in state '{state}'")


class InvalidAnswerError(WorkflowError):
    """No quiz option is selected, or it is not one of the current question's options."""

    def __init__(self, option: str | None) -> None:
        self.option = option
        if option is None:
            super().__init__("No answer selected")
        else:
            super().__init__(f"'{option}' is not an option of the current question")


class ConversationNotFoundError(WorkflowError):
    """A referenced conversation does not exist in the chat history."""

    def __init__(self, conversation_id: str) -> None:
        self.conversation_id = conversation_id
        super().__init__(f"Conversation '{conversation_id}' not found")


# ── Sessions ─────────────────────────────────────────────────


class SessionNotFoundError(AssistantError):
    """The workspace session does not exist or has expired."""

    def __init__(self, session_id: str) -> None:
        self.session_id = session_id
        super().__init__(f"Session '{session_id}' not found")
