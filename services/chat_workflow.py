"""Chat workflow — one submit → one contextual-solution call → panel update.

The panel is passed in explicitly; this module holds no state of its own.
Generation failures never escape: they become an error message in the chat.
"""

from __future__ import annotations

import asyncio
import logging

from agents.generation import generate_contextual_solution
from config.settings import get_settings
from errors.exceptions import GenerationError
from models.chat import ChatPanel, ExplainedCode, Message
from models.generation import ChatTask, ContextualSolutionRequest

logger = logging.getLogger(__name__)

ACTION_CARDS: list[dict[str, str]] = [
    {
        "task": "generate",
        "title": "Generate Code",
        "example": "e.g., 'Create a React button with a primary variant.'",
        "message": "Create a React button with a primary variant.",
    },
    {
        "task": "debug",
        "title": "Debug Code",
        "example": "e.g., 'What is wrong in the code and How to fix it'",
        "message": "What is wrong in the code and How to fix it",
    },
    {
        "task": "explain",
        "title": "Explain Code",
        "example": "e.g., 'What does this code do and how?'",
        "message": "What does this code do and how?",
    },
]


def set_options(
    panel: ChatPanel,
    *,
    task: ChatTask | None = None,
    language: str | None = None,
) -> None:
    """Update the task / language selectors."""
    if task is not None:
        panel.task = task
    if language is not None and language.strip():
        panel.language = language.strip()


def build_request(
    panel: ChatPanel,
    message: str,
    code_context: str | None = None,
) -> ContextualSolutionRequest:
    """Build the solution request for *message* with the panel's selectors.

    The message is used both as the problem description and the user request.
    """
    return ContextualSolutionRequest(
        problem_description=message,
        user_request=message,
        code_context=code_context,
        language=panel.language,
        task=panel.task,
    )


async def send_message(
    panel: ChatPanel,
    request: ContextualSolutionRequest,
) -> Message:
    """Submit *request* from the chat panel and record the outcome.

    Returns the assistant message that was recorded: an ``explained_code``
    reply on success, an ``error`` notice on failure.

    Raises:
        PanelBusyError: A previous submission is still in flight.
    """
    user_message = panel.begin_submit(request.user_request)
    logger.info(
        "[Chat] submit message_id=%s active=%s message=%.60s",
        user_message.id, panel.active_conversation_id, request.user_request,
    )

    try:
        result = await generate_contextual_solution(request)
    except GenerationError:
        logger.exception("[Chat] contextual solution failed")
        error_message = Message.error()
        panel.fail_submit(error_message)
        return error_message
    except asyncio.CancelledError:
        panel.fail_submit(Message.error())
        raise

    assistant_message = Message.assistant(
        ExplainedCode(
            explanation=result.explanation,
            code=result.suggested_solution,
            language=request.language,
        )
    )
    conversation = panel.complete_submit(
        assistant_message,
        title_max_chars=get_settings().chat_title_max_chars,
    )
    logger.info(
        "[Chat] recorded conversation=%s messages=%d",
        conversation.id, len(conversation.messages),
    )
    return assistant_message
