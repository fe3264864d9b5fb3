"""Quiz workflow — setup → in_progress → answer_revealed → next / finished.

Correctness is plain string equality between the selected option and the
question's ``correct_answer``.
"""

from __future__ import annotations

import logging

from agents.generation import generate_quiz
from errors.exceptions import GenerationError, InvalidAnswerError, PanelBusyError
from models.generation import QuizRequest
from models.panels import QuizPanel, QuizStep, QuizSummary

logger = logging.getLogger(__name__)

QUIZ_FAILED = "Failed to generate the quiz. Please try again."
QUIZ_EMPTY = "The AI couldn't generate a quiz for this language. Please try again."


async def start_quiz(panel: QuizPanel, request: QuizRequest) -> None:
    """Generate a quiz and show its first question with nothing selected.

    Starting again from any step discards the current quiz.
    """
    panel.start_loading("quiz")
    panel.language = request.language
    panel.questions = []
    panel.step = QuizStep.SETUP
    panel.reset_progress()
    try:
        result = await generate_quiz(request)
        if result.questions:
            panel.questions = result.questions
            panel.step = QuizStep.IN_PROGRESS
            logger.info(
                "[Quiz] started language=%s questions=%d",
                request.language, len(result.questions),
            )
        else:
            panel.error = QUIZ_EMPTY
    except GenerationError:
        logger.exception("[Quiz] generation failed language=%s", request.language)
        panel.error = QUIZ_FAILED
    finally:
        panel.loading = False


def select_answer(panel: QuizPanel, option: str) -> None:
    panel.require_step(QuizStep.IN_PROGRESS, "select_answer")
    question = panel.current_question
    if question is None or option not in question.options:
        raise InvalidAnswerError(option)
    panel.selected_answer = option


def check_answer(panel: QuizPanel) -> bool:
    """Reveal the answer; returns whether the selection was correct."""
    panel.require_step(QuizStep.IN_PROGRESS, "check_answer")
    if panel.selected_answer is None:
        raise InvalidAnswerError(None)
    panel.step = QuizStep.ANSWER_REVEALED
    correct = bool(panel.is_correct)
    if correct:
        panel.correct_count += 1
    return correct


def next_question(panel: QuizPanel) -> QuizSummary | None:
    """Advance to the next question, or finish the quiz after the last one.

    Returns the final :class:`QuizSummary` when the quiz finished (the panel
    is back in ``setup``), otherwise ``None``.
    """
    panel.require_step(QuizStep.ANSWER_REVEALED, "next_question")
    if not panel.is_last_question:
        panel.current_index += 1
        panel.selected_answer = None
        panel.step = QuizStep.IN_PROGRESS
        return None

    summary = QuizSummary(
        language=panel.language,
        correct=panel.correct_count,
        total=len(panel.questions),
    )
    logger.info("[Quiz] finished %s: %d/%d", summary.language, summary.correct, summary.total)
    panel.reset()
    return summary


def exit_quiz(panel: QuizPanel) -> None:
    if panel.loading:
        raise PanelBusyError("quiz")
    panel.reset()
