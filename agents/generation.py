"""Generation functions — one async function per generation task.

Every function follows the same single-attempt pipeline::

    validated request → build_*_prompt(request) → one model call → decode_response()

Any transport, provider or decode failure is raised as a single
:class:`GenerationError`; callers never see partial results.
"""

from __future__ import annotations

import logging
import time
from typing import Awaitable, Callable, TypeVar

from pydantic import BaseModel
from pydantic_ai import Agent
from pydantic_ai.models import Model

from agents.provider import resolve_model
from config.llm_config import LLMConfig
from config.prompts.code_snippet import build_code_snippet_prompt, build_stepwise_prompt
from config.prompts.learning import build_topic_information_prompt, build_topic_list_prompt
from config.prompts.output_format import GENERATION_SYSTEM_PROMPT
from config.prompts.quiz import build_quiz_prompt
from config.prompts.solution import build_solution_prompt
from config.settings import get_settings
from errors.exceptions import GenerationError
from models.generation import (
    CodeSnippetRequest,
    CodeSnippetResponse,
    ContextualSolutionRequest,
    ContextualSolutionResponse,
    GenerationTask,
    QuizRequest,
    QuizResponse,
    StepwiseGuidanceRequest,
    StepwiseGuidanceResponse,
    TopicContent,
    TopicInformationRequest,
    TopicListRequest,
    TopicListResponse,
)
from services.response_decoder import decode_response

logger = logging.getLogger(__name__)

ResponseT = TypeVar("ResponseT", bound=BaseModel)

# Task-level LLM tuning
SOLUTION_LLM_CONFIG = LLMConfig(temperature=0.4)
CODE_LLM_CONFIG = LLMConfig(temperature=0.2)
LEARNING_LLM_CONFIG = LLMConfig(temperature=0.3)
QUIZ_LLM_CONFIG = LLMConfig(temperature=0.7)

# Module-level agent, reused across requests.  The model is chosen per call
# (see ``agents.provider.resolve_model``).  Raw text output is decoded by
# ``decode_response`` so validation stays independent of the call.
_generation_agent = Agent(
    output_type=str,
    system_prompt=GENERATION_SYSTEM_PROMPT,
)


async def _run_generation(
    task: GenerationTask,
    prompt: str,
    response_cls: type[ResponseT],
    *,
    model: Model | str | None,
    llm_config: LLMConfig,
) -> ResponseT:
    """Issue exactly one model call for *task* and decode its output."""
    config = get_settings().get_default_llm_config().merge(llm_config)
    start = time.monotonic()

    try:
        model_instance, model_name = resolve_model(model, task.value)
        result = await _generation_agent.run(
            prompt,
            model=model_instance,
            model_settings=config.to_model_settings(),
        )
    except Exception as e:
        logger.warning("Generation %s: model call failed: %s", task.value, e)
        raise GenerationError(task.value, f"{type(e).__name__}: {e}") from e

    response = decode_response(response_cls, str(result.output), task=task.value)

    logger.info(
        "Generation %s: model=%s elapsed_ms=%d",
        task.value,
        model_name,
        int((time.monotonic() - start) * 1000),
    )
    return response


async def generate_contextual_solution(
    req: ContextualSolutionRequest,
    *,
    model: Model | str | None = None,
) -> ContextualSolutionResponse:
    """Understand a coding problem in context and suggest a solution."""
    logger.info(
        "Contextual solution: language=%s task=%s request=%.60s",
        req.language, req.task, req.user_request,
    )
    return await _run_generation(
        GenerationTask.CONTEXTUAL_SOLUTION,
        build_solution_prompt(req),
        ContextualSolutionResponse,
        model=model,
        llm_config=SOLUTION_LLM_CONFIG,
    )


async def generate_code_snippet(
    req: CodeSnippetRequest,
    *,
    model: Model | str | None = None,
) -> CodeSnippetResponse:
    """Generate a code snippet from a natural-language description."""
    return await _run_generation(
        GenerationTask.CODE_SNIPPET,
        build_code_snippet_prompt(req),
        CodeSnippetResponse,
        model=model,
        llm_config=CODE_LLM_CONFIG,
    )


async def generate_stepwise_guidance(
    req: StepwiseGuidanceRequest,
    *,
    model: Model | str | None = None,
) -> StepwiseGuidanceResponse:
    """Break a complex coding procedure into numbered steps with code."""
    return await _run_generation(
        GenerationTask.STEPWISE_GUIDANCE,
        build_stepwise_prompt(req),
        StepwiseGuidanceResponse,
        model=model,
        llm_config=CODE_LLM_CONFIG,
    )


async def get_topics_for_language(
    req: TopicListRequest,
    *,
    model: Model | str | None = None,
) -> TopicListResponse:
    """List learning topics for a programming language."""
    return await _run_generation(
        GenerationTask.TOPIC_LIST,
        build_topic_list_prompt(req),
        TopicListResponse,
        model=model,
        llm_config=LEARNING_LLM_CONFIG,
    )


async def get_topic_information(
    req: TopicInformationRequest,
    *,
    model: Model | str | None = None,
) -> TopicContent:
    """Explain one topic of a language in 2-4 sections."""
    return await _run_generation(
        GenerationTask.TOPIC_INFORMATION,
        build_topic_information_prompt(req),
        TopicContent,
        model=model,
        llm_config=LEARNING_LLM_CONFIG,
    )


async def generate_quiz(
    req: QuizRequest,
    *,
    model: Model | str | None = None,
) -> QuizResponse:
    """Generate a multiple-choice quiz about a language."""
    return await _run_generation(
        GenerationTask.QUIZ,
        build_quiz_prompt(req),
        QuizResponse,
        model=model,
        llm_config=QUIZ_LLM_CONFIG,
    )


# task → (request model, generation function); used by the stateless API
GENERATION_FUNCTIONS: dict[
    GenerationTask,
    tuple[type[BaseModel], Callable[..., Awaitable[BaseModel]]],
] = {
    GenerationTask.CONTEXTUAL_SOLUTION: (ContextualSolutionRequest, generate_contextual_solution),
    GenerationTask.CODE_SNIPPET: (CodeSnippetRequest, generate_code_snippet),
    GenerationTask.STEPWISE_GUIDANCE: (StepwiseGuidanceRequest, generate_stepwise_guidance),
    GenerationTask.TOPIC_LIST: (TopicListRequest, get_topics_for_language),
    GenerationTask.TOPIC_INFORMATION: (TopicInformationRequest, get_topic_information),
    GenerationTask.QUIZ: (QuizRequest, generate_quiz),
}
