"""Code-generator and stepwise-guide panel workflows."""

from __future__ import annotations

import logging

from agents.generation import generate_code_snippet, generate_stepwise_guidance
from errors.exceptions import GenerationError
from models.generation import CodeSnippetRequest, StepwiseGuidanceRequest
from models.panels import CodeGeneratorPanel, StepwiseGuidePanel

logger = logging.getLogger(__name__)

CODE_GENERATION_FAILED = "Failed to generate code snippet. Please try again."
GUIDANCE_FAILED = "Failed to generate guidance. Please try again."
GUIDANCE_EMPTY = "The AI couldn't generate steps for this query. Please try rephrasing it."


async def generate_code(panel: CodeGeneratorPanel, request: CodeSnippetRequest) -> None:
    """Generate a snippet for the panel; the previous result is cleared first."""
    panel.start_loading("code_generator")
    panel.description = request.description
    panel.generated_code = None
    try:
        result = await generate_code_snippet(request)
        panel.generated_code = result.code
    except GenerationError:
        logger.exception("[CodeGenerator] generation failed")
        panel.error = CODE_GENERATION_FAILED
    finally:
        panel.loading = False


async def generate_guide(panel: StepwiseGuidePanel, request: StepwiseGuidanceRequest) -> None:
    """Generate stepwise guidance; zero steps is reported as a soft failure."""
    panel.start_loading("stepwise_guide")
    panel.query = request.query
    panel.steps = None
    try:
        result = await generate_stepwise_guidance(request)
        if result.steps:
            panel.steps = sorted(result.steps, key=lambda s: s.step_number)
        else:
            logger.info("[StepwiseGuide] empty guidance for query=%.60s", request.query)
            panel.error = GUIDANCE_EMPTY
    except GenerationError:
        logger.exception("[StepwiseGuide] generation failed")
        panel.error = GUIDANCE_FAILED
    finally:
        panel.loading = False
