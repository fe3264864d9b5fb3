"""Code-snippet and stepwise-guidance prompts."""

from __future__ import annotations

from config.languages import language_label
from config.prompts.output_format import build_output_contract
from models.generation import (
    CodeSnippetRequest,
    CodeSnippetResponse,
    StepwiseGuidanceRequest,
    StepwiseGuidanceResponse,
)


def build_code_snippet_prompt(req: CodeSnippetRequest) -> str:
    """Bind a :class:`CodeSnippetRequest` into the code-generation prompt."""
    lines = [
        "You are an expert programmer. Generate a complete, well-formatted code "
        "snippet for the following description.",
        "",
        f"Description: {req.description}",
    ]
    if req.language:
        lines.append(f"Write the code in {language_label(req.language)}.")
    lines += [
        "",
        "Return only the code in the `code` field. Keep comments short and useful.",
        "",
        build_output_contract(CodeSnippetResponse),
    ]
    return "\n".join(lines)


def build_stepwise_prompt(req: StepwiseGuidanceRequest) -> str:
    """Bind a :class:`StepwiseGuidanceRequest` into the stepwise-guidance prompt."""
    return "\n".join([
        "You are an AI coding assistant. When the user asks for assistance on a "
        "complex procedure, you provide step-by-step guidance with code examples.",
        "",
        "Number the steps from 1. Each step has a clear instruction and a code "
        "example for that step.",
        "",
        "Here is the user's request:",
        req.query,
        "",
        build_output_contract(StepwiseGuidanceResponse),
    ])
