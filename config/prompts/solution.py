"""Contextual-solution prompt — the chat panel's pair-programming reply."""

from __future__ import annotations

from config.languages import language_label
from config.prompts.output_format import build_output_contract
from models.generation import ContextualSolutionRequest, ContextualSolutionResponse

_TASK_HINTS = {
    "generate": "The user wants new code written for them.",
    "debug": "The user wants a bug found and fixed. Point out what is wrong before fixing it.",
    "explain": "The user wants existing code explained. Walk through what it does and how.",
}


def build_solution_prompt(req: ContextualSolutionRequest) -> str:
    """Bind a :class:`ContextualSolutionRequest` into the solution prompt."""
    language = language_label(req.language) if req.language else ""

    sections = [
        "You are an expert and friendly AI coding assistant. Your goal is to help "
        "developers by providing clear, accurate, and human-like solutions. Imagine "
        "you're a senior developer pair-programming with a colleague. Be "
        "conversational, encouraging, and avoid robotic language.",
        "",
        "Here's the problem the user is facing:",
        "",
        f"Problem Description: {req.problem_description}",
        f"Code Context: {req.code_context or ''}",
        f"User Request: {req.user_request}",
    ]
    if language:
        sections.append(f"Language: {language}")
    if req.task:
        sections.append(_TASK_HINTS[req.task])

    sections += [
        "",
        "Based on the information, provide a helpful code solution "
        "(suggestedSolution) and a brief, concise explanation (explanation).",
        "Start your explanation in a friendly, conversational tone. For example: "
        '"Of course! I can certainly help with that." or "That\'s a great '
        "question! Let's break it down.\"",
        "Explain *why* the solution works, but keep it brief and to the point.",
    ]
    if language:
        sections.append(f"Ensure the code snippet is written in {language}.")

    sections += ["", build_output_contract(ContextualSolutionResponse)]
    return "\n".join(sections)
