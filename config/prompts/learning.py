"""Learning-path prompts — topic list and topic detail."""

from __future__ import annotations

from config.prompts.output_format import build_output_contract
from models.generation import (
    TopicContent,
    TopicInformationRequest,
    TopicListRequest,
    TopicListResponse,
)

TOPIC_COUNT = 12


def build_topic_list_prompt(req: TopicListRequest) -> str:
    """Bind a :class:`TopicListRequest` into the curriculum prompt."""
    return "\n".join([
        "You are an expert curriculum designer for programming languages.",
        "",
        f"Generate a list of exactly {TOPIC_COUNT} relevant topics for the "
        f"{req.language} programming language.",
        "",
        "The topics should cover a good range, from fundamental concepts to more "
        "advanced subjects. Do not include project ideas.",
        "",
        build_output_contract(TopicListResponse),
    ])


def build_topic_information_prompt(req: TopicInformationRequest) -> str:
    """Bind a :class:`TopicInformationRequest` into the topic-explanation prompt."""
    return "\n".join([
        "You are an expert programmer and technical writer.",
        "",
        "Provide a detailed, easy-to-understand explanation for the following topic:",
        "",
        f"Language: {req.language}",
        f"Topic: {req.topic}",
        "",
        "Structure your response with:",
        "1. A clear title for the overall topic.",
        "2. A concise introduction.",
        "3. Between 2 and 4 sections, each with a subtitle, a detailed explanation, "
        "and a relevant, well-formatted code example if applicable. The "
        "explanation should be thorough and clear for a learner. Use newlines "
        "for paragraphs.",
        "",
        build_output_contract(TopicContent),
    ])
