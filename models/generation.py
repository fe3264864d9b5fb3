"""Generation contracts — request/response schemas for every generation task.

Each task has a request model (validated before a model call is made) and a
response model (validated after the model answers).  Field names are
camelCase on the wire via :class:`CamelModel`.

| task                 | request                          | response                   |
|----------------------|----------------------------------|----------------------------|
| contextual_solution  | ContextualSolutionRequest        | ContextualSolutionResponse |
| code_snippet         | CodeSnippetRequest               | CodeSnippetResponse        |
| stepwise_guidance    | StepwiseGuidanceRequest          | StepwiseGuidanceResponse   |
| topic_list           | TopicListRequest                 | TopicListResponse          |
| topic_information    | TopicInformationRequest          | TopicContent               |
| quiz                 | QuizRequest                      | QuizResponse               |
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Literal

from pydantic import Field, field_validator, model_validator

from models.base import CamelModel

logger = logging.getLogger(__name__)

CODE_MIN_CHARS = 10
QUIZ_OPTION_COUNT = 4


class GenerationTask(str, Enum):
    """Names of the generation tasks, used for logging and model routing."""

    CONTEXTUAL_SOLUTION = "contextual_solution"
    CODE_SNIPPET = "code_snippet"
    STEPWISE_GUIDANCE = "stepwise_guidance"
    TOPIC_LIST = "topic_list"
    TOPIC_INFORMATION = "topic_information"
    QUIZ = "quiz"


ChatTask = Literal["generate", "debug", "explain"]


def _require_text(value: str, message: str) -> str:
    if not value or not value.strip():
        raise ValueError(message)
    return value


# ── Contextual solution (chat panel) ─────────────────────────


class ContextualSolutionRequest(CamelModel):
    """Problem + request sent by the chat panel."""

    problem_description: str
    user_request: str
    code_context: str | None = None
    language: str | None = None
    task: ChatTask | None = None

    @field_validator("problem_description", "user_request")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        return _require_text(v, "Message cannot be empty.")


class ContextualSolutionResponse(CamelModel):
    suggested_solution: str
    explanation: str


# ── Code snippet ─────────────────────────────────────────────


class CodeSnippetRequest(CamelModel):
    description: str
    language: str | None = None

    @field_validator("description")
    @classmethod
    def _min_description(cls, v: str) -> str:
        if len(v.strip()) < CODE_MIN_CHARS:
            raise ValueError(
                "Please provide a description of at least 10 characters."
            )
        return v


class CodeSnippetResponse(CamelModel):
    code: str


# ── Stepwise guidance ────────────────────────────────────────


class StepwiseGuidanceRequest(CamelModel):
    query: str

    @field_validator("query")
    @classmethod
    def _min_query(cls, v: str) -> str:
        if len(v.strip()) < CODE_MIN_CHARS:
            raise ValueError(
                "Please describe the procedure in at least 10 characters."
            )
        return v


class GuideStep(CamelModel):
    step_number: int = Field(ge=1)
    instruction: str
    code_example: str


class StepwiseGuidanceResponse(CamelModel):
    steps: list[GuideStep] = Field(default_factory=list)


# ── Learning path ────────────────────────────────────────────


class TopicListRequest(CamelModel):
    language: str

    @field_validator("language")
    @classmethod
    def _language_required(cls, v: str) -> str:
        return _require_text(v, "Please select a language.").strip()


class TopicListResponse(CamelModel):
    topics: list[str]


class TopicInformationRequest(CamelModel):
    language: str
    topic: str

    @field_validator("language")
    @classmethod
    def _language_required(cls, v: str) -> str:
        return _require_text(v, "Please select a language.").strip()

    @field_validator("topic")
    @classmethod
    def _topic_required(cls, v: str) -> str:
        return _require_text(v, "Please select a topic.").strip()


class TopicSection(CamelModel):
    title: str
    explanation: str
    code_example: str | None = None


class TopicContent(CamelModel):
    """Detailed explanation of one topic, split into 2-4 sections."""

    title: str
    introduction: str
    sections: list[TopicSection] = Field(min_length=2, max_length=4)


# ── Quiz ─────────────────────────────────────────────────────


class QuizRequest(CamelModel):
    language: str

    @field_validator("language")
    @classmethod
    def _language_required(cls, v: str) -> str:
        return _require_text(v, "Please select a language.").strip()


class QuizQuestion(CamelModel):
    """A multiple-choice question; ``correctAnswer`` is always one of ``options``."""

    question: str
    options: list[str] = Field(
        min_length=QUIZ_OPTION_COUNT, max_length=QUIZ_OPTION_COUNT
    )
    correct_answer: str
    explanation: str

    @model_validator(mode="before")
    @classmethod
    def _resolve_letter_answer(cls, data):
        """Accept a bare option letter (``"B"``) as the correct answer."""
        if not isinstance(data, dict):
            return data
        options = data.get("options")
        key = "correctAnswer" if "correctAnswer" in data else "correct_answer"
        answer = data.get(key)
        if (
            isinstance(options, list)
            and isinstance(answer, str)
            and answer not in options
            and len(answer.strip()) == 1
        ):
            idx = ord(answer.strip().upper()) - ord("A")
            if 0 <= idx < len(options):
                logger.debug("Resolved letter answer %r to option %d", answer, idx)
                data = {**data, key: options[idx]}
        return data

    @model_validator(mode="after")
    def _answer_in_options(self) -> QuizQuestion:
        if self.correct_answer not in self.options:
            raise ValueError("correctAnswer must be one of the options")
        return self


class QuizResponse(CamelModel):
    questions: list[QuizQuestion]
