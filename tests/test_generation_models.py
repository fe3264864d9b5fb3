"""Tests for models/generation.py — request validation and response invariants."""

import pytest
from pydantic import ValidationError

from models.generation import (
    CodeSnippetRequest,
    ContextualSolutionRequest,
    QuizQuestion,
    QuizRequest,
    StepwiseGuidanceRequest,
    StepwiseGuidanceResponse,
    TopicContent,
    TopicListRequest,
)


# ── Requests ──────────────────────────────────────────────────


def test_solution_request_accepts_camel_case():
    req = ContextualSolutionRequest.model_validate({
        "problemDescription": "Button",
        "userRequest": "Button",
        "codeContext": "const a = 1;",
        "task": "debug",
    })
    assert req.problem_description == "Button"
    assert req.code_context == "const a = 1;"
    assert req.task == "debug"


@pytest.mark.parametrize("text", ["", "   ", "\n\t"])
def test_solution_request_rejects_blank_message(text):
    with pytest.raises(ValidationError, match="Message cannot be empty."):
        ContextualSolutionRequest(problem_description=text, user_request=text)


def test_solution_request_rejects_unknown_task():
    with pytest.raises(ValidationError):
        ContextualSolutionRequest(problem_description="x", user_request="x", task="refactor")


def test_code_snippet_request_minimum_length():
    with pytest.raises(ValidationError, match="at least 10 characters"):
        CodeSnippetRequest(description="  short   ")
    assert CodeSnippetRequest(description="a debounce helper").language is None


def test_stepwise_request_minimum_length():
    with pytest.raises(ValidationError):
        StepwiseGuidanceRequest(query="deploy")
    assert StepwiseGuidanceRequest(query="Deploy a Flask app").query == "Deploy a Flask app"


def test_language_requests_strip_and_require():
    assert TopicListRequest(language="  JavaScript ").language == "JavaScript"
    assert QuizRequest(language="Python").language == "Python"
    with pytest.raises(ValidationError):
        QuizRequest(language=" ")


# ── Responses ─────────────────────────────────────────────────


def _question(**overrides):
    data = {
        "question": "Which keyword defines a function?",
        "options": ["func", "def", "lambda", "fn"],
        "correctAnswer": "def",
        "explanation": "`def` starts a function.",
    }
    data.update(overrides)
    return data


def test_quiz_question_valid():
    q = QuizQuestion.model_validate(_question())
    assert q.correct_answer == "def"
    assert q.model_dump(by_alias=True)["correctAnswer"] == "def"


def test_quiz_question_answer_must_be_an_option():
    with pytest.raises(ValidationError, match="correctAnswer must be one of the options"):
        QuizQuestion.model_validate(_question(correctAnswer="define"))


@pytest.mark.parametrize("options", [["a", "b", "c"], ["a", "b", "c", "d", "e"]])
def test_quiz_question_requires_four_options(options):
    with pytest.raises(ValidationError):
        QuizQuestion.model_validate(_question(options=options, correctAnswer="a"))


def test_quiz_question_letter_answer_resolved_to_option():
    q = QuizQuestion.model_validate(_question(correctAnswer="B"))
    assert q.correct_answer == "def"

    q = QuizQuestion.model_validate(_question(correctAnswer="c"))
    assert q.correct_answer == "lambda"


def test_quiz_question_letter_out_of_range_rejected():
    with pytest.raises(ValidationError):
        QuizQuestion.model_validate(_question(correctAnswer="E"))


def test_quiz_question_single_char_option_is_not_treated_as_letter():
    q = QuizQuestion.model_validate(
        _question(options=["A", "B", "C", "D"], correctAnswer="C")
    )
    assert q.correct_answer == "C"


def test_topic_content_section_bounds():
    section = {"title": "t", "explanation": "e"}
    with pytest.raises(ValidationError):
        TopicContent(title="T", introduction="I", sections=[section])
    with pytest.raises(ValidationError):
        TopicContent(title="T", introduction="I", sections=[section] * 5)
    content = TopicContent(title="T", introduction="I", sections=[section] * 2)
    assert content.sections[0].code_example is None


def test_stepwise_response_defaults_to_no_steps():
    assert StepwiseGuidanceResponse().steps == []
    with pytest.raises(ValidationError):
        StepwiseGuidanceResponse.model_validate(
            {"steps": [{"stepNumber": 0, "instruction": "x", "codeExample": ""}]}
        )
