"""Quiz prompt — five multiple-choice questions about one language."""

from __future__ import annotations

from config.prompts.output_format import build_output_contract
from models.generation import QUIZ_OPTION_COUNT, QuizRequest, QuizResponse

QUIZ_QUESTION_COUNT = 5


def build_quiz_prompt(req: QuizRequest) -> str:
    """Bind a :class:`QuizRequest` into the quiz-generation prompt."""
    return "\n".join([
        "You are an expert programmer and educator. Generate a "
        f"{QUIZ_QUESTION_COUNT}-question multiple-choice quiz about the "
        f"{req.language} programming language.",
        "",
        "The questions should cover a range of topics from beginner to intermediate.",
        f"For each question, provide exactly {QUIZ_OPTION_COUNT} options, one of "
        "which is the correct answer.",
        "`correctAnswer` must repeat the full text of the correct option, not its letter.",
        "Also provide a brief explanation for the correct answer.",
        "",
        build_output_contract(QuizResponse),
    ])
