"""Panel state models — code generator, stepwise guide, learning path, quiz.

Each panel allows one generation call in flight at a time: ``start_loading``
raises :class:`PanelBusyError` while ``loading`` is set, and the workflow
clears the flag on every exit path.
"""

from __future__ import annotations

from enum import Enum

from pydantic import Field, computed_field

from errors.exceptions import PanelBusyError, WorkflowStateError
from models.base import CamelModel
from models.generation import GuideStep, QuizQuestion, TopicContent


class PanelState(CamelModel):
    """Loading flag plus a dismissible, user-visible error message."""

    loading: bool = False
    error: str | None = None

    def start_loading(self, panel: str) -> None:
        if self.loading:
            raise PanelBusyError(panel)
        self.loading = True
        self.error = None


# ── Code generator / stepwise guide ──────────────────────────


class CodeGeneratorPanel(PanelState):
    description: str = ""
    generated_code: str | None = None


class StepwiseGuidePanel(PanelState):
    query: str = ""
    steps: list[GuideStep] | None = None


# ── Learning path wizard ─────────────────────────────────────


class WizardStep(str, Enum):
    SELECT_LANGUAGE = "language"
    SELECT_TOPIC = "topic"
    VIEW_CONTENT = "content"


class LearningPathPanel(PanelState):
    """Wizard: language → topic → content, back-navigable."""

    step: WizardStep = WizardStep.SELECT_LANGUAGE
    selected_language: str = ""
    topics: list[str] = Field(default_factory=list)
    selected_topic: str = ""
    topic_content: TopicContent | None = None

    def require_step(self, step: WizardStep, action: str) -> None:
        if self.step != step:
            raise WorkflowStateError("learning_path", self.step.value, action)

    def back(self) -> None:
        """Step back one screen, clearing what the screen being left owned."""
        if self.step == WizardStep.VIEW_CONTENT:
            self.step = WizardStep.SELECT_TOPIC
            self.topic_content = None
            self.selected_topic = ""
        elif self.step == WizardStep.SELECT_TOPIC:
            self.step = WizardStep.SELECT_LANGUAGE
            self.topics = []
        self.error = None

    def reset(self) -> None:
        self.step = WizardStep.SELECT_LANGUAGE
        self.selected_language = ""
        self.topics = []
        self.selected_topic = ""
        self.topic_content = None
        self.error = None


# ── Quiz ─────────────────────────────────────────────────────


class QuizStep(str, Enum):
    SETUP = "setup"
    IN_PROGRESS = "in_progress"
    ANSWER_REVEALED = "answer_revealed"


class QuizPanel(PanelState):
    """Quiz: setup → in_progress → answer_revealed → (next | finished → setup)."""

    step: QuizStep = QuizStep.SETUP
    language: str = ""
    questions: list[QuizQuestion] = Field(default_factory=list)
    current_index: int = 0
    selected_answer: str | None = None
    correct_count: int = 0

    @computed_field  # type: ignore[prop-decorator]
    @property
    def current_question(self) -> QuizQuestion | None:
        if self.step == QuizStep.SETUP or not self.questions:
            return None
        return self.questions[self.current_index]

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_correct(self) -> bool | None:
        """Correctness of the revealed answer; ``None`` until revealed."""
        if self.step != QuizStep.ANSWER_REVEALED or self.current_question is None:
            return None
        return self.selected_answer == self.current_question.correct_answer

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_last_question(self) -> bool:
        return bool(self.questions) and self.current_index >= len(self.questions) - 1

    def require_step(self, step: QuizStep, action: str) -> None:
        if self.step != step:
            raise WorkflowStateError("quiz", self.step.value, action)

    def reset_progress(self) -> None:
        self.current_index = 0
        self.selected_answer = None
        self.correct_count = 0

    def reset(self) -> None:
        self.step = QuizStep.SETUP
        self.language = ""
        self.questions = []
        self.reset_progress()
        self.error = None


class QuizSummary(CamelModel):
    """Final score reported when the last question is passed."""

    language: str
    correct: int
    total: int
