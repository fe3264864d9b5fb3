"""Learning-path wizard — language → topic list → topic content.

Each forward step is gated by one successful generation call.  On failure
the wizard stays where it is and shows a dismissible error.
"""

from __future__ import annotations

import logging

from agents.generation import get_topic_information, get_topics_for_language
from errors.exceptions import GenerationError, PanelBusyError
from models.generation import TopicInformationRequest, TopicListRequest
from models.panels import LearningPathPanel, WizardStep

logger = logging.getLogger(__name__)

TOPICS_FAILED = "Failed to fetch topics. Please try again."
TOPIC_INFO_FAILED = "Failed to fetch topic information. Please try again."
TOPICS_EMPTY = "The AI couldn't generate topics for this language. Please try again."


async def fetch_topics(panel: LearningPathPanel, request: TopicListRequest) -> None:
    """``language`` → ``topic`` on success; no usable topics is a soft failure."""
    panel.require_step(WizardStep.SELECT_LANGUAGE, "fetch_topics")
    panel.start_loading("learning_path")
    panel.selected_language = request.language
    try:
        result = await get_topics_for_language(request)
        topics = [t.strip() for t in result.topics if t.strip()]
        if topics:
            panel.topics = topics
            panel.step = WizardStep.SELECT_TOPIC
            logger.info(
                "[LearningPath] %d topics for language=%s",
                len(topics), request.language,
            )
        else:
            logger.info("[LearningPath] no topics for language=%s", request.language)
            panel.error = TOPICS_EMPTY
    except GenerationError:
        logger.exception("[LearningPath] topic list failed language=%s", request.language)
        panel.error = TOPICS_FAILED
    finally:
        panel.loading = False


async def select_topic(panel: LearningPathPanel, topic: str) -> None:
    """``topic`` → ``content`` on success; the call is keyed by (language, topic)."""
    panel.require_step(WizardStep.SELECT_TOPIC, "select_topic")
    request = TopicInformationRequest(language=panel.selected_language, topic=topic)
    panel.start_loading("learning_path")
    panel.selected_topic = request.topic
    try:
        panel.topic_content = await get_topic_information(request)
        panel.step = WizardStep.VIEW_CONTENT
    except GenerationError:
        logger.exception(
            "[LearningPath] topic information failed language=%s topic=%s",
            request.language, request.topic,
        )
        panel.error = TOPIC_INFO_FAILED
    finally:
        panel.loading = False


def go_back(panel: LearningPathPanel) -> None:
    if panel.loading:
        raise PanelBusyError("learning_path")
    panel.back()


def dismiss_error(panel: LearningPathPanel) -> None:
    panel.error = None


def exit_wizard(panel: LearningPathPanel) -> None:
    if panel.loading:
        raise PanelBusyError("learning_path")
    panel.reset()
