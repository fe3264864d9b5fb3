"""Tests for agents/provider.py — model creation and per-call resolution."""

from unittest.mock import patch

from pydantic_ai.models.openai import OpenAIChatModel
from pydantic_ai.models.test import TestModel

from agents.provider import create_model, resolve_model


def test_create_model_openai():
    model = create_model("openai/gpt-4o")
    assert isinstance(model, OpenAIChatModel)
    assert model.model_name == "gpt-4o"


def test_create_model_openai_compatible_endpoint():
    model = create_model("zai/glm-4.7")
    assert isinstance(model, OpenAIChatModel)
    assert model.model_name == "glm-4.7"


def test_resolve_model_passes_instances_through():
    test_model = TestModel()
    model, name = resolve_model(test_model, "quiz")
    assert model is test_model
    assert name == test_model.model_name


def test_resolve_model_uses_task_setting():
    with patch("agents.provider.create_model", return_value=TestModel()) as mock_create:
        _, name = resolve_model(None, "quiz")
    mock_create.assert_called_once_with(name)


def test_resolve_model_string():
    with patch("agents.provider.create_model", return_value=TestModel()) as mock_create:
        _, name = resolve_model("anthropic/claude-sonnet-4-20250514", "quiz")
    assert name == "anthropic/claude-sonnet-4-20250514"
    mock_create.assert_called_once_with("anthropic/claude-sonnet-4-20250514")
