"""Agent provider — builds PydanticAI model instances from ``provider/model`` names."""

from __future__ import annotations

import logging

from pydantic_ai.models import Model
from pydantic_ai.models.openai import OpenAIChatModel
from pydantic_ai.providers.alibaba import AlibabaProvider
from pydantic_ai.providers.openai import OpenAIProvider

from config.settings import get_settings

logger = logging.getLogger(__name__)

# Provider prefix → (base_url, settings_key_attr)
_PROVIDER_MAP: dict[str, tuple[str, str]] = {
    "dashscope": ("https://dashscope.aliyuncs.com/compatible-mode/v1", "dashscope_api_key"),
    "zai": ("https://open.bigmodel.cn/api/paas/v4/", "zai_api_key"),
}


def create_model(model_name: str | None = None) -> Model:
    """Build a PydanticAI model instance.

    Parses the ``"provider/model"`` format (e.g. ``"openai/gpt-4o-mini"``,
    ``"anthropic/claude-sonnet-4-20250514"``) and creates the appropriate model.

    - ``anthropic/*`` → native :class:`AnthropicModel`
    - ``gemini/*`` → native :class:`GoogleModel`
    - ``dashscope/*`` → :class:`OpenAIChatModel` via :class:`AlibabaProvider`
    - ``zai/*`` → :class:`OpenAIChatModel` via OpenAI-compatible endpoint
    - ``openai/*`` or bare name → :class:`OpenAIChatModel` with OpenAI API

    Args:
        model_name: Model identifier in ``"provider/model"`` format.
                    Defaults to ``settings.default_model``.
    """
    settings = get_settings()
    name = model_name or settings.default_model

    if "/" in name:
        prefix, model_id = name.split("/", 1)

        if prefix == "anthropic":
            from pydantic_ai.models.anthropic import AnthropicModel
            from pydantic_ai.providers.anthropic import AnthropicProvider

            provider = AnthropicProvider(api_key=settings.anthropic_api_key)
            return AnthropicModel(model_id, provider=provider)

        if prefix == "gemini":
            from pydantic_ai.models.google import GoogleModel
            from pydantic_ai.providers.google import GoogleProvider

            provider = GoogleProvider(api_key=settings.gemini_api_key)
            return GoogleModel(model_id, provider=provider)

        if prefix == "dashscope":
            base_url, key_attr = _PROVIDER_MAP[prefix]
            provider = AlibabaProvider(api_key=getattr(settings, key_attr), base_url=base_url)
            return OpenAIChatModel(model_id, provider=provider)

        if prefix in _PROVIDER_MAP:
            base_url, key_attr = _PROVIDER_MAP[prefix]
            provider = OpenAIProvider(api_key=getattr(settings, key_attr), base_url=base_url)
            return OpenAIChatModel(model_id, provider=provider)

    # Fallback: OpenAI with OPENAI_API_KEY; strip "openai/" prefix if present
    model_id = name.split("/", 1)[1] if "/" in name else name
    provider = OpenAIProvider(api_key=settings.openai_api_key)
    return OpenAIChatModel(model_id, provider=provider)


def resolve_model(model: Model | str | None, task: str) -> tuple[Model, str]:
    """Resolve a per-call model override into ``(model_instance, model_name)``.

    ``None`` uses the model configured for *task*; a string is parsed with
    :func:`create_model`; a model instance (e.g. ``TestModel``) is used as-is.
    """
    if isinstance(model, Model):
        return model, model.model_name
    name = model or get_settings().model_for_task(task)
    return create_model(name), name
