"""Reusable LLM generation parameters.

LLMConfig is a standalone Pydantic model that can be:
- embedded in Settings as the global default,
- declared per-task for task-specific tuning (see ``agents/generation.py``),
- passed per-call for one-off overrides.

Priority chain (low → high):
    .env global defaults  →  task-level LLMConfig  →  per-call overrides
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class LLMConfig(BaseModel):
    """LLM generation parameters — reusable across generation tasks.

    All fields are optional.  ``None`` means "use the model's default".
    The model itself is routed per task by ``Settings.model_for_task``.
    """

    max_tokens: int | None = Field(default=None, description="Max tokens to generate")
    temperature: float | None = Field(default=None, ge=0.0, le=2.0)
    top_p: float | None = Field(default=None, ge=0.0, le=1.0)
    seed: int | None = Field(default=None, description="Random seed for reproducibility")
    timeout: float | None = Field(default=None, gt=0, description="Request timeout in seconds")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def merge(self, overrides: LLMConfig) -> LLMConfig:
        """Return a new LLMConfig: *self* as base, *overrides* wins on non-None fields."""
        base = self.model_dump(exclude_none=True)
        over = overrides.model_dump(exclude_none=True)
        base.update(over)
        return LLMConfig(**base)

    def to_model_settings(self) -> dict:
        """Convert to a pydantic-ai ``model_settings`` dict."""
        kw: dict = {}
        for field in ("max_tokens", "temperature", "top_p", "seed", "timeout"):
            val = getattr(self, field)
            if val is not None:
                kw[field] = val
        return kw
