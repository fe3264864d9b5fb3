"""Shared output-format instructions appended to every generation prompt.

The expected response shape is described to the model as the JSON schema of
the task's response model, so the prompt and the decoder can never drift.
"""

from __future__ import annotations

import json

from pydantic import BaseModel

GENERATION_SYSTEM_PROMPT = """\
You are an expert programmer, educator and technical writer working inside a
coding-assistant application.

## Output rules

1. Reply with exactly ONE JSON object and nothing else — no Markdown, no prose
   before or after it.
2. The object MUST validate against the JSON schema given in the request.
   Use the camelCase property names from the schema.
3. Put code inside JSON strings; escape newlines as \\n and quotes as \\".
"""


def build_output_contract(response_cls: type[BaseModel]) -> str:
    """Describe *response_cls* as a JSON schema block for the prompt."""
    schema = response_cls.model_json_schema(by_alias=True)
    return (
        "Respond with a JSON object matching this JSON schema:\n"
        f"{json.dumps(schema, ensure_ascii=False, indent=2)}"
    )
