"""Response decoder — raw model text → validated response model.

Kept separate from the generation call so decoding can be tested on its own:
``decode_response(QuizResponse, raw_text, task="quiz")`` either returns a
validated model or raises :class:`ResponseSchemaError`.

LLM output is messy: JSON may be wrapped in a Markdown code fence, surrounded
by prose, or contain backslashes that are not valid JSON escapes (regexes and
Windows paths in code examples).  The helpers below tolerate all three.
"""

from __future__ import annotations

import json
import logging
import re
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from errors.exceptions import ResponseSchemaError

logger = logging.getLogger(__name__)

ResponseT = TypeVar("ResponseT", bound=BaseModel)

_FENCE_RE = re.compile(r"^```[a-zA-Z0-9_-]*\s*\n(.*?)\n?```\s*$", re.DOTALL)


def fix_invalid_json_escapes(s: str) -> str:
    r"""Fix invalid JSON escape sequences produced by LLMs.

    Code examples frequently contain ``\d``, ``\s`` or ``\(`` inside JSON
    strings.  These are invalid JSON escapes (only ``\"``, ``\\``, ``\/``,
    ``\b``, ``\f``, ``\n``, ``\r``, ``\t``, ``\uXXXX`` are legal).  Lone
    backslashes before any other character are doubled so ``json.loads``
    succeeds.
    """
    # Protect valid \\ so the regex below cannot split it
    _PH = "\x00\x01"
    s = s.replace("\\\\", _PH)
    s = re.sub(r'\\(?!["\\/bfnrtu])', r"\\\\", s)
    return s.replace(_PH, "\\\\")


def _loads(text: str) -> object:
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return json.loads(fix_invalid_json_escapes(text))


def _closing_brace(text: str, start: int) -> int | None:
    """Index of the ``}`` balancing the ``{`` at *start*, or ``None``."""
    depth = 0
    in_string = False
    escape_next = False

    for i in range(start, len(text)):
        ch = text[i]

        if escape_next:
            escape_next = False
            continue

        if ch == "\\":
            if in_string:
                escape_next = True
            continue

        if ch == '"':
            in_string = not in_string
            continue

        if in_string:
            continue

        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return i

    return None


def extract_json_object(text: str) -> dict | None:
    """Return the JSON object contained in *text*, or ``None``.

    Tries the whole (fence-stripped) text first, then each balanced
    ``{ ... }`` block in turn until one parses as a JSON object.
    """
    stripped = text.strip()
    fence = _FENCE_RE.match(stripped)
    if fence:
        stripped = fence.group(1).strip()

    try:
        obj = _loads(stripped)
        if isinstance(obj, dict):
            return obj
    except json.JSONDecodeError:
        pass

    start = stripped.find("{")
    while start != -1:
        end = _closing_brace(stripped, start)
        if end is not None:
            try:
                obj = _loads(stripped[start : end + 1])
            except json.JSONDecodeError as e:
                logger.debug("Skipping non-JSON block at %d (len=%d, err=%s)", start, end + 1 - start, e)
            else:
                if isinstance(obj, dict):
                    return obj
        start = stripped.find("{", start + 1)

    logger.warning("No JSON object found in model output (len=%d)", len(stripped))
    return None


def _field_errors(exc: ValidationError) -> list[str]:
    errors: list[str] = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err["loc"]) or "<root>"
        errors.append(f"{loc}: {err['msg']}")
    return errors


def decode_response(
    response_cls: type[ResponseT],
    raw: str,
    *,
    task: str,
) -> ResponseT:
    """Decode raw model output into *response_cls*.

    Raises:
        ResponseSchemaError: No JSON object could be found, or the object
            violates the response schema.
    """
    raw = raw or ""
    payload = extract_json_object(raw)
    if payload is None:
        raise ResponseSchemaError(task, f"no JSON object in model output: {raw[:200]!r}")

    try:
        return response_cls.model_validate(payload)
    except ValidationError as e:
        raise ResponseSchemaError(
            task,
            f"output does not match {response_cls.__name__}",
            field_errors=_field_errors(e),
        ) from e
