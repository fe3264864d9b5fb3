"""Tests for services/response_decoder.py — raw model text → response model."""

import pytest

from errors.exceptions import ResponseSchemaError
from models.generation import CodeSnippetResponse, QuizResponse, TopicListResponse
from services.response_decoder import (
    decode_response,
    extract_json_object,
    fix_invalid_json_escapes,
)


# ── extract_json_object ───────────────────────────────────────


def test_extract_plain_object():
    assert extract_json_object('{"code": "print(1)"}') == {"code": "print(1)"}


def test_extract_from_markdown_fence():
    text = '```json\n{"topics": ["Closures"]}\n```'
    assert extract_json_object(text) == {"topics": ["Closures"]}


def test_extract_from_surrounding_prose():
    text = 'Sure! Here you go:\n{"code": "x = {1: 2}"}\nHope that helps.'
    assert extract_json_object(text) == {"code": "x = {1: 2}"}


def test_extract_braces_inside_strings_do_not_end_the_object():
    text = 'prefix {"code": "if (a) { return \\"}\\"; }"} suffix'
    assert extract_json_object(text) == {"code": 'if (a) { return "}"; }'}


def test_extract_returns_none_without_object():
    assert extract_json_object("no json here") is None
    assert extract_json_object("[1, 2, 3]") is None


def test_fix_invalid_escapes():
    raw = r'{"code": "re.compile(\"\d+\s*\")"}'
    fixed = fix_invalid_json_escapes(raw)
    assert r"\\d" in fixed
    assert extract_json_object(raw) == {"code": r're.compile("\d+\s*")'}


def test_fix_invalid_escapes_keeps_valid_ones():
    raw = r'{"code": "a\nb\\c"}'
    assert fix_invalid_json_escapes(raw) == raw


# ── decode_response ───────────────────────────────────────────


def test_decode_valid_response():
    resp = decode_response(CodeSnippetResponse, '{"code": "print(1)"}', task="code_snippet")
    assert resp.code == "print(1)"


def test_decode_no_json_raises_schema_error():
    with pytest.raises(ResponseSchemaError) as exc_info:
        decode_response(TopicListResponse, "I cannot help with that.", task="topic_list")
    assert exc_info.value.task == "topic_list"


def test_decode_empty_output_raises_schema_error():
    with pytest.raises(ResponseSchemaError):
        decode_response(TopicListResponse, "", task="topic_list")


def test_decode_schema_violation_reports_fields():
    raw = (
        '{"questions": [{"question": "q", "options": ["a", "b", "c", "d"],'
        ' "correctAnswer": "z", "explanation": "e"}]}'
    )
    with pytest.raises(ResponseSchemaError) as exc_info:
        decode_response(QuizResponse, raw, task="quiz")
    assert exc_info.value.field_errors
    assert exc_info.value.field_errors[0].startswith("questions.0")


def test_extract_skips_braces_in_leading_prose():
    text = 'Topics use {braces} in templates. {"topics": ["A", "B"]}'
    assert extract_json_object(text) == {"topics": ["A", "B"]}
    resp = decode_response(TopicListResponse, text, task="topic_list")
    assert resp.topics == ["A", "B"]


def test_extract_skips_unbalanced_brace_before_object():
    text = 'Note: a lone { here. {"code": "x = 1"}'
    assert extract_json_object(text) == {"code": "x = 1"}
