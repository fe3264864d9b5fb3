"""FastAPI endpoint tests using httpx.AsyncClient."""

from unittest.mock import AsyncMock, patch

import pytest

from agents.generation import GENERATION_FUNCTIONS
from errors.exceptions import GenerationError
from models.generation import CodeSnippetResponse, GenerationTask, TopicListResponse


async def _new_session(client) -> str:
    resp = await client.post("/api/sessions")
    assert resp.status_code == 201
    return resp.json()["sessionId"]


# ── Meta ──────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_health(client):
    resp = await client.get("/api/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "healthy"
    assert "x-request-id" in resp.headers


@pytest.mark.asyncio
async def test_request_id_is_echoed(client):
    resp = await client.get("/api/health", headers={"X-Request-ID": "abc123"})
    assert resp.headers["x-request-id"] == "abc123"


@pytest.mark.asyncio
async def test_list_models(client):
    data = (await client.get("/api/models")).json()
    assert "default" in data
    assert isinstance(data["examples"], list)


@pytest.mark.asyncio
async def test_list_languages(client):
    data = (await client.get("/api/languages")).json()
    assert {"value": "csharp", "label": "C#"} in data["chat"]
    assert "HTML" not in data["learning"]
    assert "Python" in data["learning"]


@pytest.mark.asyncio
async def test_action_cards(client):
    data = (await client.get("/api/chat/action-cards")).json()
    assert len(data["cards"]) == 3


# ── Sessions ──────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_session_lifecycle(client):
    sid = await _new_session(client)

    resp = await client.get(f"/api/sessions/{sid}")
    assert resp.status_code == 200
    body = resp.json()
    assert body["sessionId"] == sid
    assert body["chat"]["state"] == "no_active_conversation"
    assert body["learningPath"]["step"] == "language"
    assert body["quiz"]["step"] == "setup"

    assert (await client.delete(f"/api/sessions/{sid}")).status_code == 204
    resp = await client.get(f"/api/sessions/{sid}")
    assert resp.status_code == 404
    assert resp.json()["detail"].startswith("SESSION_NOT_FOUND")


# ── Chat ──────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_chat_message_flow(client, solution_response):
    sid = await _new_session(client)
    with patch(
        "services.chat_workflow.generate_contextual_solution",
        new_callable=AsyncMock,
        return_value=solution_response,
    ) as mock_gen:
        resp = await client.post(
            f"/api/sessions/{sid}/chat/messages",
            json={"message": "Create a React button with a primary variant."},
        )

    assert resp.status_code == 200
    mock_gen.assert_awaited_once()
    data = resp.json()
    assert data["reply"]["content"]["kind"] == "explained_code"
    assert data["reply"]["content"]["code"] == solution_response.suggested_solution
    chat = data["chat"]
    assert chat["state"] == "active_conversation"
    assert chat["conversations"][0]["title"] == "Create a React button with a p..."
    assert len(chat["displayedMessages"]) == 2
    assert "pending" not in chat


@pytest.mark.asyncio
async def test_chat_blank_message_rejected_without_call(client):
    sid = await _new_session(client)
    with patch(
        "services.chat_workflow.generate_contextual_solution", new_callable=AsyncMock
    ) as mock_gen:
        resp = await client.post(f"/api/sessions/{sid}/chat/messages", json={"message": "   "})
    assert resp.status_code == 422
    mock_gen.assert_not_awaited()


@pytest.mark.asyncio
async def test_chat_failure_returns_error_message(client):
    sid = await _new_session(client)
    with patch(
        "services.chat_workflow.generate_contextual_solution",
        new_callable=AsyncMock,
        side_effect=GenerationError("contextual_solution", "boom"),
    ):
        resp = await client.post(
            f"/api/sessions/{sid}/chat/messages", json={"message": "Explain closures"}
        )
    assert resp.status_code == 200
    data = resp.json()
    assert data["reply"]["content"]["kind"] == "error"
    assert data["chat"]["conversations"] == []
    assert len(data["chat"]["displayedMessages"]) == 2


@pytest.mark.asyncio
async def test_chat_options_and_new_chat(client, solution_response):
    sid = await _new_session(client)
    resp = await client.put(
        f"/api/sessions/{sid}/chat/options", json={"task": "debug", "language": "python"}
    )
    assert resp.json()["task"] == "debug"
    assert resp.json()["language"] == "python"

    with patch(
        "services.chat_workflow.generate_contextual_solution",
        new_callable=AsyncMock,
        return_value=solution_response,
    ) as mock_gen:
        await client.post(f"/api/sessions/{sid}/chat/messages", json={"message": "fix it"})
    sent = mock_gen.await_args.args[0]
    assert (sent.task, sent.language) == ("debug", "python")

    resp = await client.post(f"/api/sessions/{sid}/chat/new")
    data = resp.json()
    assert data["state"] == "no_active_conversation"
    assert data["displayedMessages"] == []
    assert len(data["conversations"]) == 1

    conversation_id = data["conversations"][0]["id"]
    resp = await client.post(
        f"/api/sessions/{sid}/chat/select", json={"conversationId": conversation_id}
    )
    assert resp.json()["activeConversationId"] == conversation_id


@pytest.mark.asyncio
async def test_chat_select_unknown_conversation(client):
    sid = await _new_session(client)
    resp = await client.post(
        f"/api/sessions/{sid}/chat/select", json={"conversationId": "chat-nope"}
    )
    assert resp.status_code == 404
    assert resp.json()["detail"].startswith("CONVERSATION_NOT_FOUND")


# ── Panels ────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_code_generator_endpoint(client):
    sid = await _new_session(client)
    with patch(
        "services.tool_panels.generate_code_snippet",
        new_callable=AsyncMock,
        return_value=CodeSnippetResponse(code="print('hi')"),
    ):
        resp = await client.post(
            f"/api/sessions/{sid}/code-generator",
            json={"description": "print a greeting", "language": "python"},
        )
    assert resp.status_code == 200
    assert resp.json()["generatedCode"] == "print('hi')"


@pytest.mark.asyncio
async def test_code_generator_short_description(client):
    sid = await _new_session(client)
    resp = await client.post(f"/api/sessions/{sid}/code-generator", json={"description": "hi"})
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_learning_path_endpoints(client, javascript_topics, closures_content):
    sid = await _new_session(client)
    with patch(
        "services.learning_path.get_topics_for_language",
        new_callable=AsyncMock,
        return_value=javascript_topics,
    ):
        resp = await client.post(
            f"/api/sessions/{sid}/learning-path/topics", json={"language": "JavaScript"}
        )
    assert resp.json()["step"] == "topic"

    with patch(
        "services.learning_path.get_topic_information",
        new_callable=AsyncMock,
        return_value=closures_content,
    ):
        resp = await client.post(
            f"/api/sessions/{sid}/learning-path/topic", json={"topic": "Closures"}
        )
    data = resp.json()
    assert data["step"] == "content"
    assert data["topicContent"]["title"] == "Closures in JavaScript"

    resp = await client.post(f"/api/sessions/{sid}/learning-path/back")
    assert resp.json()["step"] == "topic"
    resp = await client.post(f"/api/sessions/{sid}/learning-path/exit")
    assert resp.json()["step"] == "language"


@pytest.mark.asyncio
async def test_learning_path_topic_out_of_order(client):
    sid = await _new_session(client)
    resp = await client.post(
        f"/api/sessions/{sid}/learning-path/topic", json={"topic": "Closures"}
    )
    assert resp.status_code == 409
    assert resp.json()["detail"].startswith("INVALID_STATE")


@pytest.mark.asyncio
async def test_quiz_endpoints(client, python_quiz):
    sid = await _new_session(client)
    with patch(
        "services.quiz_workflow.generate_quiz",
        new_callable=AsyncMock,
        return_value=python_quiz,
    ):
        resp = await client.post(f"/api/sessions/{sid}/quiz/start", json={"language": "Python"})
    data = resp.json()
    assert data["step"] == "in_progress"
    assert data["currentIndex"] == 0
    assert data["selectedAnswer"] is None

    resp = await client.post(f"/api/sessions/{sid}/quiz/answer", json={"option": "nope"})
    assert resp.status_code == 400

    await client.post(f"/api/sessions/{sid}/quiz/answer", json={"option": "def"})
    resp = await client.post(f"/api/sessions/{sid}/quiz/check")
    assert resp.json()["correct"] is True

    resp = await client.post(f"/api/sessions/{sid}/quiz/next")
    assert resp.json()["finished"] is False

    await client.post(f"/api/sessions/{sid}/quiz/answer", json={"option": "3"})
    await client.post(f"/api/sessions/{sid}/quiz/check")
    data = (await client.post(f"/api/sessions/{sid}/quiz/next")).json()
    assert data["finished"] is True
    assert data["summary"] == {"language": "Python", "correct": 2, "total": 2}
    assert data["quiz"]["step"] == "setup"


# ── Stateless generation ──────────────────────────────────────


def _patch_generation(task: GenerationTask, **kwargs):
    """Swap the generation function registered for *task*; returns (patcher, mock)."""
    request_cls, _ = GENERATION_FUNCTIONS[task]
    mock_gen = AsyncMock(**kwargs)
    return patch.dict(GENERATION_FUNCTIONS, {task: (request_cls, mock_gen)}), mock_gen


@pytest.mark.asyncio
async def test_generate_endpoint(client):
    patcher, mock_gen = _patch_generation(
        GenerationTask.TOPIC_LIST,
        return_value=TopicListResponse(topics=["Ownership", "Traits"]),
    )
    with patcher:
        resp = await client.post("/api/generate/topic_list", json={"language": "Rust"})
    assert resp.status_code == 200
    assert resp.json() == {"topics": ["Ownership", "Traits"]}
    mock_gen.assert_awaited_once()
    assert mock_gen.await_args.args[0].language == "Rust"


@pytest.mark.asyncio
async def test_generate_endpoint_validation(client):
    patcher, mock_gen = _patch_generation(GenerationTask.CODE_SNIPPET)
    with patcher:
        resp = await client.post("/api/generate/code_snippet", json={"description": "x"})
    assert resp.status_code == 422
    mock_gen.assert_not_awaited()


@pytest.mark.asyncio
async def test_generate_endpoint_failure_is_502(client):
    patcher, _ = _patch_generation(
        GenerationTask.QUIZ,
        side_effect=GenerationError("quiz", "provider down"),
    )
    with patcher:
        resp = await client.post("/api/generate/quiz", json={"language": "Python"})
    assert resp.status_code == 502
    assert resp.json()["detail"].startswith("LLM_PROVIDER_ERROR")


@pytest.mark.asyncio
async def test_generate_unknown_task(client):
    resp = await client.post("/api/generate/poem", json={})
    assert resp.status_code == 422
