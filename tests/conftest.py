"""Shared pytest fixtures for the coding-assistant tests.

Provides:
- ``session_store``: fresh in-memory workspace store installed as the singleton
- ``client``: ``httpx.AsyncClient`` bound to the FastAPI app
- sample generation responses used across workflow and API tests
"""

from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient

import services.session_store as session_store_module
from models.generation import (
    ContextualSolutionResponse,
    QuizQuestion,
    QuizResponse,
    TopicContent,
    TopicListResponse,
    TopicSection,
)
from services.session_store import InMemorySessionStore


@pytest.fixture
def session_store(monkeypatch) -> InMemorySessionStore:
    """Fresh workspace store — isolated per test."""
    store = InMemorySessionStore(ttl_seconds=3600)
    monkeypatch.setattr(session_store_module, "_store", store)
    return store


@pytest.fixture
async def client(session_store):
    from main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def solution_response() -> ContextualSolutionResponse:
    return ContextualSolutionResponse(
        suggested_solution="export const Button = () => <button className=\"primary\" />;",
        explanation="Of course! Here is a primary button.",
    )


@pytest.fixture
def python_quiz() -> QuizResponse:
    return QuizResponse(
        questions=[
            QuizQuestion(
                question="Which keyword defines a function?",
                options=["func", "def", "lambda", "fn"],
                correct_answer="def",
                explanation="`def` starts a function definition.",
            ),
            QuizQuestion(
                question="What is len([1, 2, 3])?",
                options=["2", "3", "4", "Error"],
                correct_answer="3",
                explanation="The list has three items.",
            ),
        ]
    )


@pytest.fixture
def javascript_topics() -> TopicListResponse:
    return TopicListResponse(topics=["Variables", "Closures", "Promises"])


@pytest.fixture
def closures_content() -> TopicContent:
    return TopicContent(
        title="Closures in JavaScript",
        introduction="A closure keeps access to its outer scope.",
        sections=[
            TopicSection(title="Lexical scope", explanation="Functions see outer variables."),
            TopicSection(
                title="Counters",
                explanation="Closures can hold private state.",
                code_example="const inc = (() => { let n = 0; return () => ++n; })();",
            ),
        ],
    )
