import pytest
from fastapi.testclient import TestClient

from director_agent.agent.bindings import Bindings
from director_agent.agent.mock_llm import MockInference
from director_agent.app.main import app


@pytest.fixture
def client_with(monkeypatch):
    def _client(bindings: Bindings) -> TestClient:
        async def fake_get_bindings():
            return bindings

        # patch where it's imported in main.py
        monkeypatch.setattr("director_agent.app.main.get_bindings", fake_get_bindings)
        return TestClient(app)

    return _client


def test_route_task_calendar_query(client_with, make_env):
    env = make_env({"response": "calendar"}, {"response": "You have two events this year."})
    client = client_with(env)

    r = client.post(
        "/route-task",
        json={"userQuery": "Hi, can you tell me all of the events I currently have in my calendar for this year?"},
    )
    assert r.status_code == 200
    assert r.json() == {"agent": "calendar", "response": {"llmReasoning": "You have two events this year."}}

    router_model, _ = env.ai.calls[0]
    agent_model, agent_inputs = env.ai.calls[1]
    assert router_model == "router-model"
    assert agent_model == "agent-model"
    assert "Current calendar summary:" in agent_inputs["messages"][0]["content"]


def test_route_task_rejects_unknown_reply(client_with, make_env):
    client = client_with(make_env({"response": "I don't understand"}))

    r = client.post("/route-task", json={"userQuery": ""})
    assert r.status_code == 400
    assert r.json() == {
        "error": "Invalid agent response: I don't understand. Expected one of: calendar, financial, audience, touring."
    }


def test_route_task_missing_query_is_treated_as_empty(client_with, make_env):
    env = make_env({"response": "touring"}, {"response": "ok"})
    client = client_with(env)

    r = client.post("/route-task", json={})
    assert r.status_code == 200
    assert env.ai.calls[0][1]["messages"][1]["content"] == ""


def test_route_task_agent_error_is_part_of_payload(client_with, make_env):
    client = client_with(make_env({"response": "financial"}, RuntimeError("backend down")))

    r = client.post("/route-task", json={"userQuery": "How much did we spend?"})
    assert r.status_code == 200
    assert r.json() == {"agent": "financial", "response": {"error": "An error occurred: backend down"}}


def test_route_task_router_failure_is_server_error(client_with, make_env):
    client = client_with(make_env(RuntimeError("inference exploded")))

    r = client.post("/route-task", json={"userQuery": "anything"})
    assert r.status_code == 500
    assert r.json() == {"error": "inference exploded"}


def test_route_task_without_ai_binding(client_with):
    client = client_with(Bindings(ai=None))

    r = client.post("/route-task", json={"userQuery": "anything"})
    assert r.status_code == 500
    assert r.json() == {"error": "AI binding is not configured correctly."}


def test_route_task_rejects_non_object_body(client_with, make_env):
    client = client_with(make_env())

    r = client.post("/route-task", content="not json", headers={"Content-Type": "application/json"})
    assert r.status_code == 400
    assert "error" in r.json()


def test_route_task_with_mock_backend(client_with):
    client = client_with(Bindings(ai=MockInference()))

    r = client.post("/route-task", json={"userQuery": "What venues are on the next tour?"})
    assert r.status_code == 200
    data = r.json()
    assert data["agent"] == "touring"
    assert data["response"]["llmReasoning"].startswith("[mock]")


def test_route_task_blank_reply_is_client_error(client_with, make_env):
    client = client_with(make_env({"response": "", "choices": [{"message": {"content": "   "}}]}))

    r = client.post("/route-task", json={"userQuery": "hello"})
    assert r.status_code == 400
    assert r.json() == {
        "error": "Invalid agent response:    . Expected one of: calendar, financial, audience, touring."
    }


def test_route_task_forwards_non_string_query(client_with, make_env):
    env = make_env({"response": "financial"}, {"response": "ok"})
    client = client_with(env)

    r = client.post("/route-task", json={"userQuery": 5})
    assert r.status_code == 200
    assert env.ai.calls[0][1]["messages"][1]["content"] == "5"
    assert env.ai.calls[1][1]["messages"][1]["content"] == 'Query: "5"'
